import unittest

from mazepath import GridSnapshot, MazeEvaluator, MazeGenerator, analyze_structure, find_path


class MazeEvaluatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = GridSnapshot.from_text(
            [
                "    ",
                " ## ",
                "    ",
            ]
        )
        self.evaluator = MazeEvaluator(self.grid, (0, 0), (2, 3))

    def test_shortest_path_is_optimal(self) -> None:
        path = find_path(self.grid, (0, 0), (2, 3))
        result = self.evaluator.evaluate(path)
        self.assertTrue(result.is_valid)
        self.assertTrue(result.optimal)
        self.assertEqual(result.path_length, 6)
        self.assertEqual(result.shortest_length, 6)
        self.assertEqual(result.message, "Path is a shortest route from start to goal.")

    def test_path_through_walls_is_rejected(self) -> None:
        path = [(0, 0), (0, 1), (1, 1), (2, 1), (2, 2), (2, 3)]
        result = self.evaluator.evaluate(path)
        self.assertTrue(result.stray_in_walls)
        self.assertFalse(result.is_valid)
        self.assertEqual(result.message, "Path crosses walls.")

    def test_gap_in_path_breaks_connectivity(self) -> None:
        result = self.evaluator.evaluate([(0, 0), (0, 1), (0, 3), (1, 3), (2, 3)])
        self.assertFalse(result.connected)
        self.assertTrue(result.touches_goal)
        self.assertEqual(result.message, "Path is not continuous from start to goal.")

    def test_path_that_stops_early(self) -> None:
        result = self.evaluator.evaluate([(0, 0), (0, 1), (0, 2)])
        self.assertFalse(result.touches_goal)
        self.assertEqual(result.message, "Path does not reach the goal.")

    def test_path_from_wrong_start(self) -> None:
        result = self.evaluator.evaluate([(0, 1), (0, 2), (0, 3), (1, 3), (2, 3)])
        self.assertFalse(result.connected)
        self.assertEqual(result.message, "Path does not begin at the start cell.")

    def test_detour_is_valid_but_not_optimal(self) -> None:
        path = [(0, 0), (0, 1), (0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (2, 3)]
        result = self.evaluator.evaluate(path)
        self.assertTrue(result.is_valid)
        self.assertFalse(result.optimal)
        self.assertEqual(result.path_length, 8)

    def test_empty_path(self) -> None:
        result = self.evaluator.evaluate([])
        self.assertFalse(result.is_valid)
        self.assertEqual(result.message, "Path is empty.")
        self.assertEqual(result.to_dict()["shortest_length"], 6)

    def test_from_record(self) -> None:
        generator = MazeGenerator(7, 9, seed=21)
        record = generator.create_record()
        evaluator = MazeEvaluator.from_record(record.to_dict())
        result = evaluator.evaluate(record.path)
        self.assertEqual(result.is_valid, bool(record.path))
        self.assertEqual(result.optimal, bool(record.path))

    def test_from_record_requires_fields(self) -> None:
        with self.assertRaises(ValueError):
            MazeEvaluator.from_record({"maze_grid": [[0]], "start": [0, 0]})


class StructureReportTests(unittest.TestCase):
    def test_open_grid_has_cycles(self) -> None:
        report = analyze_structure(GridSnapshot.open_grid(3, 3), (0, 0))
        self.assertEqual(report.open_cells, 9)
        self.assertEqual(report.reachable_cells, 9)
        self.assertEqual(report.edge_count, 12)
        self.assertTrue(report.connected)
        self.assertFalse(report.acyclic)

    def test_disconnected_components(self) -> None:
        grid = GridSnapshot.from_text(
            [
                "  # ",
                "####",
                " #  ",
            ]
        )
        report = analyze_structure(grid, (0, 0))
        self.assertEqual(report.components, 4)
        self.assertEqual(report.reachable_cells, 2)
        self.assertFalse(report.connected)
        self.assertTrue(report.acyclic)
        self.assertFalse(report.is_perfect)

    def test_wall_origin_counts_nothing_reachable(self) -> None:
        grid = GridSnapshot.from_text(["# ", "  "])
        report = analyze_structure(grid, (0, 0))
        self.assertEqual(report.reachable_cells, 0)
        self.assertEqual(report.components, 1)
        self.assertTrue(report.is_perfect)
        self.assertEqual(report.to_dict()["edge_count"], 2)


if __name__ == "__main__":
    unittest.main()
