import unittest

from crossword_layout.core.constants import CONFLICT_CHAR, InsertOutcome, Orientation
from crossword_layout.core.exceptions import PlacementConflictError
from crossword_layout.core.models import XY
from crossword_layout.engine.charmap import CharMap


class CharMapInsertTests(unittest.TestCase):
    def test_first_insert_updates_indices_and_bounds(self) -> None:
        grid = CharMap()
        self.assertTrue(grid.is_empty)
        self.assertEqual(grid.insert_char(XY(2, -1), "a"), InsertOutcome.FIRST)
        self.assertEqual(grid.insert_char(XY(-1, 3), "a"), InsertOutcome.FIRST)
        self.assertEqual(grid.char_at(XY(2, -1)), "a")
        self.assertEqual(grid.positions_of("a"), [XY(2, -1), XY(-1, 3)])
        self.assertEqual(grid.top_left, XY(-1, -1))
        self.assertEqual(grid.bottom_right, XY(2, 3))
        self.assertEqual(grid.dimensions, XY(4, 5))

    def test_same_char_is_a_crossing_without_mutation(self) -> None:
        grid = CharMap()
        grid.insert_char(XY(0, 0), "x")
        self.assertEqual(grid.insert_char(XY(0, 0), "x"), InsertOutcome.ALREADY_PRESENT)
        self.assertEqual(grid.positions_of("x"), [XY(0, 0)])
        self.assertFalse(grid.has_conflict)

    def test_different_char_marks_conflict(self) -> None:
        grid = CharMap()
        grid.insert_char(XY(0, 0), "x")
        self.assertEqual(grid.insert_char(XY(0, 0), "y"), InsertOutcome.CONFLICT)
        self.assertTrue(grid.has_conflict)
        self.assertEqual(grid.char_at(XY(0, 0)), CONFLICT_CHAR)
        # reverse index is stale after a conflict
        self.assertEqual(grid.positions_of("x"), [XY(0, 0)])
        self.assertEqual(grid.positions_of("y"), [])

    def test_insert_word_counts_crossings(self) -> None:
        grid = CharMap()
        self.assertEqual(grid.insert_word("xab", XY(0, 0), Orientation.HORIZONTAL), 0)
        self.assertEqual(grid.insert_word("xyz", XY(0, 0), Orientation.VERTICAL), 1)
        self.assertEqual(grid.insert_word("qrs", XY(5, 5), Orientation.VERTICAL), 0)
        self.assertTrue(grid.is_occupied(XY(0, 2)))
        self.assertFalse(grid.is_occupied(XY(1, 1)))

    def test_insert_word_reports_every_conflicting_cell(self) -> None:
        grid = CharMap()
        grid.insert_word("abc", XY(0, 0), Orientation.HORIZONTAL)
        with self.assertRaises(PlacementConflictError) as ctx:
            grid.insert_word("xbz", XY(0, 0), Orientation.HORIZONTAL)
        self.assertEqual(ctx.exception.cells, [XY(0, 0), XY(2, 0)])
        self.assertEqual(ctx.exception.word, "xbz")


class CharMapProjectionTests(unittest.TestCase):
    def test_normalized_moves_top_left_to_origin(self) -> None:
        grid = CharMap()
        grid.insert_word("dog", XY(-4, 7), Orientation.VERTICAL)
        normalized = grid.normalized()
        self.assertEqual(normalized.top_left, XY(0, 0))
        self.assertEqual(normalized.bottom_right, XY(0, 2))
        self.assertEqual(normalized.char_at(XY(0, 1)), "o")
        # original untouched
        self.assertEqual(grid.top_left, XY(-4, 7))

    def test_normalized_of_empty_map_is_empty(self) -> None:
        self.assertTrue(CharMap().normalized().is_empty)
        self.assertEqual(CharMap().to_rows("_"), [])

    def test_to_rows_fills_gaps(self) -> None:
        grid = CharMap()
        grid.insert_word("ab", XY(3, 3), Orientation.HORIZONTAL)
        grid.insert_word("bc", XY(4, 3), Orientation.VERTICAL)
        self.assertEqual(grid.to_rows("."), ["ab", ".c"])

    def test_clone_is_independent(self) -> None:
        grid = CharMap()
        grid.insert_word("ab", XY(0, 0), Orientation.HORIZONTAL)
        copy = grid.clone()
        copy.insert_word("ac", XY(0, 0), Orientation.VERTICAL)
        self.assertFalse(grid.is_occupied(XY(0, 1)))
        self.assertEqual(grid.positions_of("a"), [XY(0, 0)])
        self.assertEqual(copy.bottom_right, XY(1, 1))
        self.assertEqual(grid.bottom_right, XY(1, 0))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
