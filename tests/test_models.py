import unittest

from crossword_layout.core.constants import GeneratorMode, Orientation
from crossword_layout.core.exceptions import InvalidModeError
from crossword_layout.core.models import XY, PlacedWord


class XYTests(unittest.TestCase):
    def test_arithmetic(self) -> None:
        self.assertEqual(XY(1, 2) + XY(3, -4), XY(4, -2))
        self.assertEqual(XY(1, 2) - XY(3, -4), XY(-2, 6))
        self.assertEqual(XY(1, -2) * 3, XY(3, -6))
        self.assertEqual(-XY(1, -2), XY(-1, 2))
        self.assertEqual(XY.of((5, 6)), XY(5, 6))

    def test_hashable(self) -> None:
        self.assertEqual(len({XY(0, 0), XY.zero(), XY(0, 1)}), 2)


class OrientationTests(unittest.TestCase):
    def test_step_and_band(self) -> None:
        self.assertEqual(Orientation.HORIZONTAL.step, XY(1, 0))
        self.assertEqual(Orientation.VERTICAL.step, XY(0, 1))
        self.assertEqual(set(Orientation.HORIZONTAL.band), {XY(0, 1), XY(0, -1)})
        self.assertEqual(set(Orientation.VERTICAL.band), {XY(1, 0), XY(-1, 0)})

    def test_tags(self) -> None:
        self.assertEqual(Orientation.HORIZONTAL.value, "hor")
        self.assertEqual(Orientation.VERTICAL.value, "ver")


class GeneratorModeTests(unittest.TestCase):
    def test_parse(self) -> None:
        self.assertIs(GeneratorMode.parse("Automatic"), GeneratorMode.AUTOMATIC)
        self.assertIs(GeneratorMode.parse(GeneratorMode.INPUT_ORDER), GeneratorMode.INPUT_ORDER)
        with self.assertRaises(InvalidModeError):
            GeneratorMode.parse("inputorder")


class PlacedWordTests(unittest.TestCase):
    def test_cells_and_end(self) -> None:
        word = PlacedWord("dog", XY(2, 1), Orientation.VERTICAL)
        self.assertEqual(word.cells, [XY(2, 1), XY(2, 2), XY(2, 3)])
        self.assertEqual(word.end, XY(2, 3))
        self.assertEqual(word.shifted(XY(-2, -1)).origin, XY(0, 0))
        self.assertEqual(len(word), 3)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
