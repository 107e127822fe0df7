"""Data models supporting the layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple, Union

if TYPE_CHECKING:
    from .constants import Orientation


@dataclass(frozen=True)
class XY:
    """Grid coordinate; ``x`` grows to the right and ``y`` grows downwards."""

    x: int
    y: int

    @classmethod
    def zero(cls) -> "XY":
        return cls(0, 0)

    @classmethod
    def one(cls) -> "XY":
        return cls(1, 1)

    @classmethod
    def of(cls, value: Union["XY", Tuple[int, int]]) -> "XY":
        if isinstance(value, XY):
            return value
        x, y = value
        return cls(int(x), int(y))

    def __add__(self, other: "XY") -> "XY":
        return XY(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "XY") -> "XY":
        return XY(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> "XY":
        return XY(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "XY":
        return XY(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class PlacedWord:
    """One word placed on the layout, starting at ``origin``."""

    text: str
    origin: XY
    orientation: "Orientation"

    def __len__(self) -> int:
        return len(self.text)

    @property
    def cells(self) -> List[XY]:
        step = self.orientation.step
        return [self.origin + step * i for i in range(len(self.text))]

    @property
    def end(self) -> XY:
        return self.origin + self.orientation.step * (len(self.text) - 1)

    def shifted(self, offset: XY) -> "PlacedWord":
        return PlacedWord(self.text, self.origin + offset, self.orientation)
