"""Shared constants and enumerations for the layout engine."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from .exceptions import InvalidModeError
from .models import XY


CONFLICT_CHAR = "!"
DEFAULT_FILL_CHAR = "_"


class Orientation(str, Enum):
    """Axis along which a word's letters are laid out."""

    HORIZONTAL = "hor"
    VERTICAL = "ver"

    @property
    def step(self) -> XY:
        return XY(1, 0) if self is Orientation.HORIZONTAL else XY(0, 1)

    @property
    def band(self) -> Tuple[XY, XY]:
        """The two unit vectors perpendicular to ``step``."""

        side = XY(0, 1) if self is Orientation.HORIZONTAL else XY(1, 0)
        return side, -side


class InsertOutcome(Enum):
    """Result of projecting one character onto a cell."""

    FIRST = "first"
    ALREADY_PRESENT = "already_present"
    CONFLICT = "conflict"


class GeneratorMode(str, Enum):
    """Word selection strategy for the greedy generator."""

    AUTOMATIC = "Automatic"
    INPUT_ORDER = "InputOrder"

    @classmethod
    def parse(cls, value: "GeneratorMode | str") -> "GeneratorMode":
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == value:
                return mode
        raise InvalidModeError(f"bad generator mode: {value!r}")
