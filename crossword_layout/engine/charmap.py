"""Sparse character grid with position and letter indices."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from ..core.constants import CONFLICT_CHAR, InsertOutcome, Orientation
from ..core.exceptions import PlacementConflictError
from ..core.models import XY


class CharMap:
    """Projection of placed words onto grid cells.

    ``pos_to_char`` holds one letter per occupied cell and ``char_to_pos``
    mirrors it as a reverse index used to anchor new words on existing
    letters. Once a conflict is recorded the conflicting cell shows
    :data:`CONFLICT_CHAR` and the reverse index no longer reflects it; such a
    map is only kept around for inspection.
    """

    def __init__(self) -> None:
        self.pos_to_char: Dict[XY, str] = {}
        self.char_to_pos: Dict[str, List[XY]] = {}
        self.top_left: Optional[XY] = None
        self.bottom_right: Optional[XY] = None
        self.has_conflict = False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert_char(self, pos: XY, char: str) -> InsertOutcome:
        existing = self.pos_to_char.get(pos)
        if existing is None:
            self.pos_to_char[pos] = char
            self.char_to_pos.setdefault(char, []).append(pos)
            self._update_corners(pos)
            return InsertOutcome.FIRST
        if existing == char:
            return InsertOutcome.ALREADY_PRESENT
        self.has_conflict = True
        self.pos_to_char[pos] = CONFLICT_CHAR
        self._update_corners(pos)
        return InsertOutcome.CONFLICT

    def insert_word(self, text: str, origin: XY, orientation: Orientation) -> int:
        """Project ``text`` onto the map and return how many cells it crossed.

        Every letter is written even after a conflict so the whole word shows
        up in the grid; the conflict is reported once all letters are in.
        """

        step = orientation.step
        pos = origin
        crossings = 0
        conflicts: List[XY] = []
        for char in text:
            outcome = self.insert_char(pos, char)
            if outcome is InsertOutcome.ALREADY_PRESENT:
                crossings += 1
            elif outcome is InsertOutcome.CONFLICT:
                conflicts.append(pos)
            pos = pos + step
        if conflicts:
            raise PlacementConflictError(text, conflicts)
        return crossings

    def _update_corners(self, pos: XY) -> None:
        if self.top_left is None or self.bottom_right is None:
            self.top_left = pos
            self.bottom_right = pos
            return
        self.top_left = XY(min(pos.x, self.top_left.x), min(pos.y, self.top_left.y))
        self.bottom_right = XY(max(pos.x, self.bottom_right.x), max(pos.y, self.bottom_right.y))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_empty(self) -> bool:
        return not self.pos_to_char

    def is_occupied(self, pos: XY) -> bool:
        return pos in self.pos_to_char

    def char_at(self, pos: XY) -> Optional[str]:
        return self.pos_to_char.get(pos)

    def positions_of(self, char: str) -> List[XY]:
        return list(self.char_to_pos.get(char, ()))

    def cells(self) -> Iterator[Tuple[XY, str]]:
        return iter(self.pos_to_char.items())

    @property
    def dimensions(self) -> XY:
        """Width and height of the bounding box, ``(0,0)`` when empty."""

        if self.top_left is None or self.bottom_right is None:
            return XY.zero()
        return self.bottom_right - self.top_left + XY.one()

    # ------------------------------------------------------------------
    # Derived maps
    # ------------------------------------------------------------------
    def normalized(self) -> "CharMap":
        """Return a copy translated so the top-left corner is ``(0,0)``."""

        grid = CharMap()
        if self.top_left is None:
            return grid
        offset = -self.top_left
        for pos, char in self.pos_to_char.items():
            grid.insert_char(pos + offset, char)
        grid.has_conflict = self.has_conflict
        return grid

    def to_rows(self, fill_char: str) -> List[str]:
        grid = self.normalized()
        dim = grid.dimensions
        rows = [[fill_char] * dim.x for _ in range(dim.y)]
        for pos, char in grid.pos_to_char.items():
            rows[pos.y][pos.x] = char
        return ["".join(row) for row in rows]

    def clone(self) -> "CharMap":
        other = CharMap()
        other.pos_to_char = dict(self.pos_to_char)
        other.char_to_pos = {char: list(positions) for char, positions in self.char_to_pos.items()}
        other.top_left = self.top_left
        other.bottom_right = self.bottom_right
        other.has_conflict = self.has_conflict
        return other
