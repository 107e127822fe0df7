"""Layout of placed words: positions, orientations and crossing bookkeeping."""

from __future__ import annotations

from typing import Dict, List, Sequence, Set, Tuple, Union

from ..core.constants import DEFAULT_FILL_CHAR, Orientation
from ..core.models import XY, PlacedWord
from ..utils.logger import get_logger
from .charmap import CharMap


LOGGER = get_logger(__name__)

Placement = Tuple[XY, Orientation]


class Layout:
    """Ordered placed words plus the character map built from them.

    The char map is fully defined by the placed words and is only kept to
    avoid rebuilding it for every query. ``crossings`` counts the letters
    that landed on an existing matching letter.
    """

    def __init__(self) -> None:
        self._words: List[PlacedWord] = []
        self._char_map = CharMap()
        self._crossings = 0

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> Sequence[PlacedWord]:
        return tuple(self._words)

    @property
    def char_map(self) -> CharMap:
        return self._char_map

    @property
    def is_empty(self) -> bool:
        return not self._words

    def clone(self) -> "Layout":
        other = Layout()
        other._words = list(self._words)
        other._char_map = self._char_map.clone()
        other._crossings = self._crossings
        return other

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def insert_at(
        self,
        text: str,
        origin: Union[XY, Tuple[int, int]],
        orientation: Orientation,
    ) -> None:
        """Place ``text`` starting at ``origin``.

        Raises :class:`PlacementConflictError` when a letter disagrees with
        the grid. The word is still recorded and the grid is left holding the
        conflict marker, so the instance must be thrown away after a failure.
        """

        word = PlacedWord(text, XY.of(origin), orientation)
        self._words.append(word)
        crossings = self._char_map.insert_word(word.text, word.origin, word.orientation)
        self._crossings += crossings

    def candidate_placements(self, word: str) -> List[Placement]:
        """List start positions where ``word`` fits without breaking the layout.

        A word fits when it only lands on equal letters and does not stick to
        another word side by side or extend one in line.

        Two identical words may come out fully overlapping instead of
        crossing; letter anchoring cannot tell the difference.
        """

        if self.is_empty:
            LOGGER.debug("First word %s goes to the origin", word)
            return [(XY.zero(), Orientation.HORIZONTAL), (XY.zero(), Orientation.VERTICAL)]

        placements: List[Placement] = []
        seen: Set[Placement] = set()
        for index, char in enumerate(word):
            anchors = self._char_map.positions_of(char)
            if not anchors:
                continue
            for orientation in (Orientation.HORIZONTAL, Orientation.VERTICAL):
                start_delta = orientation.step * -index
                for anchor in anchors:
                    start = anchor + start_delta
                    if (start, orientation) in seen:
                        continue
                    seen.add((start, orientation))
                    if self._would_conflict_with_other_char(word, start, orientation):
                        LOGGER.debug("Position %s %s would conflict for %s", start, orientation.value, word)
                        continue
                    if self._would_envelope_overlap(len(word), start, orientation):
                        LOGGER.debug("Position %s %s would touch another word for %s", start, orientation.value, word)
                        continue
                    placements.append((start, orientation))
        LOGGER.debug("%d candidate placements for %s", len(placements), word)
        return placements

    def _would_conflict_with_other_char(self, word: str, start: XY, orientation: Orientation) -> bool:
        step = orientation.step
        pos = start
        for char in word:
            existing = self._char_map.char_at(pos)
            if existing is not None and existing != char:
                return True
            pos = pos + step
        return False

    def _would_envelope_overlap(self, length: int, start: XY, orientation: Orientation) -> bool:
        step = orientation.step
        # Cells right before and right after the word would glue it to a neighbour.
        for tip in (-1, length):
            if self._char_map.is_occupied(start + step * tip):
                return True

        for i in range(length):
            pos = start + step * i
            if self._char_map.is_occupied(pos):
                continue
            for side in orientation.band:
                if self._char_map.is_occupied(pos + side):
                    return True
        return False

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------
    def area(self) -> int:
        dim = self._char_map.dimensions
        return dim.x * dim.y

    def crossings_count(self) -> int:
        return self._crossings

    # ------------------------------------------------------------------
    # Finalisation
    # ------------------------------------------------------------------
    def normalize(self) -> "Layout":
        """Shift every word so the minimum x and y become 0."""

        if self.is_empty:
            return self
        min_x = min(word.origin.x for word in self._words)
        min_y = min(word.origin.y for word in self._words)
        offset = XY(-min_x, -min_y)
        layout = Layout()
        for word in self._words:
            layout.insert_at(word.text, word.origin + offset, word.orientation)
        return layout

    def words_with_ids(self) -> List[Tuple[PlacedWord, int]]:
        """Pair each word with the number of its start cell.

        Start cells are numbered from 1 top to bottom, left to right; words
        starting on the same cell share a number.
        """

        pos_to_id: Dict[XY, int] = {}
        for word in sorted(self._words, key=lambda w: (w.origin.y, w.origin.x)):
            if word.origin not in pos_to_id:
                pos_to_id[word.origin] = len(pos_to_id) + 1
        return [(word, pos_to_id[word.origin]) for word in self._words]

    def render(self, fill_char: str = DEFAULT_FILL_CHAR) -> str:
        if self._char_map.is_empty:
            return "[]"
        return "\n".join(self._char_map.to_rows(fill_char))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Layout(words={len(self._words)}, crossings={self._crossings}, area={self.area()})"
