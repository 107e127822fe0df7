"""Deterministic rule validation for generated layouts."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List

from ..core.constants import CONFLICT_CHAR
from ..core.exceptions import ValidationError
from ..utils.logger import get_logger
from .layout import Layout


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class LayoutValidator:
    """Runs deterministic validation over a finished layout."""

    def __init__(self, require_normalized: bool = True) -> None:
        self.require_normalized = require_normalized

    def validate(self, layout: Layout) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_no_conflicts(layout)
            self._check_letters_match(layout)
            self._check_word_tips(layout)
            self._check_crossing_count(layout)
            if self.require_normalized:
                self._check_normalized(layout)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_no_conflicts(self, layout: Layout) -> None:
        char_map = layout.char_map
        if char_map.has_conflict:
            raise ValidationError("Layout recorded a letter conflict")
        for pos, char in char_map.cells():
            if char == CONFLICT_CHAR:
                raise ValidationError(f"Conflict marker at {pos}")

    def _check_letters_match(self, layout: Layout) -> None:
        for word in layout.words:
            for pos, letter in zip(word.cells, word.text):
                if layout.char_map.char_at(pos) != letter:
                    raise ValidationError(f"Word '{word.text}' does not match the grid at {pos}")

    def _check_word_tips(self, layout: Layout) -> None:
        for word in layout.words:
            step = word.orientation.step
            for tip, edge in ((word.origin - step, word.origin), (word.end + step, word.end)):
                if not layout.char_map.is_occupied(tip):
                    continue
                # A longer word on the same line may run through both cells.
                if any(
                    other is not word
                    and other.orientation is word.orientation
                    and tip in other.cells
                    and edge in other.cells
                    for other in layout.words
                ):
                    continue
                raise ValidationError(
                    f"Word '{word.text}' at {word.origin} runs into an occupied cell at {tip}"
                )

    def _check_crossing_count(self, layout: Layout) -> None:
        coverage = Counter(pos for word in layout.words for pos in word.cells)
        expected = sum(count - 1 for count in coverage.values())
        if expected != layout.crossings_count():
            raise ValidationError(
                f"Crossing count {layout.crossings_count()} does not match grid coverage {expected}"
            )

    def _check_normalized(self, layout: Layout) -> None:
        if layout.is_empty:
            return
        top_left = layout.char_map.top_left
        if top_left is None or (top_left.x, top_left.y) != (0, 0):
            raise ValidationError(f"Layout is not normalized, top-left is {top_left}")
