"""Custom exception hierarchy for crossword layout generation."""

from __future__ import annotations

from typing import Iterable, List, Sequence


class CrosswordError(Exception):
    """Base exception for layout failures."""


class PlacementConflictError(CrosswordError):
    """Raised when a placement puts two different letters on the same cell."""

    def __init__(self, word: str, cells: Iterable) -> None:
        self.word = word
        self.cells: List = list(cells)
        super().__init__(
            f"Letter conflict placing '{word}' at {', '.join(str(c) for c in self.cells)}"
        )


class UnplaceableWordError(CrosswordError):
    """Raised in strict mode when no legal position exists for the pending words."""

    def __init__(self, words: Sequence[str]) -> None:
        self.words = list(words)
        super().__init__(f"Failed to insert words: {self.words}")


class InvalidModeError(CrosswordError, ValueError):
    """Raised when the generator mode selector is not recognized."""


class ValidationError(CrosswordError):
    """Raised when the layout integrity checks fail."""
