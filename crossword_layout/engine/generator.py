"""Greedy crossword layout generation.

Words are placed one per round. Each round tries every legal placement of
the words in scope on a clone of the current layout, ranks the trial layouts
with a comparator chain and commits the best one. Generation stops when all
words are placed or a round finds nothing placeable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import GeneratorMode
from ..core.exceptions import UnplaceableWordError
from ..utils.logger import get_logger
from .layout import Layout


LOGGER = get_logger(__name__)


class Comparator(str, Enum):
    """Ranking strategies for trial layouts; a positive result prefers the candidate."""

    CROSSINGS = "crossings"
    AREA = "area"

    def compare(self, candidate: Layout, best: Layout) -> int:
        if self is Comparator.CROSSINGS:
            return _sign(candidate.crossings_count() - best.crossings_count())
        return _sign(best.area() - candidate.area())


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_layouts(comparators: Sequence[Comparator], candidate: Layout, best: Layout) -> int:
    """Apply ``comparators`` in order; the first non-tie decides."""

    for comparator in comparators:
        result = comparator.compare(candidate, best)
        if result:
            return result
    return 0


# Ranking by area in automatic mode keeps the first words in a tiny shape that
# later words cannot extend, so only input-order mode uses it.
DEFAULT_COMPARATORS: Dict[GeneratorMode, Tuple[Comparator, ...]] = {
    GeneratorMode.AUTOMATIC: (Comparator.CROSSINGS,),
    GeneratorMode.INPUT_ORDER: (Comparator.CROSSINGS, Comparator.AREA),
}


@dataclass
class GeneratorConfig:
    mode: GeneratorMode = GeneratorMode.INPUT_ORDER
    comparators: Optional[Sequence[Comparator]] = None
    strict: bool = False

    def __post_init__(self) -> None:
        self.mode = GeneratorMode.parse(self.mode)

    @classmethod
    def from_mode_name(cls, name: str, *, strict: bool = False) -> "GeneratorConfig":
        return cls(mode=GeneratorMode.parse(name), strict=strict)

    def resolved_comparators(self) -> Tuple[Comparator, ...]:
        if self.comparators is not None:
            return tuple(self.comparators)
        return DEFAULT_COMPARATORS[self.mode]


@dataclass
class GenerationResult:
    layout: Layout
    mode: GeneratorMode
    dropped_words: List[str] = field(default_factory=list)
    rounds: int = 0

    @property
    def placed_words(self) -> List[str]:
        return [word.text for word in self.layout.words]


class CrosswordGenerator:
    """Grows a layout word by word, keeping the best trial of each round."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.comparators = self.config.resolved_comparators()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str]) -> GenerationResult:
        pending = self._initial_pending(words)
        LOGGER.info(
            "Generating layout for %d words in %s mode", len(pending), self.config.mode.value
        )

        layout = Layout()
        rounds = 0
        while pending:
            best = self._best_trial(layout, pending)
            if best is None:
                LOGGER.warning("Failed to insert words: %s", pending)
                if self.config.strict:
                    raise UnplaceableWordError(pending)
                break
            layout, index = best
            committed = pending.pop(index)
            rounds += 1
            LOGGER.debug(
                "Round %d committed %s (crossings=%d, area=%d)",
                rounds, committed, layout.crossings_count(), layout.area(),
            )

        result = GenerationResult(
            layout=layout.normalize(),
            mode=self.config.mode,
            dropped_words=list(pending),
            rounds=rounds,
        )
        LOGGER.info(
            "Layout completed with %d words, %d crossings, %d dropped",
            len(result.layout), result.layout.crossings_count(), len(result.dropped_words),
        )
        return result

    # ------------------------------------------------------------------
    # Rounds
    # ------------------------------------------------------------------
    def _initial_pending(self, words: Sequence[str]) -> List[str]:
        pending: List[str] = []
        for word in words:
            if not isinstance(word, str) or not word:
                raise ValueError(f"Words must be non-empty strings, got {word!r}")
            pending.append(word)
        if self.config.mode is GeneratorMode.AUTOMATIC:
            # Longest first; sort is stable so equal lengths keep input order.
            pending.sort(key=len, reverse=True)
        return pending

    def _words_in_scope(self, pending: Sequence[str]) -> Sequence[str]:
        if self.config.mode is GeneratorMode.INPUT_ORDER:
            return pending[:1]
        return pending

    def _best_trial(self, layout: Layout, pending: Sequence[str]) -> Optional[Tuple[Layout, int]]:
        best: Optional[Tuple[Layout, int]] = None
        for index, word in enumerate(self._words_in_scope(pending)):
            for origin, orientation in layout.candidate_placements(word):
                trial = layout.clone()
                trial.insert_at(word, origin, orientation)
                if best is None:
                    best = (trial, index)
                    continue
                if compare_layouts(self.comparators, trial, best[0]) > 0:
                    LOGGER.debug("Trial %s at %s %s is better", word, origin, orientation.value)
                    best = (trial, index)
        return best


def generate_crossword(words: Sequence[str], mode: GeneratorMode | str = GeneratorMode.INPUT_ORDER) -> Layout:
    """Build a normalized layout using the default comparators of ``mode``."""

    config = GeneratorConfig(mode=GeneratorMode.parse(mode))
    return CrosswordGenerator(config).generate(words).layout
