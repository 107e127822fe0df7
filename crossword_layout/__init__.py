"""Crossword layout engine: places a word list on a compact crossing grid.

This package exposes the public API surface via:

- ``crossword_layout.engine.generator.CrosswordGenerator``: greedy word-by-word placement.
- ``crossword_layout.engine.layout.Layout``: placed words, crossings and normalization.
- ``crossword_layout.engine.generator.generate_crossword``: one-call convenience wrapper.
"""

from .core.constants import GeneratorMode, Orientation
from .engine.generator import (
    Comparator,
    CrosswordGenerator,
    GenerationResult,
    GeneratorConfig,
    generate_crossword,
)
from .engine.layout import Layout

__all__ = [
    "Comparator",
    "CrosswordGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorMode",
    "Layout",
    "Orientation",
    "generate_crossword",
]

__version__ = "0.1.0"
