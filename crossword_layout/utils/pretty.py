"""Pretty-print helpers for crossword layouts."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING

from ..core.constants import DEFAULT_FILL_CHAR

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult
    from ..engine.layout import Layout


def format_layout(layout: Layout, fill_char: str = DEFAULT_FILL_CHAR) -> str:
    return layout.render(fill_char)


def pretty_print_layout(
    layout: Layout,
    *,
    label: str | None = None,
    fill_char: str = DEFAULT_FILL_CHAR,
    stream=None,
) -> None:
    """Print the layout grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_layout(layout, fill_char), file=stream)


def print_layout_stats(result: GenerationResult, *, stream=None) -> None:
    """Print comprehensive stats for a generated layout."""

    stream = stream or sys.stdout
    layout = result.layout
    dim = layout.char_map.dimensions
    area = layout.area()
    letters = sum(1 for _ in layout.char_map.cells())

    print("--- Grid ---", file=stream)
    print(f"  Size:          {dim.x} x {dim.y} ({area} cells)", file=stream)
    if area:
        print(f"  Letters:       {letters} ({letters / area * 100:.0f}%)", file=stream)
    print(f"  Crossings:     {layout.crossings_count()}", file=stream)

    lengths = [len(word) for word in layout.words]
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Mode:          {result.mode.value}", file=stream)
    print(f"  Placed:        {len(lengths)} in {result.rounds} rounds", file=stream)
    if lengths:
        dist_parts = [f"{l}:{c}" for l, c in sorted(Counter(lengths).items())]
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
    if result.dropped_words:
        print(f"  Dropped:       {', '.join(result.dropped_words)}", file=stream)
