"""JSON-ready views of generated layouts for front-end consumers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

from ..core.constants import DEFAULT_FILL_CHAR

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult
    from ..engine.layout import Layout


def layout_to_jsonable(layout: Layout) -> List[Dict[str, Any]]:
    """One entry per placed word, numbered by start cell."""

    return [
        {
            "word": word.text,
            "id": word_id,
            "x": word.origin.x,
            "y": word.origin.y,
            "orientation": word.orientation.value,
        }
        for word, word_id in layout.words_with_ids()
    ]


def result_to_jsonable(result: GenerationResult, fill_char: str = DEFAULT_FILL_CHAR) -> Dict[str, Any]:
    layout = result.layout
    return {
        "mode": result.mode.value,
        "words": layout_to_jsonable(layout),
        "dropped_words": list(result.dropped_words),
        "area": layout.area(),
        "crossings": layout.crossings_count(),
        "grid": layout.char_map.to_rows(fill_char),
    }
