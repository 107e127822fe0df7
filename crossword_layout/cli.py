"""Command-line interface for the crossword layout generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .core.constants import DEFAULT_FILL_CHAR, GeneratorMode
from .core.exceptions import UnplaceableWordError
from .engine.generator import CrosswordGenerator, GeneratorConfig
from .io.export import result_to_jsonable
from .utils.logger import configure_logging
from .utils.pretty import pretty_print_layout, print_layout_stats


def parse_word_lines(lines: Iterable[str], *, with_definitions: bool = False) -> List[str]:
    """Collect words from text lines. Blank lines and # comments are skipped.

    With ``with_definitions`` each line reads ``WORD definition...``: only the
    first token is kept and repeated words keep their first occurrence.
    """
    entries: List[str] = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if with_definitions:
            line = line.split()[0]
            if line in entries:
                continue
        entries.append(line)
    return entries


def parse_words_file(path: Path, *, with_definitions: bool = False) -> List[str]:
    """Read words from a file, one entry per line."""
    return parse_word_lines(
        path.read_text(encoding="utf-8").splitlines(), with_definitions=with_definitions
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay out a list of words as a compact crossword grid",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to place, in input order",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored); stdin is read when no words are given",
    )
    parser.add_argument(
        "--definitions",
        action="store_true",
        help="Input lines are 'WORD definition...'; only the first token is placed",
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=[m.value for m in GeneratorMode],
        default=GeneratorMode.INPUT_ORDER.value,
        help="Automatic places longest words first and scans all pending words each round",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of dropping words that cannot be placed",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["grid", "json"],
        default="grid",
        help="Output format",
    )
    parser.add_argument(
        "--fill-char",
        type=str,
        default=DEFAULT_FILL_CHAR,
        help="Character used for empty cells in the grid view",
    )
    parser.add_argument("--stats", action="store_true", help="Print layout statistics")
    parser.add_argument("--output", type=Path, help="Optional path to write the output to")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if len(args.fill_char) != 1:
        parser.error("--fill-char must be a single character")

    words: List[str] = []
    if args.words:
        words.extend(parse_word_lines(args.words, with_definitions=args.definitions))
    if args.words_file:
        words.extend(parse_words_file(args.words_file, with_definitions=args.definitions))
    if not args.words and not args.words_file:
        words.extend(parse_word_lines(sys.stdin, with_definitions=args.definitions))
    if not words:
        parser.error("no words given")

    config = GeneratorConfig.from_mode_name(args.mode, strict=args.strict)
    try:
        result = CrosswordGenerator(config).generate(words)
    except UnplaceableWordError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.format == "json":
        output_text = json.dumps(result_to_jsonable(result, args.fill_char), ensure_ascii=False, indent=2)
        if args.output:
            args.output.write_text(output_text, encoding="utf-8")
        else:
            print(output_text)
        return 0

    if args.output:
        with args.output.open("w", encoding="utf-8") as stream:
            pretty_print_layout(result.layout, fill_char=args.fill_char, stream=stream)
            if args.stats:
                print(file=stream)
                print_layout_stats(result, stream=stream)
    else:
        pretty_print_layout(result.layout, label="Final:\n", fill_char=args.fill_char)
        if args.stats:
            print()
            print_layout_stats(result)
    return 0
