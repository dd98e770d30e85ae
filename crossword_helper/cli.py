"""CLI entrypoint for the crossword layout helper."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from .core.constants import DEFAULT_GRID_SIZE, MAX_GRID_SIZE, MIN_GRID_SIZE
from .core.exceptions import CrosswordError
from .core.models import LayoutResult
from .data.normalization import parse_word_list
from .engine.generator import CrosswordGenerator, GeneratorConfig
from .engine.numbering import generate_numbering
from .engine.validator import LayoutValidator
from .io.datamuse_client import DatamuseClient
from .io.layout_store import LayoutDocument, load_layout, save_layout
from .io.suggestions import is_lookup_pattern
from .utils.logger import LEVEL_NAMES, configure_logging
from .utils.pretty import print_layout_report


def grid_size(value: str) -> int:
    size = int(value)
    if not MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
        raise argparse.ArgumentTypeError(
            f"grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}"
        )
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay out a list of words as an interlocking crossword grid",
    )
    parser.add_argument("--width", type=grid_size, default=DEFAULT_GRID_SIZE, help="Grid width in cells")
    parser.add_argument("--height", type=grid_size, default=DEFAULT_GRID_SIZE, help="Grid height in cells")
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Words to place")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the shuffle strategies")
    parser.add_argument("--output", type=Path, help="Write the layout document to this JSON file")
    parser.add_argument("--load", type=Path, metavar="FILE", help="Load and print a saved layout document")
    parser.add_argument(
        "--suggest",
        metavar="PATTERN",
        help="Look up words matching a pattern such as C?T ('?' marks an unknown letter)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LEVEL_NAMES,
        default="WARNING",
        help="Logging level",
    )
    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    modes = [bool(args.words or args.words_file), args.load is not None, args.suggest is not None]
    if sum(modes) != 1:
        parser.error("choose exactly one of --words/--words-file, --load or --suggest")

    try:
        if args.suggest is not None:
            _run_suggest(parser, args.suggest)
        elif args.load is not None:
            _run_load(args.load)
        else:
            _run_generate(parser, args)
    except CrosswordError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def _run_generate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    lines: List[str] = list(args.words or [])
    if args.words_file:
        lines.extend(args.words_file.read_text(encoding="utf-8").splitlines())
    try:
        word_list = parse_word_list(lines)
    except CrosswordError as exc:
        parser.error(str(exc))

    generator = CrosswordGenerator(GeneratorConfig(width=args.width, height=args.height, seed=args.seed))
    result = generator.generate(word_list.words)
    validation = LayoutValidator().validate(result, word_list.words)
    if not validation.ok:
        raise CrosswordError(f"Layout validation failed: {validation.messages}")

    numbering = generate_numbering(result.grid)
    print_layout_report(result, numbering, display_names=word_list.display_names)

    if args.output:
        document = LayoutDocument.from_result(
            result, words=word_list.words, display_names=word_list.display_names
        )
        save_layout(document, args.output)


def _run_load(path: Path) -> None:
    document = load_layout(path)
    grid = document.build_grid()
    numbering = generate_numbering(grid)
    placed = {placement.word for placement in document.placements}
    result = LayoutResult(
        grid=grid,
        placements=list(document.placements),
        unplaced_words=[word for word in document.words if word not in placed],
    )
    print_layout_report(
        result,
        numbering,
        display_names=document.display_names,
        clues=document.clues.pruned(numbering),
    )


def _run_suggest(parser: argparse.ArgumentParser, pattern: str) -> None:
    pattern = pattern.strip().upper()
    if not is_lookup_pattern(pattern):
        parser.error("pattern needs at least one letter and one '?'")
    suggestions = DatamuseClient().lookup(pattern)
    print(json.dumps(suggestions))


if __name__ == "__main__":  # pragma: no cover
    main()
