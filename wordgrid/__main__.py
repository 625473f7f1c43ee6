"""
Word grid solver console program.

Usage:
    python -m wordgrid [GRID] [--width W] [--height H] [options]

Examples:
    python -m wordgrid brpgejkke --width 3 --height 3 --list
    python -m wordgrid abcd --width 2 --height 2 --word ad --word abdc --no-diagonals
    python -m wordgrid brpgejkke --words-file words.txt --workers 4
"""
import argparse
import asyncio
import logging
import sys

import httpx

from wordgrid.errors import GridError, InvalidWord
from wordgrid.metrics import SolveTimer
from wordgrid.settings import settings
from wordgrid.solver import Solver
from wordgrid.words import FileWordsSource, HttpLinesWordsSource, InMemoryWordsSource, default_source

logger = logging.getLogger("wordgrid")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordgrid", description="Find the words traceable in a letter grid")
    parser.add_argument("grid", nargs="?", default=settings.GRID_STRING,
                        help=f"Flat lowercase grid string, row by row (default: {settings.GRID_STRING})")
    parser.add_argument("--width", type=int, default=settings.WIDTH,
                        help=f"Grid width (default: {settings.WIDTH})")
    parser.add_argument("--height", type=int, default=settings.HEIGHT,
                        help=f"Grid height (default: {settings.HEIGHT})")
    parser.add_argument("--no-diagonals", dest="diagonals", action="store_false",
                        default=settings.DIAGONALS, help="Only allow orthogonal steps")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--words-url", default=None,
                        help="Line-per-word text resource (default: WORDS_URL setting, or WORDS_PATH when it is empty)")
    source.add_argument("--words-file", default=None, help="Local line-per-word file")
    source.add_argument("--word", dest="words", action="append", default=None,
                        help="Candidate word; may be repeated")
    parser.add_argument("--workers", type=int, default=settings.WORKERS,
                        help=f"Processes used to evaluate words (default: {settings.WORKERS})")
    parser.add_argument("--dedupe", action="store_true", default=settings.DEDUPE_OUTPUT,
                        help="Drop repeated words from the output")
    parser.add_argument("--strict", action="store_true", default=settings.STRICT_WORDS,
                        help="Fail on empty or non a-z candidate words")
    parser.add_argument("--list", action="store_true", help="Print every matched word")
    return parser


def make_source(args):
    if args.words:
        return InMemoryWordsSource(*args.words)
    if args.words_file:
        return FileWordsSource(args.words_file)
    if args.words_url:
        return HttpLinesWordsSource(args.words_url, settings.HTTP_TIMEOUT)
    return default_source(settings.WORDS_URL, settings.WORDS_PATH, settings.HTTP_TIMEOUT)


async def run(args) -> list[str]:
    timer = SolveTimer()
    with timer.stage("build"):
        solver = Solver.from_string(args.grid, args.width, args.height, args.diagonals)
    with timer.stage("fetch_words"):
        candidates = await make_source(args).get_words()
    with timer.stage("solve"):
        words = solver.solve(candidates, workers=args.workers, dedupe=args.dedupe, strict=args.strict)
    print(timer.report(len(words)))
    return words


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        words = asyncio.run(run(args))
    except (GridError, InvalidWord, OSError, httpx.HTTPError) as e:
        print(f"Error: {e}")
        return 1

    if args.list:
        for word in words:
            print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
