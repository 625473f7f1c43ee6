from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Iterator

from wordgrid.adjacency import AdjacencyGraph, populate_adjacency
from wordgrid.errors import InvalidWord
from wordgrid.grid import Cell, Grid, build_grid, is_grid_letter
from wordgrid.search import find_path
from wordgrid.words import WordsSource

logger = logging.getLogger("wordgrid")


def validate_word(word: str):
    if not word or not all(is_grid_letter(ch) for ch in word):
        raise InvalidWord(word)


@dataclass(frozen=True)
class Solver:
    """Grid and adjacency built once, then evaluated against any number of words."""

    grid: Grid
    graph: AdjacencyGraph

    @classmethod
    def from_string(cls, grid_string: str, width: int, height: int, diagonals: bool = True) -> Solver:
        grid = build_grid(grid_string, width, height)
        return cls(grid, populate_adjacency(grid, diagonals))

    @property
    def diagonals(self) -> bool:
        return self.graph.diagonals

    def locate(self, word: str) -> list[Cell] | None:
        """Cells of the first trace of `word`, trying start cells row-major."""
        for cell in self.grid:
            path = find_path(self.graph, word, cell.index)
            if path is not None:
                return [self.grid.cells[idx] for idx in path]
        return None

    def matches(self, word: str) -> bool:
        return self.locate(word) is not None

    def iter_matches(self, words: Iterable[str], strict: bool = False) -> Iterator[str]:
        for word in words:
            if strict:
                validate_word(word)
            if self.matches(word):
                yield word

    def solve(
        self,
        words: Iterable[str],
        workers: int = 1,
        dedupe: bool = False,
        strict: bool = False,
    ) -> list[str]:
        """Return the traceable words in the order they were given.

        Input duplicates are kept unless `dedupe` is set. With `workers` > 1
        the words are spread over a process pool.
        """
        words = list(words)
        if dedupe:
            words = list(dict.fromkeys(words))
        if strict:
            for word in words:
                validate_word(word)

        if workers > 1 and len(words) > 1:
            chunksize = max(1, len(words) // (workers * 4))
            with ProcessPoolExecutor(max_workers=workers) as executor:
                flags = list(executor.map(self.matches, words, chunksize=chunksize))
            found = [w for w, ok in zip(words, flags) if ok]
        else:
            found = list(self.iter_matches(words))

        logger.info("Matched %d of %d words on %dx%d grid (diagonals=%s)",
                    len(found), len(words), self.grid.width, self.grid.height, self.diagonals)
        return found

    async def included_words(self, source: WordsSource, **kwargs) -> list[str]:
        """Fetch candidates from a word source, then solve."""
        words = await source.get_words()
        return self.solve(words, **kwargs)


def solve(
    grid_string: str,
    width: int,
    height: int,
    words: Iterable[str],
    diagonals: bool = True,
    *,
    workers: int = 1,
    dedupe: bool = False,
    strict: bool = False,
) -> list[str]:
    solver = Solver.from_string(grid_string, width, height, diagonals)
    return solver.solve(words, workers=workers, dedupe=dedupe, strict=strict)
