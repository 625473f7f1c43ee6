from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from wordgrid.errors import GridError, InvalidCharacter, ShapeMismatch

logger = logging.getLogger("wordgrid")


def is_grid_letter(ch: str) -> bool:
    return "a" <= ch <= "z"


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    letter: str
    index: int

    def __str__(self) -> str:
        return f"{self.letter}({self.x}:{self.y})"


@dataclass(frozen=True)
class Grid:
    """Immutable width x height letter layout, cells stored row-major."""

    width: int
    height: int
    letters: str
    cells: tuple[Cell, ...]

    def index(self, x: int, y: int) -> int:
        return x + self.width * y

    def cell(self, x: int, y: int) -> Cell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        return self.cells[self.index(x, y)]

    def rows(self) -> list[str]:
        return [self.letters[y * self.width:(y + 1) * self.width] for y in range(self.height)]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)


def build_grid(grid_string: str, width: int, height: int) -> Grid:
    """Validate a flat letter string and lay it out as a grid.

    Raises ShapeMismatch when the length is not width * height and
    InvalidCharacter when anything outside a-z is present.
    """
    if width <= 0 or height <= 0:
        raise GridError(f"Grid dimensions must be positive, got {width}x{height}")
    if len(grid_string) != width * height:
        raise ShapeMismatch(width, height, len(grid_string))

    invalid = tuple(dict.fromkeys(ch for ch in grid_string if not is_grid_letter(ch)))
    if invalid:
        raise InvalidCharacter(invalid)

    cells = tuple(
        Cell(x, y, grid_string[x + width * y], x + width * y)
        for y in range(height)
        for x in range(width)
    )
    grid = Grid(width, height, grid_string, cells)
    logger.debug("Built %dx%d grid: %s", width, height, " / ".join(grid.rows()))
    return grid
