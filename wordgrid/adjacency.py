from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from wordgrid.grid import Grid


class Neighbors(NamedTuple):
    """Optional neighbor slots of one cell, as flat indices.

    Field order is the enumeration order used by the search.
    """

    top: int | None = None
    left: int | None = None
    right: int | None = None
    bottom: int | None = None
    top_left: int | None = None
    top_right: int | None = None
    bottom_left: int | None = None
    bottom_right: int | None = None

    def present(self) -> tuple[int, ...]:
        return tuple(idx for idx in self if idx is not None)


@dataclass(frozen=True)
class AdjacencyGraph:
    grid: Grid
    diagonals: bool
    _slots: tuple[Neighbors, ...]
    _ordered: tuple[tuple[int, ...], ...]

    def slots(self, index: int) -> Neighbors:
        return self._slots[index]

    def neighbors(self, index: int) -> tuple[int, ...]:
        return self._ordered[index]


def _neighbors_of(grid: Grid, x: int, y: int, diagonals: bool) -> Neighbors:
    can_top = y - 1 >= 0
    can_left = x - 1 >= 0
    can_right = x + 1 < grid.width
    can_bottom = y + 1 < grid.height

    slots = {
        "top": grid.index(x, y - 1) if can_top else None,
        "left": grid.index(x - 1, y) if can_left else None,
        "right": grid.index(x + 1, y) if can_right else None,
        "bottom": grid.index(x, y + 1) if can_bottom else None,
    }
    if diagonals:
        # A diagonal exists only when both edges it crosses exist
        slots["top_left"] = grid.index(x - 1, y - 1) if can_top and can_left else None
        slots["top_right"] = grid.index(x + 1, y - 1) if can_top and can_right else None
        slots["bottom_left"] = grid.index(x - 1, y + 1) if can_bottom and can_left else None
        slots["bottom_right"] = grid.index(x + 1, y + 1) if can_bottom and can_right else None
    return Neighbors(**slots)


def populate_adjacency(grid: Grid, diagonals: bool) -> AdjacencyGraph:
    """Precompute the neighbor slots of every cell once per grid."""
    slots = tuple(_neighbors_of(grid, cell.x, cell.y, diagonals) for cell in grid)
    return AdjacencyGraph(grid, diagonals, slots, tuple(n.present() for n in slots))
