from wordgrid.adjacency import AdjacencyGraph, Neighbors, populate_adjacency
from wordgrid.errors import GridError, InvalidCharacter, InvalidWord, ShapeMismatch
from wordgrid.grid import Cell, Grid, build_grid
from wordgrid.search import can_trace, find_path
from wordgrid.solver import Solver, solve

__all__ = [
    "AdjacencyGraph",
    "Cell",
    "Grid",
    "GridError",
    "InvalidCharacter",
    "InvalidWord",
    "Neighbors",
    "ShapeMismatch",
    "Solver",
    "build_grid",
    "can_trace",
    "find_path",
    "populate_adjacency",
    "solve",
]
