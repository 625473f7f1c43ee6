from __future__ import annotations

from wordgrid.adjacency import AdjacencyGraph


def find_path(graph: AdjacencyGraph, word: str, start: int) -> list[int] | None:
    """Trace `word` from cell `start` using DFS with bitmask visited tracking.

    Returns the flat indices of the first trace found, in word order, or
    None. Neighbors are tried in the graph's fixed order and the search
    stops at the first full-length path. The walk keeps its own stack, so
    word length is bounded only by the cell count.
    """
    letters = graph.grid.letters
    last = len(word) - 1
    # An empty word never matches; a trace cannot be longer than the grid
    if last < 0 or last >= len(letters) or letters[start] != word[0]:
        return None
    if last == 0:
        return [start]

    path = [start]
    branches = [iter(graph.neighbors(start))]
    visited = 1 << start
    while branches:
        pos = len(path)
        for nidx in branches[-1]:
            if not visited & (1 << nidx) and letters[nidx] == word[pos]:
                break
        else:
            # Dead end: release this cell and resume its parent's neighbors
            visited &= ~(1 << path.pop())
            branches.pop()
            continue

        path.append(nidx)
        visited |= 1 << nidx
        if pos == last:
            return path
        branches.append(iter(graph.neighbors(nidx)))
    return None


def can_trace(graph: AdjacencyGraph, word: str, start: int) -> bool:
    return find_path(graph, word, start) is not None
