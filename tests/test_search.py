from wordgrid.adjacency import populate_adjacency
from wordgrid.grid import build_grid
from wordgrid.search import can_trace, find_path


def _graph(text: str, width: int, height: int, diagonals: bool = True):
    return populate_adjacency(build_grid(text, width, height), diagonals)


def test_first_letter_mismatch():
    graph = _graph("abcd", 2, 2)
    assert not can_trace(graph, "ba", 0)
    assert find_path(graph, "ba", 0) is None


def test_single_letter():
    graph = _graph("abcd", 2, 2)
    assert find_path(graph, "d", 3) == [3]
    assert not can_trace(graph, "d", 0)


def test_empty_word_never_matches():
    graph = _graph("abcd", 2, 2)
    assert not can_trace(graph, "", 0)


def test_diagonal_step():
    assert find_path(_graph("abcd", 2, 2, True), "ad", 0) == [0, 3]
    assert find_path(_graph("abcd", 2, 2, False), "ad", 0) is None


def test_no_cell_reuse():
    """A word requiring revisiting a cell should not be found."""
    graph = _graph("abcd", 2, 2)
    assert not can_trace(graph, "aba", 0)
    assert can_trace(graph, "abdc", 0)


def test_backtracks_past_dead_end():
    # ab / bx / cx: the "b" to the right is a dead end, the one below reaches "c"
    graph = _graph("abbxcx", 2, 3, False)
    assert find_path(graph, "abc", 0) == [0, 2, 4]


def test_path_uses_first_branch_in_order():
    # Both right and bottom neighbors are "b"; right is tried before bottom
    graph = _graph("abbx", 2, 2, False)
    assert find_path(graph, "ab", 0) == [0, 1]


def test_longer_than_grid():
    graph = _graph("aaaa", 2, 2)
    assert can_trace(graph, "aaaa", 0)
    assert not can_trace(graph, "aaaaa", 0)


def test_path_cells_distinct_and_adjacent():
    graph = _graph("brpgejkke", 3, 3)
    for word in ("brpjekkg", "keke", "bee", "jeg"):
        for start in range(9):
            path = find_path(graph, word, start)
            if path is None:
                continue
            assert len(path) == len(word)
            assert len(set(path)) == len(path)
            assert "".join(graph.grid.letters[i] for i in path) == word
            for a, b in zip(path, path[1:]):
                assert b in graph.neighbors(a)


def test_word_longer_than_recursion_limit():
    graph = _graph("a" * 1200, 1200, 1)
    path = find_path(graph, "a" * 1100, 0)
    assert path == list(range(1100))
    assert not can_trace(graph, "a" * 1100 + "b", 0)
