import pytest

from coloring.graph_io import build_graph, read_col

from conftest import write_col


def test_build_graph_is_symmetric_and_zero_based(cycle4):
    g = cycle4
    assert g.n_vertices == 4
    assert g.edges == [(0, 1), (0, 3), (1, 2), (2, 3)]
    for u in range(4):
        for v in range(4):
            assert g.has_edge(u, v) == g.has_edge(v, u)
    assert g.has_edge(0, 3)
    assert not g.has_edge(0, 2)
    assert g.adjacency[0] == 0b1010


def test_degrees_match_adjacency(cycle4):
    assert cycle4.degrees == (2, 2, 2, 2)
    for v in range(cycle4.n_vertices):
        assert cycle4.degree(v) == bin(cycle4.adjacency[v]).count("1")
    assert cycle4.max_degree == 2


def test_duplicate_edges_are_idempotent():
    g = build_graph(3, [(1, 2), (2, 1), (1, 2)])
    assert g.edges == [(0, 1)]
    assert g.degrees == (1, 1, 0)


def test_graph_without_edges():
    g = build_graph(5, [])
    assert g.degrees == (0,) * 5
    assert g.max_degree == 0


@pytest.mark.parametrize(
    "n, edges",
    [
        (0, []),
        (-3, []),
        (3, [(1, 4)]),
        (3, [(0, 1)]),
        (3, [(2, 2)]),
    ],
)
def test_build_graph_rejects_bad_input(n, edges):
    with pytest.raises(ValueError):
        build_graph(n, edges)


def test_read_col(tmp_path):
    path = write_col(tmp_path / "c4.col", 4, [(1, 2), (2, 3), (3, 4), (4, 1)])
    g = read_col(str(path))
    assert g.n_vertices == 4
    assert len(g.edges) == 4


def test_read_col_accepts_bare_p_line_and_skips_self_loops(tmp_path):
    path = tmp_path / "bare.col"
    path.write_text("p 3 2\ne 1 2\ne 3 3\ne 2 3\n", encoding="utf-8")
    g = read_col(str(path))
    assert g.n_vertices == 3
    assert g.edges == [(0, 1), (1, 2)]


def test_read_col_declared_edge_count_is_not_enforced(tmp_path):
    path = tmp_path / "short.col"
    path.write_text("p edge 3 10\ne 1 2\n", encoding="utf-8")
    assert read_col(str(path)).edges == [(0, 1)]


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("e 1 2\n", "'p edge n m'"),
        ("p edge x 1\ne 1 2\n", ":1:"),
        ("p edge 3 1\ne 1 two\n", ":2:"),
        ("p edge 3 1\ne 1\n", "malformed 'e' line"),
        ("p\n", "malformed 'p' line"),
        ("p edge 3\n", "malformed 'p' line"),
        ("p 3 2 x\n", "malformed 'p' line"),
        ("p edge 99999999999999999999 1\n", "vertex count"),
        ("p edge 0 0\n", "vertex count"),
        ("p edge 3 1\np edge 3 1\n", "duplicate"),
        ("p edge 3 1\ne 1 7\n", "out of range"),
    ],
)
def test_read_col_errors(tmp_path, text, fragment):
    path = tmp_path / "bad.col"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError) as exc:
        read_col(str(path))
    assert fragment in str(exc.value)


def test_read_col_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_col(str(tmp_path / "missing.col"))


def test_read_col_bare_p_line_with_col_keyword(tmp_path):
    path = tmp_path / "col.col"
    path.write_text("p col 3 1\ne 1 3\n", encoding="utf-8")
    assert read_col(str(path)).edges == [(0, 2)]
