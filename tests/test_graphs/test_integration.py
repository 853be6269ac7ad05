"""Integration tests for the graphs package within densepath."""


def test_graphs_import_from_main():
    """Test that graph types and solvers can be imported from the main package."""
    from densepath import DenseGraph, floyd_warshall, dijkstra_from, solve_all_pairs

    assert DenseGraph is not None
    assert floyd_warshall is not None
    assert dijkstra_from is not None
    assert solve_all_pairs is not None


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import densepath

    graph_exports = {
        "INF", "UNREACHABLE", "MAX_VERTICES", "MAX_WEIGHT", "DenseGraph",
        "floyd_warshall", "dijkstra_from", "all_pairs_via_dijkstra",
        "reconstruct_from_pred_matrix", "reconstruct_from_prev_array",
        "Method", "Status", "AllPairsResult", "solve_all_pairs",
    }

    all_exports = set(densepath.__all__)
    assert graph_exports.issubset(all_exports), "Graph exports missing from __all__"


def test_graphs_no_circular_imports():
    """Test that importing graphs doesn't break the io and logging imports."""
    from densepath.graphs import DenseGraph
    from densepath.io import export_csv, parse_weight
    from densepath.logging import get_logger

    assert DenseGraph is not None
    assert export_csv is not None
    assert parse_weight is not None
    assert get_logger is not None


def test_edit_solve_query_cycle():
    """Test the parse -> mutate -> solve -> query flow of a matrix editor."""
    from densepath import DenseGraph, Method, parse_weight, solve_all_pairs

    cells = {
        (0, 1): "2",
        (1, 2): "3",
        (0, 2): "10",
        (2, 0): "",
        (1, 0): "∞",
    }
    g = DenseGraph()
    g.resize(3)
    for (i, j), text in cells.items():
        g.set_edge(i, j, parse_weight(text))

    for method in (Method.FLOYD_WARSHALL, Method.DIJKSTRA):
        result = solve_all_pairs(g, method)
        assert result.distance(0, 2) == 5.0
        assert result.path(0, 2) == [1, 2, 3]
        assert result.distance(2, 0) is None

    g.set_edge(1, 0, parse_weight("-1"))
    g.set_edge(0, 1, parse_weight("-1"))
    assert g.has_negative_edge
    assert not solve_all_pairs(g).ok
    assert not solve_all_pairs(g, Method.DIJKSTRA).ok
