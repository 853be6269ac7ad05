"""
Example: All-pairs shortest paths in densepath

Builds a small weighted digraph from matrix-style text cells, solves it with
Floyd-Warshall and with Dijkstra run from every vertex, prints both result
tables and shows how a negative cycle and a negative edge are reported.
"""

import sys

from densepath import (
    DenseGraph,
    Method,
    NegativeCycleError,
    parse_weight,
    result_rows,
    solve_all_pairs,
    write_csv,
)

# Row-major weight cells; "" means no edge.
CELLS = [
    ["0", "2", "10", ""],
    ["", "0", "3", "7"],
    ["", "", "0", "1"],
    ["4", "", "", "0"],
]


def build_graph(cells):
    graph = DenseGraph(len(cells))
    for i, row in enumerate(cells):
        for j, text in enumerate(row):
            graph.set_edge(i, j, parse_weight(text))
    return graph


def print_table(result):
    for row in result_rows(result):
        print(f"  {row.source:>2} -> {row.target:<2} {row.length:>4}   {row.path}")


def example_all_pairs():
    """Example: Solve the same graph with both strategies."""
    print("=" * 60)
    print("Example 1: All pairs, Floyd-Warshall vs n x Dijkstra")
    print("=" * 60)

    graph = build_graph(CELLS)
    floyd = solve_all_pairs(graph, Method.FLOYD_WARSHALL)
    dijkstra = solve_all_pairs(graph, Method.DIJKSTRA)

    print("Floyd-Warshall:")
    print_table(floyd)
    print("n x Dijkstra:")
    print_table(dijkstra)

    same = list(result_rows(floyd)) == list(result_rows(dijkstra))
    print(f"Tables identical: {same}")
    print()
    print("CSV export:")
    write_csv(floyd, sys.stdout)


def example_negative_weights():
    """Example: Negative edges and negative cycles."""
    print("=" * 60)
    print("Example 2: Negative weights")
    print("=" * 60)

    graph = DenseGraph.from_edges(2, [(0, 1, -1.0), (1, 0, -1.0)])
    print(f"Has negative edge: {graph.has_negative_edge}")

    result = solve_all_pairs(graph, Method.DIJKSTRA)
    print(f"n x Dijkstra status: {result.status.value}")

    result = solve_all_pairs(graph, Method.FLOYD_WARSHALL)
    print(f"Floyd-Warshall status: {result.status.value}")
    try:
        result.path(0, 1)
    except NegativeCycleError as exc:
        print(f"Refused: {exc}")


if __name__ == "__main__":
    example_all_pairs()
    print()
    example_negative_weights()
    print()
    print("All examples completed")
