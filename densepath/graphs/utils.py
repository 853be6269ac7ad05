"""
Path reconstruction from solver bookkeeping.

Each solver records predecessors differently: Floyd-Warshall fills a
predecessor matrix, Dijkstra a predecessor array per source. Both helpers walk
the predecessor chain backward from the target and return the path with
1-indexed vertex numbers, or an empty list when no path exists. Neither
mutates its input.
"""

from typing import List, Sequence


def _walk_back(prev_row: Sequence[int], source: int, target: int) -> List[int]:
    path = [target]
    current = target
    # A valid chain visits each vertex at most once.
    for _ in range(len(prev_row)):
        if current == source:
            path.reverse()
            return [v + 1 for v in path]
        current = int(prev_row[current])
        if current == -1:
            return []
        path.append(current)
    return []


def reconstruct_from_pred_matrix(pred: Sequence[Sequence[int]], i: int, j: int) -> List[int]:
    """
    Reconstruct the path ``i -> j`` from a Floyd-Warshall predecessor matrix.

    Args:
        pred: ``pred[i][j]`` is the vertex preceding ``j`` on the path from ``i``,
            ``-1`` when no path is known.
        i: Source vertex (0-based).
        j: Target vertex (0-based).

    Returns:
        1-indexed vertices from ``i`` to ``j`` inclusive, or ``[]`` if there is
        no path or the chain is broken.

    Example:
        >>> pred = [[0, 0, 1], [-1, 1, 1], [-1, -1, 2]]
        >>> reconstruct_from_pred_matrix(pred, 0, 2)
        [1, 2, 3]
    """
    if pred[i][j] == -1:
        return []
    return _walk_back(pred[i], i, j)


def reconstruct_from_prev_array(prev: Sequence[int], source: int, target: int) -> List[int]:
    """
    Reconstruct the path ``source -> target`` from a Dijkstra predecessor array.

    Args:
        prev: ``prev[v]`` is the vertex preceding ``v`` on the path from
            ``source``, ``-1`` for the source itself and unreachable vertices.
        source: Source vertex the array was computed for (0-based).
        target: Target vertex (0-based).

    Returns:
        1-indexed vertices from ``source`` to ``target`` inclusive, ``[source + 1]``
        when both coincide, or ``[]`` if there is no path.

    Example:
        >>> reconstruct_from_prev_array([-1, 0, 1], 0, 2)
        [1, 2, 3]
    """
    if source == target:
        return [source + 1]
    if prev[target] == -1:
        return []
    return _walk_back(prev, source, target)


__all__ = ["reconstruct_from_pred_matrix", "reconstruct_from_prev_array"]
