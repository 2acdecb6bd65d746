"""Maximum flow on small dense graphs and the puzzles built on it."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

_SOURCE, _LEFT, _RIGHT, _SINK = range(4)


def _as_matrix(capacity: Sequence[Sequence[int]]) -> list[list[int]]:
    matrix = [list(row) for row in capacity]
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("capacity must be a square matrix")
    if any(value < 0 for row in matrix for value in row):
        raise ValueError("capacities must not be negative")
    return matrix


def _find_path(residual: list[list[int]], source: int, sink: int) -> dict[int, int] | None:
    """Breadth-first search for an augmenting path; returns each node's predecessor."""
    parent = {source: source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, room in enumerate(residual[u]):
            if room > 0 and v not in parent:
                parent[v] = u
                if v == sink:
                    return parent
                queue.append(v)
    return None


def _saturate(residual: list[list[int]], source: int, sink: int) -> int:
    """Push as much flow as possible, updating the residual matrix in place."""
    total = 0
    while (parent := _find_path(residual, source, sink)) is not None:
        path = []
        v = sink
        while v != source:
            u = parent[v]
            path.append((u, v))
            v = u
        pushed = min(residual[u][v] for u, v in path)
        for u, v in path:
            residual[u][v] -= pushed
            residual[v][u] += pushed
        total += pushed
    return total


def max_flow(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Value of a maximum flow from source to sink over a capacity matrix."""
    residual = _as_matrix(capacity)
    size = len(residual)
    if not (0 <= source < size and 0 <= sink < size):
        raise ValueError("source and sink must be nodes of the graph")
    if source == sink:
        raise ValueError("source and sink must differ")
    return _saturate(residual, source, sink)


def _segment_flow(segment: tuple[int, ...], cross_from: int, cross_to: int) -> int:
    to_left, left_out, cross, to_right, right_out = segment
    capacity = [[0] * 4 for _ in range(4)]
    capacity[_SOURCE][_LEFT] = to_left
    capacity[_LEFT][_SINK] = left_out
    capacity[cross_from][cross_to] = cross
    capacity[_SOURCE][_RIGHT] = to_right
    capacity[_RIGHT][_SINK] = right_out
    return max_flow(capacity, _SOURCE, _SINK)


def weakest_bridge_flow(segments: Iterable[Sequence[int]]) -> int:
    """Smallest over segments of the best flow with the middle link pointed either way.

    Each segment holds five capacities: source to left, left to sink,
    the middle link, source to right and right to sink.
    """
    flows = []
    for raw in segments:
        segment = tuple(raw)
        if len(segment) != 5:
            raise ValueError(f"a segment needs five capacities, got {len(segment)}")
        flows.append(
            max(
                _segment_flow(segment, _LEFT, _RIGHT),
                _segment_flow(segment, _RIGHT, _LEFT),
            )
        )
    if not flows:
        raise ValueError("segments must not be empty")
    return min(flows)


def reconstruct_matrix(row_sums: Sequence[int], col_sums: Sequence[int]) -> list[list[int]] | None:
    """A 0/1 matrix with the given row and column sums, or None if none exists."""
    rows = list(row_sums)
    cols = list(col_sums)
    if any(value < 0 for value in (*rows, *cols)):
        raise ValueError("sums must not be negative")
    n, m = len(rows), len(cols)
    source, sink = 0, n + m + 1
    residual = [[0] * (n + m + 2) for _ in range(n + m + 2)]
    for i, total in enumerate(rows):
        residual[source][1 + i] = total
        for j in range(m):
            residual[1 + i][1 + n + j] = 1
    for j, total in enumerate(cols):
        residual[1 + n + j][sink] = total
    flow = _saturate(residual, source, sink)
    if flow != sum(rows) or flow != sum(cols):
        return None
    return [[1 - residual[1 + i][1 + n + j] for j in range(m)] for i in range(n)]