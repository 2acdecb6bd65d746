"""Grid and graph searches."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))
REACH = 1000


def count_cabbage_worms(width: int, height: int, cabbages: Iterable[tuple[int, int]]) -> int:
    """Number of 4-connected groups of cabbages on a width x height field."""
    field: set[tuple[int, int]] = set()
    for x, y in cabbages:
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"cabbage at ({x}, {y}) lies outside the field")
        field.add((x, y))
    groups = 0
    while field:
        groups += 1
        stack = [field.pop()]
        while stack:
            x, y = stack.pop()
            for dx, dy in _STEPS:
                neighbour = (x + dx, y + dy)
                if neighbour in field:
                    field.remove(neighbour)
                    stack.append(neighbour)
    return groups


def _neighbours(row: int, col: int, rows: int, cols: int):
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def count_downhill_paths(grid: Sequence[Sequence[int]]) -> int:
    """Paths from the top-left to the bottom-right cell moving only to strictly lower cells."""
    heights = [list(row) for row in grid]
    if not heights or not heights[0]:
        raise ValueError("grid must not be empty")
    cols = len(heights[0])
    if any(len(row) != cols for row in heights):
        raise ValueError("grid rows must all have the same length")
    rows = len(heights)
    target = (rows - 1, cols - 1)
    cells = sorted((heights[r][c], r, c) for r in range(rows) for c in range(cols))
    ways: dict[tuple[int, int], int] = {}
    for height, r, c in cells:
        if (r, c) == target:
            ways[(r, c)] = 1
            continue
        ways[(r, c)] = sum(
            ways[(nr, nc)]
            for nr, nc in _neighbours(r, c, rows, cols)
            if heights[nr][nc] < height
        )
    return ways[(0, 0)]


def _manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def can_reach_festival(
    home: tuple[int, int],
    stores: Iterable[tuple[int, int]],
    festival: tuple[int, int],
) -> bool:
    """Whether the festival is reachable hopping at most 1000 apart via stores."""
    points = [tuple(home), *(tuple(store) for store in stores), tuple(festival)]
    goal = len(points) - 1
    seen = {0}
    queue = deque([0])
    while queue:
        current = queue.popleft()
        if current == goal:
            return True
        for index, point in enumerate(points):
            if index not in seen and _manhattan(points[current], point) <= REACH:
                seen.add(index)
                queue.append(index)
    return False


def max_path_letters(letters: str, edges: Iterable[tuple[int, int]]) -> str:
    """Letters read walking from node 1, always stepping to the unvisited neighbour with the largest letter."""
    count = len(letters)
    if count == 0:
        raise ValueError("letters must not be empty")
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, count + 1)}
    for u, v in edges:
        if u not in adjacency or v not in adjacency:
            raise ValueError(f"edge ({u}, {v}) refers to an unknown node")
        adjacency[u].append(v)
        adjacency[v].append(u)
    path = [letters[0]]
    visited = {1}
    node = 1
    while True:
        choices = [v for v in adjacency[node] if v not in visited]
        if not choices:
            break
        node = max(choices, key=lambda v: letters[v - 1])
        visited.add(node)
        path.append(letters[node - 1])
    return "".join(path)