"""Breadth-first and depth-first traversal of adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = ["bfs", "dfs"]


def _check(adjacency: Sequence[Sequence[int]], start: int) -> int:
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"start vertex {start} is out of range")
    return size


def bfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reachable from start in breadth-first order.

    A non-zero entry adjacency[u][v] is an edge from u to v.
    """
    size = _check(adjacency, start)
    visited = [False] * size
    visited[start] = True
    order = [start]
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour, edge in enumerate(adjacency[node]):
            if edge and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reachable from start in depth-first order.

    Neighbours are explored in increasing index order.
    """
    size = _check(adjacency, start)
    visited = [False] * size
    visited[start] = True
    order = [start]
    stack = [iter(enumerate(adjacency[start]))]
    while stack:
        for neighbour, edge in stack[-1]:
            if edge and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append(iter(enumerate(adjacency[neighbour])))
                break
        else:
            stack.pop()
    return order