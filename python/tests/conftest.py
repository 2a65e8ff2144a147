"""Shared fixtures.

Ground truth for parity and admissibility comes from a plain BFS over
raw tuples, with no dependency on ``Board`` or ``Solver``.
"""

from __future__ import annotations

from collections import deque

import pytest


def _bfs_distances(size: int) -> dict[tuple[int, ...], int]:
    """Return the exact move distance to the goal for every reachable board."""
    goal = tuple(range(1, size * size)) + (0,)
    dist = {goal: 0}
    queue = deque([goal])
    while queue:
        state = queue.popleft()
        z = state.index(0)
        r, c = divmod(z, size)
        d = dist[state] + 1
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < size and 0 <= nc < size:
                j = nr * size + nc
                lst = list(state)
                lst[z], lst[j] = lst[j], lst[z]
                nxt = tuple(lst)
                if nxt not in dist:
                    dist[nxt] = d
                    queue.append(nxt)
    return dist


@pytest.fixture(scope="session")
def distances_2x2() -> dict[tuple[int, ...], int]:
    return _bfs_distances(2)


@pytest.fixture(scope="session")
def distances_3x3() -> dict[tuple[int, ...], int]:
    """All 181,440 boards reachable from the 3×3 goal."""
    return _bfs_distances(3)
