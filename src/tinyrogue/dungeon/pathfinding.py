from collections import deque
from typing import AbstractSet, Dict, List

from .tiles import Grid, Position


def is_blocked(grid: Grid, occupied: AbstractSet[Position], pos: Position, goal: Position) -> bool:
    """Walls and out-of-bounds always block; occupied tiles block unless they are the goal."""
    x, y = pos
    if not grid.is_floor(x, y):
        return True
    return pos in occupied and pos != goal


def next_step(grid: Grid, occupied: AbstractSet[Position], start: Position, goal: Position) -> Position:
    """Return the tile to occupy next when walking from ``start`` towards ``goal``.

    Breadth-first search on 4-connected floor tiles, expanding neighbours in the
    fixed order +x, -x, +y, -y so ties break the same way every call. Tiles in
    ``occupied`` are obstacles, except ``goal`` itself which may always be
    entered (stepping onto an occupied goal means attacking it).

    When the goal is unreachable, falls back to a greedy single-axis step: the
    axis with the larger distance first (horizontal on ties), then the other.
    Returns ``start`` when both are blocked, so the call always yields either
    ``start`` or one of its cardinal neighbours.
    """
    if start == goal:
        return start

    parent: Dict[Position, Position] = {}
    seen = {start}
    q = deque([start])
    found = False
    while q:
        cur = q.popleft()
        if cur == goal:
            found = True
            break
        for nxt in grid.neighbors4(*cur):
            if nxt in seen or is_blocked(grid, occupied, nxt, goal):
                continue
            seen.add(nxt)
            parent[nxt] = cur
            q.append(nxt)

    if not found:
        return _greedy_step(grid, occupied, start, goal)

    # Walk back from the goal until the tile whose parent is the start
    cur = goal
    while parent[cur] != start:
        cur = parent[cur]
    return cur


def _greedy_step(grid: Grid, occupied: AbstractSet[Position], start: Position, goal: Position) -> Position:
    sx, sy = start
    gx, gy = goal
    dx = (gx > sx) - (gx < sx)
    dy = (gy > sy) - (gy < sy)
    horizontal = (sx + dx, sy)
    vertical = (sx, sy + dy)
    if abs(gx - sx) >= abs(gy - sy):
        candidates: List[Position] = [horizontal, vertical]
    else:
        candidates = [vertical, horizontal]
    for cand in candidates:
        if cand == start:
            continue
        if not is_blocked(grid, occupied, cand, goal):
            return cand
    return start
