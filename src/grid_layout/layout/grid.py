"""Sparse occupancy grid and A* pathfinder for edge routing."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from grid_layout.layout.types import NodePosition, Point
from grid_layout.types import CellState


@dataclass
class OccupancyGrid:
    """Sparse map from integer cell to CellState. Unmarked cells are EMPTY."""

    cells: dict[tuple[int, int], CellState] = field(default_factory=dict)

    @classmethod
    def from_positions(cls, positions: Iterable[NodePosition]) -> OccupancyGrid:
        grid = cls()
        for pos in positions:
            grid.mark_node(pos)
        return grid

    def __len__(self) -> int:
        return len(self.cells)

    def mark_rect(self, x: int, y: int, w: int, h: int, state: CellState = CellState.NODE) -> None:
        """Mark all cells inside a rectangle."""
        for row in range(y, y + h):
            for col in range(x, x + w):
                self.cells[(col, row)] = state

    def mark_node(self, pos: NodePosition) -> None:
        self.mark_rect(pos.x, pos.y, pos.width, pos.height, CellState.NODE)

    def mark_path(self, points: list[Point]) -> None:
        """Mark the cells along a polyline as EDGE, leaving NODE cells untouched."""
        for cell in path_cells(points):
            if self.cells.get(cell) is not CellState.NODE:
                self.cells[cell] = CellState.EDGE

    def state_at(self, x: int, y: int) -> CellState:
        return self.cells.get((x, y), CellState.EMPTY)

    def is_free(self, x: int, y: int) -> bool:
        return self.state_at(x, y) is CellState.EMPTY

    def is_blocked(self, x: int, y: int) -> bool:
        """Only node cells block routing; edges may cross other edges."""
        return self.state_at(x, y) is CellState.NODE


def path_cells(points: list[Point]) -> Iterator[tuple[int, int]]:
    """Yield each cell along an axis-aligned polyline, vertices included once."""
    if not points:
        return
    yield (points[0].x, points[0].y)
    for a, b in zip(points, points[1:]):
        if a.x != b.x and a.y != b.y:
            raise ValueError(f"Segment ({a.x}, {a.y}) -> ({b.x}, {b.y}) is not axis-aligned")
        dx = (b.x > a.x) - (b.x < a.x)
        dy = (b.y > a.y) - (b.y < a.y)
        x, y = a.x, a.y
        while (x, y) != (b.x, b.y):
            x += dx
            y += dy
            yield (x, y)


def _heuristic(ax: int, ay: int, bx: int, by: int) -> int:
    """Manhattan distance + corner penalty."""
    dx = abs(ax - bx)
    dy = abs(ay - by)
    if dx == 0 or dy == 0:
        return dx + dy
    return dx + dy + 1


# 4-directional neighbors
_DIRS = [(0, 1), (0, -1), (1, 0), (-1, 0)]


def a_star(
    grid: OccupancyGrid,
    start: Point,
    end: Point,
    window: tuple[int, int, int, int],
) -> list[Point] | None:
    """Find an orthogonal path from start to end avoiding node cells.

    The heuristic adds a corner penalty, so paths with fewer bends win over
    strictly shorter ones; the result is not guaranteed to be shortest.

    ``window`` is (min_x, min_y, max_x, max_y), inclusive; the search never
    leaves it. The start and goal cells may be blocked, since they sit on
    node borders. Returns the cell path, or None if no path exists.
    """
    min_x, min_y, max_x, max_y = window
    sx, sy = start.x, start.y
    ex, ey = end.x, end.y

    # Priority queue: (priority, counter, x, y)
    counter = 0
    open_set: list[tuple[int, int, int, int]] = []
    heapq.heappush(open_set, (_heuristic(sx, sy, ex, ey), counter, sx, sy))

    cost_so_far: dict[tuple[int, int], int] = {(sx, sy): 0}
    came_from: dict[tuple[int, int], tuple[int, int] | None] = {(sx, sy): None}

    while open_set:
        _, _, cx, cy = heapq.heappop(open_set)

        if cx == ex and cy == ey:
            path: list[Point] = []
            cur: tuple[int, int] | None = (cx, cy)
            while cur is not None:
                path.append(Point(x=cur[0], y=cur[1]))
                cur = came_from[cur]
            path.reverse()
            return path

        current_cost = cost_so_far[(cx, cy)]

        for dx, dy in _DIRS:
            nx_, ny = cx + dx, cy + dy
            if not (min_x <= nx_ <= max_x and min_y <= ny <= max_y):
                continue
            if (nx_, ny) != (ex, ey) and grid.is_blocked(nx_, ny):
                continue

            new_cost = current_cost + 1
            key = (nx_, ny)
            if key not in cost_so_far or new_cost < cost_so_far[key]:
                cost_so_far[key] = new_cost
                counter += 1
                heapq.heappush(open_set, (new_cost + _heuristic(nx_, ny, ex, ey), counter, nx_, ny))
                came_from[key] = (cx, cy)

    return None


def simplify_path(path: list[Point]) -> list[Point]:
    """Remove collinear intermediate points, keeping only direction changes."""
    if len(path) <= 2:
        return list(path)

    result = [path[0]]
    for prev, curr, nxt in zip(path, path[1:], path[2:]):
        if (curr.x - prev.x, curr.y - prev.y) != (nxt.x - curr.x, nxt.y - curr.y):
            result.append(curr)
    result.append(path[-1])
    return result
