"""Bounds calculation over positioned nodes."""

from __future__ import annotations

from grid_layout.layout.types import Bounds, NodePosition


def compute_bounds(positions: list[NodePosition]) -> Bounds:
    """Minimal axis-aligned rectangle covering every node rectangle.

    Edge paths are not included. Coordinates may be negative (west/north
    flows), so min and max are tracked on both axes.
    """
    if not positions:
        return Bounds()

    min_x = min(p.x for p in positions)
    min_y = min(p.y for p in positions)
    max_x = max(p.right for p in positions)
    max_y = max(p.bottom for p in positions)
    return Bounds(
        width=max_x - min_x,
        height=max_y - min_y,
        min_x=min_x,
        min_y=min_y,
        max_x=max_x,
        max_y=max_y,
    )
