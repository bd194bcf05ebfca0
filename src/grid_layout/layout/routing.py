"""Edge routing: one orthogonal polyline per edge.

Each path leaves the midpoint of the source side facing the flow and enters
the midpoint of the opposite side of the target. The baseline route is a
straight segment when both anchors share the perpendicular coordinate, and a
three-segment manhattan path through the rank-axis midpoint otherwise.
Self-loops and edges between two nodes of the same layer (which only occur
in the final layer of a cyclic graph) loop around the outside of the layer
instead, so they never pass through a node.

With ``avoid_obstacles`` set, an A* search over the occupancy grid is tried
first and the baseline route is the fallback. Every routed path is recorded
in the grid as edge cells.
"""

from __future__ import annotations

import logging

from grid_layout.config import LayoutConfig
from grid_layout.errors import LayoutError
from grid_layout.ir.graph import EdgeData
from grid_layout.layout.grid import OccupancyGrid, a_star, path_cells, simplify_path
from grid_layout.layout.types import EdgePath, NodePosition, Point
from grid_layout.types import CellState, FlowDirection

logger = logging.getLogger(__name__)


def anchor_points(src: NodePosition, tgt: NodePosition, flow: FlowDirection) -> tuple[Point, Point]:
    """Return (exit, entry): the facing side midpoints of source and target."""
    if flow is FlowDirection.EAST:
        return (
            Point(src.x + src.width, src.y + src.height // 2),
            Point(tgt.x, tgt.y + tgt.height // 2),
        )
    if flow is FlowDirection.WEST:
        return (
            Point(src.x, src.y + src.height // 2),
            Point(tgt.x + tgt.width, tgt.y + tgt.height // 2),
        )
    if flow is FlowDirection.SOUTH:
        return (
            Point(src.x + src.width // 2, src.y + src.height),
            Point(tgt.x + tgt.width // 2, tgt.y),
        )
    return (
        Point(src.x + src.width // 2, src.y),
        Point(tgt.x + tgt.width // 2, tgt.y + tgt.height),
    )


def manhattan_path(exit_pt: Point, entry_pt: Point, horizontal: bool) -> list[Point]:
    """Direct segment if aligned, else exit → rank-axis midpoint bend → entry."""
    if horizontal:
        if exit_pt.y == entry_pt.y:
            return [exit_pt, entry_pt]
        mid_x = exit_pt.x + (entry_pt.x - exit_pt.x) // 2
        return [exit_pt, Point(mid_x, exit_pt.y), Point(mid_x, entry_pt.y), entry_pt]

    if exit_pt.x == entry_pt.x:
        return [exit_pt, entry_pt]
    mid_y = exit_pt.y + (entry_pt.y - exit_pt.y) // 2
    return [exit_pt, Point(exit_pt.x, mid_y), Point(entry_pt.x, mid_y), entry_pt]


def around_path(
    src: NodePosition,
    tgt: NodePosition,
    flow: FlowDirection,
    span: tuple[int, int] | None = None,
) -> list[Point]:
    """Route from the source exit side to the target entry side around a rank.

    ``span`` is the (start, end) extent of the rank along the rank axis; it
    defaults to the extent of the two nodes. The path steps out past one end
    of the span, crosses on the far side of the target and comes back in past
    the other end, so it never enters either node.
    """
    exit_pt, entry_pt = anchor_points(src, tgt, flow)
    if flow.is_horizontal:
        lo, hi = span or (min(src.x, tgt.x), max(src.right, tgt.right))
        out_x, in_x = (lo - 1, hi + 1) if flow.is_reversed else (hi + 1, lo - 1)
        lane = tgt.bottom if tgt.y >= src.y else tgt.y - 1
        return [exit_pt, Point(out_x, exit_pt.y), Point(out_x, lane), Point(in_x, lane), Point(in_x, entry_pt.y), entry_pt]

    lo, hi = span or (min(src.y, tgt.y), max(src.bottom, tgt.bottom))
    out_y, in_y = (lo - 1, hi + 1) if flow.is_reversed else (hi + 1, lo - 1)
    lane = tgt.right if tgt.x >= src.x else tgt.x - 1
    return [exit_pt, Point(exit_pt.x, out_y), Point(lane, out_y), Point(lane, in_y), Point(entry_pt.x, in_y), entry_pt]


def self_loop_path(node: NodePosition, flow: FlowDirection) -> list[Point]:
    """Loop from a node's exit side back to its entry side, around its far edge.

    Horizontal flows loop below the node, vertical flows loop to its right.
    """
    return around_path(node, node, flow)


def _rank_spans(positions: list[NodePosition], horizontal: bool) -> dict[int, tuple[int, int]]:
    spans: dict[int, tuple[int, int]] = {}
    for p in positions:
        start, end = (p.x, p.right) if horizontal else (p.y, p.bottom)
        lo, hi = spans.get(p.layer, (start, end))
        spans[p.layer] = (min(lo, start), max(hi, end))
    return spans


def _search_window(positions: list[NodePosition], margin: int) -> tuple[int, int, int, int]:
    return (
        min(p.x for p in positions) - margin,
        min(p.y for p in positions) - margin,
        max(p.right for p in positions) + margin,
        max(p.bottom for p in positions) + margin,
    )


def _inside(node: NodePosition, cell: tuple[int, int]) -> bool:
    x, y = cell
    return node.x <= x < node.right and node.y <= y < node.bottom


def _crossed_nodes(grid: OccupancyGrid, points: list[Point], src: NodePosition, tgt: NodePosition) -> int:
    """Count node cells on the path that belong to neither endpoint."""
    return sum(
        1
        for cell in path_cells(points)
        if grid.state_at(*cell) is CellState.NODE and not _inside(src, cell) and not _inside(tgt, cell)
    )


def route_edges(
    edges: list[EdgeData],
    positions: list[NodePosition],
    config: LayoutConfig,
    grid: OccupancyGrid | None = None,
) -> list[EdgePath]:
    """Route every edge in input order.

    Raises LayoutError if an endpoint has no position; edge references are
    validated before routing, so this only happens on an internal fault.
    """
    pos_map: dict[str, NodePosition] = {p.id: p for p in positions}
    if grid is None:
        grid = OccupancyGrid.from_positions(positions)

    flow = config.flow
    spans = _rank_spans(positions, flow.is_horizontal)
    window = None
    if config.avoid_obstacles and positions:
        window = _search_window(positions, max(config.rank_spacing, config.node_spacing, 1))

    routes: list[EdgePath] = []
    for edge in edges:
        src = pos_map.get(edge.from_id)
        tgt = pos_map.get(edge.to_id)
        if src is None or tgt is None:
            missing = edge.from_id if src is None else edge.to_id
            raise LayoutError(f"internal: edge '{edge.id}' endpoint '{missing}' has no position")

        if src.id == tgt.id:
            points = self_loop_path(src, flow)
        elif src.layer == tgt.layer:
            logger.debug("Edge '%s' joins two nodes of layer %d; routing around the layer", edge.id, src.layer)
            points = around_path(src, tgt, flow, spans[src.layer])
        else:
            exit_pt, entry_pt = anchor_points(src, tgt, flow)
            points = None
            if window is not None:
                found = a_star(grid, exit_pt, entry_pt, window)
                if found is not None and len(found) >= 2:
                    points = simplify_path(found)
                else:
                    logger.debug("No obstacle-free route for edge '%s'; using baseline path", edge.id)
            if points is None:
                points = manhattan_path(exit_pt, entry_pt, flow.is_horizontal)
                crossed = _crossed_nodes(grid, points, src, tgt)
                if crossed:
                    logger.debug("Edge '%s' crosses %d node cell(s)", edge.id, crossed)

        grid.mark_path(points)
        routes.append(
            EdgePath(
                id=edge.id,
                from_id=edge.from_id,
                to_id=edge.to_id,
                points=points,
                label=edge.label,
                style=edge.style,
            )
        )

    return routes
