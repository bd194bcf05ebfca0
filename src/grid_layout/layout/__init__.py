"""Layout pipeline and public layout API."""

from __future__ import annotations

from grid_layout.ir.graph import GraphData
from grid_layout.layout.bounds import compute_bounds
from grid_layout.layout.engine import GridLayout
from grid_layout.layout.grid import OccupancyGrid, a_star, path_cells, simplify_path
from grid_layout.layout.layering import assign_layers, layer_index
from grid_layout.layout.positions import assign_positions
from grid_layout.layout.routing import anchor_points, around_path, manhattan_path, route_edges, self_loop_path
from grid_layout.layout.sizing import NODE_HEIGHT, NODE_PADDING, MonospaceSizeEstimator, SizeEstimator
from grid_layout.layout.types import Bounds, EdgePath, LayoutResult, NodePosition, Point

__all__ = [
    "NODE_HEIGHT",
    "NODE_PADDING",
    "Bounds",
    "EdgePath",
    "GridLayout",
    "LayoutResult",
    "MonospaceSizeEstimator",
    "NodePosition",
    "OccupancyGrid",
    "Point",
    "SizeEstimator",
    "a_star",
    "anchor_points",
    "around_path",
    "assign_layers",
    "assign_positions",
    "compute_bounds",
    "full_layout",
    "layer_index",
    "manhattan_path",
    "path_cells",
    "route_edges",
    "self_loop_path",
    "simplify_path",
]


def full_layout(graph: GraphData, estimator: SizeEstimator | None = None) -> LayoutResult:
    """Run the full layout pipeline."""
    return GridLayout(estimator).layout(graph)
