"""grid-layout: deterministic layered grid layout for directed graphs."""

from __future__ import annotations

from typing import Any

from grid_layout.config import LayoutConfig
from grid_layout.errors import LayoutError, MalformedInput, UnknownNodeReference
from grid_layout.ir.graph import EdgeData, GraphData, NodeData
from grid_layout.layout import full_layout
from grid_layout.layout.sizing import SizeEstimator
from grid_layout.layout.types import LayoutResult
from grid_layout.types import FlowDirection

__version__ = "0.1.0"

__all__ = [
    "EdgeData",
    "FlowDirection",
    "GraphData",
    "LayoutConfig",
    "LayoutError",
    "LayoutResult",
    "MalformedInput",
    "NodeData",
    "UnknownNodeReference",
    "get_version",
    "layout",
    "layout_dict",
]


def layout(graph: GraphData, estimator: SizeEstimator | None = None) -> LayoutResult:
    """Lay out a graph.

    Args:
        graph: Nodes, edges and config for one request.
        estimator: Optional node size strategy; defaults to one unit per character.

    Returns:
        The positioned nodes, routed edge paths, bounds and layers.

    Raises:
        LayoutError: If the input is malformed or an edge names an unknown node.
    """
    return full_layout(graph, estimator)


def layout_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Lay out a JSON-like graph record and return a JSON-like result record.

    Raises:
        LayoutError: If the input is malformed or an edge names an unknown node.
    """
    return layout(GraphData.from_dict(data)).to_dict()


def get_version() -> str:
    return __version__
