"""Layout types shared across the layout phases and the facade."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Point:
    """A 2D point in grid units (column, row)."""

    x: int
    y: int

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class NodePosition:
    """A positioned node; (x, y) is the top-left corner."""

    id: str
    x: int
    y: int
    width: int
    height: int
    label: str
    layer: int = 0
    order: int = 0
    shape: str | None = None

    @property
    def right(self) -> int:
        """Right edge column (exclusive)."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Bottom row (exclusive)."""
        return self.y + self.height

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "label": self.label,
            "layer": self.layer,
            "order": self.order,
        }
        if self.shape is not None:
            data["shape"] = self.shape
        return data


@dataclass(frozen=True)
class EdgePath:
    """A routed edge: polyline vertices from source boundary to target boundary."""

    id: str
    from_id: str
    to_id: str
    points: list[Point]
    label: str | None = None
    style: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "from": self.from_id,
            "to": self.to_id,
            "points": [p.to_dict() for p in self.points],
        }
        if self.label is not None:
            data["label"] = self.label
        if self.style is not None:
            data["style"] = self.style
        return data


@dataclass(frozen=True)
class Bounds:
    width: int = 0
    height: int = 0
    min_x: int = 0
    min_y: int = 0
    max_x: int = 0
    max_y: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "width": self.width,
            "height": self.height,
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
        }


@dataclass(frozen=True)
class LayoutResult:
    """Self-contained layout output — everything a renderer needs."""

    nodes: list[NodePosition] = field(default_factory=list)
    edges: list[EdgePath] = field(default_factory=list)
    bounds: Bounds = field(default_factory=Bounds)
    layers: list[list[str]] = field(default_factory=list)

    def node(self, node_id: str) -> NodePosition:
        for n in self.nodes:
            if n.id == node_id:
                return n
        raise KeyError(node_id)

    def edge(self, edge_id: str) -> EdgePath:
        for e in self.edges:
            if e.id == edge_id:
                return e
        raise KeyError(edge_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
            "bounds": self.bounds.to_dict(),
            "layers": [list(layer) for layer in self.layers],
        }
