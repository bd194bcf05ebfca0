"""Centralized configuration for grid-layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from grid_layout.errors import MalformedInput
from grid_layout.types import FlowDirection

DEFAULT_NODE_SPACING: int = 3
DEFAULT_RANK_SPACING: int = 5
COMPACT_NODE_SPACING: int = 2
COMPACT_RANK_SPACING: int = 3


@dataclass(frozen=True)
class LayoutConfig:
    """Configuration for one layout run.

    ``directed`` is carried for hosts that describe undirected graphs, but
    layering always treats edges as directed; the flag has no effect on the
    computed layout.
    """

    flow: FlowDirection = field(default_factory=FlowDirection.default)
    node_spacing: int = DEFAULT_NODE_SPACING
    rank_spacing: int = DEFAULT_RANK_SPACING
    directed: bool = True
    avoid_obstacles: bool = False

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "flow", FlowDirection.parse(self.flow))
        except ValueError as e:
            raise MalformedInput(str(e)) from None
        for name in ("node_spacing", "rank_spacing"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise MalformedInput(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise MalformedInput(f"{name} must be non-negative, got {value}")

    @classmethod
    def compact(cls, flow: FlowDirection = FlowDirection.EAST) -> LayoutConfig:
        """Tighter spacing profile for small diagrams."""
        return cls(flow=flow, node_spacing=COMPACT_NODE_SPACING, rank_spacing=COMPACT_RANK_SPACING)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> LayoutConfig:
        """Build a config from a JSON-like record, applying defaults for absent keys."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise MalformedInput(f"config must be an object, got {type(data).__name__}")
        directed = data.get("directed", True)
        avoid = data.get("avoid_obstacles", False)
        if not isinstance(directed, bool) or not isinstance(avoid, bool):
            raise MalformedInput("config flags 'directed' and 'avoid_obstacles' must be booleans")
        return cls(
            flow=data.get("flow", FlowDirection.default()),
            node_spacing=data.get("node_spacing", DEFAULT_NODE_SPACING),
            rank_spacing=data.get("rank_spacing", DEFAULT_RANK_SPACING),
            directed=directed,
            avoid_obstacles=avoid,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "flow": self.flow.value,
            "node_spacing": self.node_spacing,
            "rank_spacing": self.rank_spacing,
            "directed": self.directed,
            "avoid_obstacles": self.avoid_obstacles,
        }
