"""Shared type definitions for grid-layout.

Enums used across the graph IR, the layout phases and the facade.
"""

from __future__ import annotations

from enum import Enum


class FlowDirection(Enum):
    EAST = "east"
    WEST = "west"
    NORTH = "north"
    SOUTH = "south"

    @classmethod
    def default(cls) -> FlowDirection:
        return cls.EAST

    @classmethod
    def parse(cls, value: str | FlowDirection) -> FlowDirection:
        """Resolve a flow name (case-insensitive) to a FlowDirection."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown flow '{value}'; use east, west, north, or south") from None

    @property
    def is_horizontal(self) -> bool:
        return self in (FlowDirection.EAST, FlowDirection.WEST)

    @property
    def is_reversed(self) -> bool:
        """West and north flows mirror the rank axis into negative coordinates."""
        return self in (FlowDirection.WEST, FlowDirection.NORTH)


class CellState(Enum):
    EMPTY = "empty"
    NODE = "node"
    EDGE = "edge"


class LayoutStage(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    LAYERING = "layering"
    POSITIONING = "positioning"
    ROUTING = "routing"
    BOUNDING = "bounding"
    DONE = "done"
    FAILED = "failed"
