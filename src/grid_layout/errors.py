"""Error taxonomy for the layout pipeline.

Every error derives from ``LayoutError`` (itself a ``ValueError``), so hosts
can catch a single type. Errors are always fatal for the request: a layout
either completes or raises, it never returns a partial result.

Cyclic graphs are not an error: layering degrades them into a final layer
and logs a warning instead.
"""

from __future__ import annotations

from grid_layout.types import LayoutStage


class LayoutError(ValueError):
    """Base class for layout failures. ``stage`` is where the run stopped."""

    def __init__(self, message: str, stage: LayoutStage | None = None) -> None:
        super().__init__(message)
        self.stage = stage


class MalformedInput(LayoutError):
    """Structurally invalid input: a required field is missing or mistyped."""


class UnknownNodeReference(LayoutError):
    """An edge names a node id that is not in the node set."""

    def __init__(self, edge_id: str, node_id: str, end: str, stage: LayoutStage | None = None) -> None:
        super().__init__(f"Edge '{edge_id}' {end} unknown node '{node_id}'", stage)
        self.edge_id = edge_id
        self.node_id = node_id
        self.end = end
