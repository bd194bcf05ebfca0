"""Node size estimation.

Sizes are in grid units. The default estimator assumes one unit per label
character, which fits monospace renderers; hosts drawing with proportional
fonts can pass their own ``SizeEstimator`` to the layout engine.
"""

from __future__ import annotations

from typing import Protocol

from grid_layout.ir.graph import NodeData

MIN_LABEL_WIDTH: int = 3
NODE_PADDING: int = 4
NODE_HEIGHT: int = 3


class SizeEstimator(Protocol):
    """Protocol for resolving a node's (width, height)."""

    def size(self, node: NodeData) -> tuple[int, int]:
        """Return the node's effective (width, height)."""
        ...


class MonospaceSizeEstimator:
    """One grid unit per character, plus fixed padding."""

    def __init__(self, padding: int = NODE_PADDING, default_height: int = NODE_HEIGHT) -> None:
        self.padding = padding
        self.default_height = default_height

    def size(self, node: NodeData) -> tuple[int, int]:
        if node.width > 0:
            width = node.width
        else:
            width = max(len(node.label), len(node.name), MIN_LABEL_WIDTH) + self.padding
        height = node.height if node.height > 0 else self.default_height
        return (width, height)
