"""Intermediate representation: input records and GraphIR."""

from grid_layout.ir.graph import EdgeData, GraphData, GraphIR, NodeData

__all__ = [
    "EdgeData",
    "GraphData",
    "GraphIR",
    "NodeData",
]
