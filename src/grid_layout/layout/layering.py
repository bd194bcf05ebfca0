"""Layer assignment: Kahn-style topological layering.

Each layer is the frontier of nodes whose in-degree has dropped to zero,
sorted lexicographically so the result does not depend on input order.

Cycles are not fatal. Nodes the frontier never reaches (members of a cycle
and everything downstream of one) are collected into a single final layer,
sorted lexicographically, and a warning names them.
"""

from __future__ import annotations

import logging

from grid_layout.ir.graph import GraphIR

logger = logging.getLogger(__name__)


def assign_layers(gir: GraphIR) -> list[list[str]]:
    """Partition the nodes of ``gir`` into ordered layers.

    For acyclic graphs every edge points from a lower layer index to a
    strictly higher one.
    """
    if not gir.config.directed:
        logger.debug("directed=False has no effect; layering treats edges as directed")

    node_ids = gir.node_ids()
    in_deg: dict[str, int] = {node_id: gir.in_degree(node_id) for node_id in node_ids}

    layers: list[list[str]] = []
    frontier = sorted(node_id for node_id, deg in in_deg.items() if deg == 0)

    while frontier:
        layers.append(frontier)
        next_frontier: list[str] = []
        seen: set[str] = set()
        for node_id in frontier:
            for succ in gir.successors(node_id):
                in_deg[succ] -= 1
                if in_deg[succ] == 0 and succ not in seen:
                    seen.add(succ)
                    next_frontier.append(succ)
        next_frontier.sort()
        frontier = next_frontier

    placed = sum(len(layer) for layer in layers)
    if placed < len(node_ids):
        layered = {node_id for layer in layers for node_id in layer}
        remaining = sorted(node_id for node_id in node_ids if node_id not in layered)
        logger.warning(
            "Graph contains cycles; placing %d unresolved node(s) in a final layer: %s",
            len(remaining),
            ", ".join(remaining),
        )
        layers.append(remaining)

    return layers


def layer_index(layers: list[list[str]]) -> dict[str, int]:
    """Map each node id to the index of its layer."""
    return {node_id: idx for idx, layer in enumerate(layers) for node_id in layer}
