"""Position assignment: layers to absolute grid coordinates.

The rank axis is x for east/west flows and y for north/south flows; the
order axis is the other one. Each layer occupies a slot along the rank axis
as wide as its largest member, followed by ``rank_spacing``. Within a layer,
nodes are stacked along the order axis with ``node_spacing`` between them.

West and north flows mirror the rank axis: rank 0 ends at the origin and
later layers extend into negative coordinates.
"""

from __future__ import annotations

from grid_layout.ir.graph import GraphIR
from grid_layout.layout.sizing import MonospaceSizeEstimator, SizeEstimator
from grid_layout.layout.types import NodePosition


def assign_positions(
    layers: list[list[str]],
    gir: GraphIR,
    estimator: SizeEstimator | None = None,
) -> list[NodePosition]:
    """Assign (x, y) grid coordinates to every node in ``layers``."""
    config = gir.config
    estimator = estimator or MonospaceSizeEstimator()
    horizontal = config.flow.is_horizontal
    reversed_flow = config.flow.is_reversed

    def along_axes(width: int, height: int) -> tuple[int, int]:
        # (size along rank axis, size along order axis)
        return (width, height) if horizontal else (height, width)

    positions: list[NodePosition] = []
    rank_offset = 0

    for layer_idx, layer in enumerate(layers):
        sizes = {node_id: estimator.size(gir.node(node_id)) for node_id in layer}
        slot = max((along_axes(*sizes[nid])[0] for nid in layer), default=0)

        order_offset = 0
        for order, node_id in enumerate(layer):
            node = gir.node(node_id)
            width, height = sizes[node_id]
            rank_size, order_size = along_axes(width, height)

            rank_coord = -(rank_offset + rank_size) if reversed_flow else rank_offset
            if horizontal:
                x, y = rank_coord, order_offset
            else:
                x, y = order_offset, rank_coord

            positions.append(
                NodePosition(
                    id=node_id,
                    x=x,
                    y=y,
                    width=width,
                    height=height,
                    label=node.display_label,
                    layer=layer_idx,
                    order=order,
                    shape=node.shape,
                )
            )
            order_offset += order_size + config.node_spacing

        rank_offset += slot + config.rank_spacing

    return positions
