"""Layout facade: runs the pipeline stages in order for one request.

Stages: IDLE → VALIDATING → LAYERING → POSITIONING → ROUTING → BOUNDING → DONE.
Any LayoutError moves the run to FAILED and is re-raised with ``stage`` set
to where it stopped. The engine keeps no state between calls.
"""

from __future__ import annotations

import logging

from grid_layout.errors import LayoutError
from grid_layout.ir.graph import GraphData, GraphIR
from grid_layout.layout.bounds import compute_bounds
from grid_layout.layout.grid import OccupancyGrid
from grid_layout.layout.layering import assign_layers
from grid_layout.layout.positions import assign_positions
from grid_layout.layout.routing import route_edges
from grid_layout.layout.sizing import SizeEstimator
from grid_layout.layout.types import LayoutResult
from grid_layout.types import LayoutStage

logger = logging.getLogger(__name__)


class GridLayout:
    """Layered grid layout engine."""

    def __init__(self, estimator: SizeEstimator | None = None) -> None:
        self.estimator = estimator

    def layout(self, graph: GraphData) -> LayoutResult:
        stage = LayoutStage.IDLE
        try:
            stage = self._enter(LayoutStage.VALIDATING)
            gir = GraphIR.from_graph_data(graph)
            if gir.node_count() == 0:
                self._enter(LayoutStage.DONE)
                return LayoutResult()

            stage = self._enter(LayoutStage.LAYERING)
            layers = assign_layers(gir)

            stage = self._enter(LayoutStage.POSITIONING)
            positions = assign_positions(layers, gir, self.estimator)

            stage = self._enter(LayoutStage.ROUTING)
            grid = OccupancyGrid.from_positions(positions)
            edges = route_edges(graph.edges, positions, graph.config, grid)

            stage = self._enter(LayoutStage.BOUNDING)
            bounds = compute_bounds(positions)
        except LayoutError as e:
            if e.stage is None:
                e.stage = stage
            self._enter(LayoutStage.FAILED)
            logger.debug("Layout failed during %s: %s", stage.value, e)
            raise

        self._enter(LayoutStage.DONE)
        return LayoutResult(nodes=positions, edges=edges, bounds=bounds, layers=layers)

    @staticmethod
    def _enter(stage: LayoutStage) -> LayoutStage:
        logger.debug("layout stage: %s", stage.value)
        return stage
