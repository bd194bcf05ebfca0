"""Graph IR — normalized input records and the networkx DiGraph built from them.

``GraphData`` is the typed form of the layout request (nodes, edges, config).
``GraphIR`` wraps a networkx DiGraph over the same nodes and owns the
reference check: every edge endpoint must name a known node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import networkx as nx

from grid_layout.config import LayoutConfig
from grid_layout.errors import MalformedInput, UnknownNodeReference


@dataclass(frozen=True)
class NodeData:
    id: str
    name: str = ""
    label: str = ""
    width: int = 0
    height: int = 0
    shape: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.id)

    @property
    def display_label(self) -> str:
        """Explicit label when non-empty, otherwise the node name."""
        return self.label if self.label else self.name

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NodeData:
        if not isinstance(data, dict):
            raise MalformedInput(f"node must be an object, got {type(data).__name__}")
        node_id = _require_str(data, "id", "node")
        name = data.get("name")
        if name is None:
            name = node_id
        label = data.get("label")
        if label is None:
            label = ""
        return cls(
            id=node_id,
            name=_as_str(name, "name", node_id),
            label=_as_str(label, "label", node_id),
            width=_as_size(data.get("width"), "width", node_id),
            height=_as_size(data.get("height"), "height", node_id),
            shape=data.get("shape"),
        )


@dataclass(frozen=True)
class EdgeData:
    id: str
    from_id: str
    to_id: str
    label: str | None = None
    style: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], index: int = 0) -> EdgeData:
        if not isinstance(data, dict):
            raise MalformedInput(f"edge must be an object, got {type(data).__name__}")
        edge_id = data.get("id")
        if edge_id is None:
            edge_id = f"e{index}"
        edge_id = _as_str(edge_id, "id", f"#{index}")
        label = data.get("label")
        if label is not None:
            label = _as_str(label, "label", edge_id)
        return cls(
            id=edge_id,
            from_id=_require_str(data, "from", f"edge '{edge_id}'"),
            to_id=_require_str(data, "to", f"edge '{edge_id}'"),
            label=label,
            style=data.get("style"),
        )


@dataclass(frozen=True)
class GraphData:
    """A complete layout request."""

    nodes: list[NodeData] = field(default_factory=list)
    edges: list[EdgeData] = field(default_factory=list)
    config: LayoutConfig = field(default_factory=LayoutConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GraphData:
        """Build a request from a JSON-like record.

        Missing optional fields take their defaults; missing required fields
        (node ``id``, edge ``from``/``to``) raise MalformedInput.
        """
        if not isinstance(data, dict):
            raise MalformedInput(f"graph must be an object, got {type(data).__name__}")
        raw_nodes = data.get("nodes", [])
        raw_edges = data.get("edges", [])
        if not isinstance(raw_nodes, list) or not isinstance(raw_edges, list):
            raise MalformedInput("'nodes' and 'edges' must be arrays")

        nodes = [NodeData.from_dict(n) for n in raw_nodes]
        edges = [EdgeData.from_dict(e, i) for i, e in enumerate(raw_edges)]
        config = LayoutConfig.from_dict(data.get("config"))
        return cls(nodes=nodes, edges=edges, config=config)


class GraphIR:
    """Wraps a networkx DiGraph built from validated GraphData.

    Node attributes hold the NodeData under ``data``. Parallel edges collapse
    into one DiGraph edge, so each predecessor counts once toward in-degree.
    """

    def __init__(self, digraph: nx.DiGraph, graph: GraphData) -> None:
        self.digraph = digraph
        self.graph = graph

    @classmethod
    def from_graph_data(cls, graph: GraphData) -> GraphIR:
        """Build the DiGraph, rejecting duplicate ids and dangling edge endpoints."""
        digraph: nx.DiGraph = nx.DiGraph()
        for node in graph.nodes:
            if node.id in digraph:
                raise MalformedInput(f"Duplicate node id '{node.id}'")
            digraph.add_node(node.id, data=node)

        for edge in graph.edges:
            if edge.from_id not in digraph:
                raise UnknownNodeReference(edge.id, edge.from_id, "from")
            if edge.to_id not in digraph:
                raise UnknownNodeReference(edge.id, edge.to_id, "to")
            digraph.add_edge(edge.from_id, edge.to_id)

        return cls(digraph=digraph, graph=graph)

    @property
    def config(self) -> LayoutConfig:
        return self.graph.config

    def node(self, node_id: str) -> NodeData:
        return self.digraph.nodes[node_id]["data"]

    def node_ids(self) -> list[str]:
        """Node ids in input order."""
        return list(self.digraph.nodes)

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def in_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.in_degree(node_id)

    def successors(self, node_id: str) -> list[str]:
        return sorted(self.digraph.successors(node_id))


def _require_str(data: dict[str, Any], key: str, where: str) -> str:
    if key not in data or data[key] is None:
        raise MalformedInput(f"{where} is missing required field '{key}'")
    return _as_str(data[key], key, where)


def _as_str(value: Any, key: str, where: str) -> str:
    if not isinstance(value, str):
        raise MalformedInput(f"field '{key}' of {where} must be a string, got {type(value).__name__}")
    return value


def _as_size(value: Any, key: str, node_id: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedInput(f"field '{key}' of node '{node_id}' must be a non-negative integer, got {value!r}")
    return value
