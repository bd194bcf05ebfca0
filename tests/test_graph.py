"""Tests for grid_layout.ir.graph and grid_layout.config — input records, defaults, validation."""

import pytest

from grid_layout.config import LayoutConfig
from grid_layout.errors import MalformedInput, UnknownNodeReference
from grid_layout.ir.graph import EdgeData, GraphData, GraphIR, NodeData
from grid_layout.types import FlowDirection


def _graph(nodes: list[str], edges: list[tuple[str, str]]) -> GraphData:
    return GraphData(
        nodes=[NodeData(id=n) for n in nodes],
        edges=[EdgeData(id=f"e{i}", from_id=src, to_id=tgt) for i, (src, tgt) in enumerate(edges)],
    )


class TestNodeData:
    def test_name_defaults_to_id(self):
        assert NodeData(id="a").name == "a"

    def test_display_label_prefers_label(self):
        assert NodeData(id="a", name="Alpha", label="First").display_label == "First"

    def test_display_label_falls_back_to_name(self):
        assert NodeData(id="a", name="Alpha").display_label == "Alpha"

    def test_from_dict_defaults(self):
        node = NodeData.from_dict({"id": "n1"})
        assert node.name == "n1"
        assert node.label == ""
        assert node.width == 0
        assert node.height == 0
        assert node.shape is None

    def test_from_dict_null_label_is_empty(self):
        assert NodeData.from_dict({"id": "n1", "name": "N", "label": None}).display_label == "N"

    @pytest.mark.parametrize("label", [0, False, []])
    def test_from_dict_falsy_non_string_label_rejected(self, label):
        with pytest.raises(MalformedInput, match="'label'"):
            NodeData.from_dict({"id": "a", "label": label})

    def test_from_dict_missing_id(self):
        with pytest.raises(MalformedInput, match="'id'"):
            NodeData.from_dict({"name": "nameless"})

    def test_from_dict_negative_width(self):
        with pytest.raises(MalformedInput):
            NodeData.from_dict({"id": "a", "width": -1})

    def test_from_dict_bool_height_rejected(self):
        with pytest.raises(MalformedInput):
            NodeData.from_dict({"id": "a", "height": True})

    def test_shape_passes_through(self):
        assert NodeData.from_dict({"id": "a", "shape": "diamond"}).shape == "diamond"


class TestEdgeData:
    def test_from_dict(self):
        edge = EdgeData.from_dict({"id": "x", "from": "a", "to": "b", "label": "go", "style": "dashed"})
        assert edge == EdgeData(id="x", from_id="a", to_id="b", label="go", style="dashed")

    def test_default_id_from_index(self):
        assert EdgeData.from_dict({"from": "a", "to": "b"}, 4).id == "e4"

    def test_missing_to(self):
        with pytest.raises(MalformedInput, match="'to'"):
            EdgeData.from_dict({"id": "x", "from": "a"})

    def test_non_string_endpoint(self):
        with pytest.raises(MalformedInput):
            EdgeData.from_dict({"id": "x", "from": "a", "to": 3})


class TestGraphDataFromDict:
    def test_empty_record(self):
        graph = GraphData.from_dict({})
        assert graph.nodes == []
        assert graph.edges == []
        assert graph.config == LayoutConfig()

    def test_not_an_object(self):
        with pytest.raises(MalformedInput):
            GraphData.from_dict([])

    def test_nodes_not_a_list(self):
        with pytest.raises(MalformedInput):
            GraphData.from_dict({"nodes": {"id": "a"}})

    def test_config_applied(self):
        graph = GraphData.from_dict({"nodes": [{"id": "a"}], "config": {"flow": "South", "node_spacing": 1}})
        assert graph.config.flow is FlowDirection.SOUTH
        assert graph.config.node_spacing == 1
        assert graph.config.rank_spacing == 5


class TestLayoutConfig:
    def test_defaults(self):
        config = LayoutConfig()
        assert config.flow is FlowDirection.EAST
        assert config.node_spacing == 3
        assert config.rank_spacing == 5
        assert config.directed is True
        assert config.avoid_obstacles is False

    def test_compact_profile(self):
        config = LayoutConfig.compact()
        assert (config.node_spacing, config.rank_spacing) == (2, 3)

    def test_negative_spacing_rejected(self):
        with pytest.raises(MalformedInput, match="non-negative"):
            LayoutConfig(rank_spacing=-1)

    def test_flow_name_normalised(self):
        assert LayoutConfig(flow="South").flow is FlowDirection.SOUTH

    def test_invalid_flow_value_rejected(self):
        with pytest.raises(MalformedInput, match="Unknown flow"):
            LayoutConfig(flow="up")

    def test_unknown_flow_rejected(self):
        with pytest.raises(MalformedInput, match="Unknown flow"):
            LayoutConfig.from_dict({"flow": "up"})

    def test_non_bool_flag_rejected(self):
        with pytest.raises(MalformedInput):
            LayoutConfig.from_dict({"directed": "yes"})

    def test_to_dict_round_trip(self):
        config = LayoutConfig(flow=FlowDirection.NORTH, node_spacing=1, rank_spacing=2, directed=False)
        assert LayoutConfig.from_dict(config.to_dict()) == config


class TestGraphIR:
    def test_counts(self):
        gir = GraphIR.from_graph_data(_graph(["c", "a", "b"], [("a", "b"), ("b", "c")]))
        assert gir.node_count() == 3
        assert gir.node_ids() == ["c", "a", "b"]

    def test_parallel_edges_count_once(self):
        gir = GraphIR.from_graph_data(_graph(["a", "b"], [("a", "b"), ("a", "b")]))
        assert gir.digraph.number_of_edges() == 1
        assert gir.in_degree("b") == 1


    def test_unknown_target(self):
        with pytest.raises(UnknownNodeReference) as exc:
            GraphIR.from_graph_data(_graph(["a"], [("a", "zz")]))
        assert exc.value.edge_id == "e0"
        assert exc.value.node_id == "zz"
        assert exc.value.end == "to"
        assert "zz" in str(exc.value)

    def test_unknown_source(self):
        with pytest.raises(UnknownNodeReference) as exc:
            GraphIR.from_graph_data(_graph(["b"], [("ghost", "b")]))
        assert exc.value.end == "from"

    def test_duplicate_node_id(self):
        with pytest.raises(MalformedInput, match="Duplicate"):
            GraphIR.from_graph_data(_graph(["a", "a"], []))

    def test_successors_sorted(self):
        gir = GraphIR.from_graph_data(_graph(["a", "b", "c"], [("a", "c"), ("a", "b")]))
        assert gir.successors("a") == ["b", "c"]
        assert gir.in_degree("c") == 1
        assert gir.in_degree("missing") == 0
