"""Tests for flow file reading and writing."""

import json
from datetime import datetime, timezone

import pytest

from stitch.core.errors import FlowFormatError, StitchError
from stitch.core.flow import FLOW_FORMAT_VERSION, dump_flow, load_flow, read_flow
from stitch.core.graph import Connection, Node


class TestLoadFlow:
    """Tests for load_flow."""

    def test_object_form(self, login_flow):
        """Objects with nodes and connections load as-is."""
        nodes, connections = login_flow
        text = json.dumps({"version": "1.0.0", "nodes": nodes, "connections": connections})
        flow = load_flow(text)
        assert flow.nodes == nodes
        assert flow.connections == connections
        assert flow.version == "1.0.0"

    def test_bare_node_array(self, basic_nodes):
        """A JSON array is a list of nodes without connections."""
        flow = load_flow(json.dumps(basic_nodes))
        assert flow.nodes == basic_nodes
        assert flow.connections == []
        assert flow.version is None

    def test_missing_and_null_connections(self):
        """Missing or null connections mean none."""
        assert load_flow('{"nodes": []}').connections == []
        assert load_flow('{"nodes": [], "connections": null}').connections == []

    def test_invalid_json(self):
        """Text that is not JSON is a FlowFormatError."""
        with pytest.raises(FlowFormatError, match="not valid JSON"):
            load_flow("{nodes: []")

    def test_wrong_shapes(self):
        """Scalars and non-array fields are rejected."""
        with pytest.raises(FlowFormatError):
            load_flow('"flow"')
        with pytest.raises(FlowFormatError, match="'nodes' must be an array"):
            load_flow('{"nodes": {}}')
        with pytest.raises(FlowFormatError, match="'connections' must be an array"):
            load_flow('{"nodes": [], "connections": "c1"}')

    def test_flow_format_error_is_stitch_error(self):
        """FlowFormatError is catchable as StitchError."""
        with pytest.raises(StitchError):
            load_flow("[")


class TestReadFlow:
    """Tests for read_flow."""

    def test_reads_file(self, flow_file):
        """Files are read and parsed."""
        flow = read_flow(flow_file)
        assert [n["id"] for n in flow.nodes] == ["check", "profile", "auth", "extract", "login"]

    def test_missing_file(self, tmp_path):
        """Unreadable files are a FlowFormatError."""
        with pytest.raises(FlowFormatError, match="Cannot read flow file"):
            read_flow(tmp_path / "missing.json")

    def test_not_utf8(self, tmp_path):
        """Files that are not UTF-8 are a FlowFormatError."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"nodes": [{"id": "\xff"}]}')
        with pytest.raises(FlowFormatError, match="Cannot read flow file"):
            read_flow(path)


class TestDumpFlow:
    """Tests for dump_flow."""

    def test_envelope(self, basic_nodes):
        """Dumped flows carry the version and export time."""
        when = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        data = json.loads(dump_flow(basic_nodes, [], exported_at=when))
        assert data["version"] == FLOW_FORMAT_VERSION
        assert data["exportedAt"] == "2026-01-02T03:04:05+00:00"
        assert data["nodes"] == basic_nodes
        assert data["connections"] == []

    def test_objects_serialized_in_editor_shape(self):
        """Node and Connection objects are written as editor records."""
        node = Node.create("n1", "GET_REQUEST", {"url": "https://x"})
        link = Connection(id="c1", from_node_id="n1", to_node_id="n2", from_output="response")
        data = json.loads(dump_flow([node], [link]))
        assert data["nodes"][0]["id"] == "n1"
        assert data["nodes"][0]["type"] == "GET_REQUEST"
        assert data["nodes"][0]["data"] == {"url": "https://x"}
        assert data["connections"][0]["fromNodeId"] == "n1"
        assert data["connections"][0]["toNodeId"] == "n2"

    def test_dump_then_load(self, login_flow):
        """A dumped flow loads back to the same records."""
        nodes, connections = login_flow
        flow = load_flow(dump_flow(nodes, connections))
        assert flow.nodes == nodes
        assert flow.connections == connections
