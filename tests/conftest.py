"""Pytest configuration and fixtures."""

import json

import pytest


def node(node_id, node_type, **data):
    """Build a node record in the editor's JSON shape."""
    return {"id": node_id, "type": node_type, "data": data}


def connection(conn_id, from_id, to_id, from_output="response", to_input="response"):
    """Build a connection record in the editor's JSON shape."""
    return {
        "id": conn_id,
        "fromNodeId": from_id,
        "toNodeId": to_id,
        "fromOutput": from_output,
        "toInput": to_input,
    }


@pytest.fixture
def make_node():
    """Factory for node records."""
    return node


@pytest.fixture
def make_connection():
    """Factory for connection records."""
    return connection


@pytest.fixture
def basic_nodes():
    """A GET request followed by a status assertion, unconnected."""
    return [
        node("n1", "GET_REQUEST", url="https://x/y"),
        node("n2", "STATUS_ASSERTION", expectedStatus=200, operator="equals"),
    ]


@pytest.fixture
def login_flow():
    """Login, extract the token, call an authenticated endpoint, check it."""
    nodes = [
        node("check", "STATUS_ASSERTION", expectedStatus=200, operator="equals"),
        node("profile", "GET_REQUEST", url="https://api.example.com/me"),
        node("auth", "BEARER_AUTH", token="#(token)"),
        node(
            "extract",
            "VARIABLE_EXTRACTOR",
            extractions=[{"variableName": "token", "jsonPath": "$.token"}],
        ),
        node(
            "login",
            "POST_REQUEST",
            url="https://api.example.com/login",
            bodyType="json",
            body='{"user": "demo", "password": "secret"}',
        ),
    ]
    connections = [
        connection("c1", "login", "extract", "response", "response"),
        connection("c2", "extract", "auth", "extractedVariables", None),
        connection("c3", "auth", "profile", None, "headers"),
        connection("c4", "profile", "check", "status", None),
    ]
    return nodes, connections


@pytest.fixture
def flow_file(tmp_path, login_flow):
    """The login flow written to a flow JSON file."""
    nodes, connections = login_flow
    path = tmp_path / "flow.json"
    path.write_text(json.dumps({"version": "1.0.0", "nodes": nodes, "connections": connections}))
    return path
