"""Tests for authentication step emission."""

import base64

from stitch.core.emit import StepSequence, emit_node
from stitch.core.emit.auth import basic_credentials
from stitch.core.graph import Node


def emit(node_type, **data):
    return emit_node(Node.create("auth", node_type, data), StepSequence()).lines()


class TestBearerAuth:
    """Tests for bearer tokens."""

    def test_default_header(self):
        """Tokens go into the Authorization header by default."""
        assert emit("BEARER_AUTH", token="abc123") == [
            "* header Authorization = 'Bearer abc123'"
        ]

    def test_custom_header(self):
        """A custom header name is honored."""
        assert emit("BEARER_AUTH", token="t", headerName="X-Auth") == [
            "* header X-Auth = 'Bearer t'"
        ]

    def test_missing_token(self):
        """A missing token is a diagnostic."""
        assert emit("BEARER_AUTH") == ['* print "Bearer Auth: Token not configured"']


class TestBasicAuth:
    """Tests for basic credentials."""

    def test_credentials_encoded(self):
        """Username and password are base64 encoded."""
        expected = base64.b64encode(b"ada:s3cret").decode()
        assert emit("BASIC_AUTH", username="ada", password="s3cret") == [
            f"* header Authorization = 'Basic {expected}'"
        ]

    def test_non_ascii_credentials(self):
        """Credentials are encoded as UTF-8."""
        assert basic_credentials("josé", "päss") == base64.b64encode(
            "josé:päss".encode()
        ).decode()

    def test_missing_password(self):
        """Both fields are required."""
        assert emit("BASIC_AUTH", username="ada") == [
            '* print "Basic Auth: Username or password not configured"'
        ]


class TestApiKeyAuth:
    """Tests for API keys."""

    def test_header_location(self):
        """Keys default to a header."""
        assert emit("API_KEY_AUTH", key="X-API-Key", value="k1") == ["* header X-API-Key = 'k1'"]

    def test_query_location(self):
        """Any other location sends a query parameter."""
        assert emit("API_KEY_AUTH", key="api_key", value="k1", location="query") == [
            "* param api_key = 'k1'"
        ]

    def test_missing_value(self):
        """Key and value are both required."""
        assert emit("API_KEY_AUTH", key="X-API-Key") == [
            '* print "API Key Auth: Key or value not configured"'
        ]
