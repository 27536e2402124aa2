"""Steps for the authentication kinds."""

from __future__ import annotations

import base64

from stitch.core.emit.steps import StepSequence
from stitch.core.graph.model import Node
from stitch.core.payloads import ApiKeyAuthPayload, BasicAuthPayload, BearerAuthPayload
from stitch.core.text import quote


def basic_credentials(username: str, password: str) -> str:
    """Encode ``username:password`` for a Basic Authorization header."""
    return base64.b64encode(f"{username}:{password}".encode()).decode("ascii")


def emit_bearer_auth(node: Node, steps: StepSequence) -> StepSequence:
    data = node.data
    assert isinstance(data, BearerAuthPayload)

    if not data.token:
        return steps.diagnostic(node, "Token not configured")
    return steps.add(node, f"* header {data.header_name} = {quote('Bearer ' + data.token)}")


def emit_basic_auth(node: Node, steps: StepSequence) -> StepSequence:
    data = node.data
    assert isinstance(data, BasicAuthPayload)

    if not data.username or not data.password:
        return steps.diagnostic(node, "Username or password not configured")
    credentials = basic_credentials(data.username, data.password)
    return steps.add(node, f"* header Authorization = {quote('Basic ' + credentials)}")


def emit_api_key_auth(node: Node, steps: StepSequence) -> StepSequence:
    """Emit the key as a header, or as a query parameter for any other location."""
    data = node.data
    assert isinstance(data, ApiKeyAuthPayload)

    if not data.key or not data.value:
        return steps.diagnostic(node, "Key or value not configured")
    keyword = "header" if data.location == "header" else "param"
    return steps.add(node, f"* {keyword} {data.key} = {quote(data.value)}")
