"""Steps for the HTTP request kinds."""

from __future__ import annotations

from stitch.core.emit.steps import StepSequence
from stitch.core.graph.model import Node
from stitch.core.payloads import RequestPayload
from stitch.core.text import quote
from stitch.core.types import ComponentType

_METHODS = {
    ComponentType.GET_REQUEST: "GET",
    ComponentType.POST_REQUEST: "POST",
    ComponentType.PUT_REQUEST: "PUT",
    ComponentType.DELETE_REQUEST: "DELETE",
}

# Kinds whose payload may carry a body / query parameters / a timeout
_WITH_BODY = frozenset({ComponentType.POST_REQUEST, ComponentType.PUT_REQUEST})
_WITH_PARAMS = frozenset({ComponentType.GET_REQUEST})


def _assignments(keyword: str, values: dict[str, str]) -> list[str]:
    return [f"* {keyword} {name} = {quote(value)}" for name, value in values.items()]


def _body_steps(data: RequestPayload) -> list[str]:
    if data.body is None:
        return []

    if data.body_type == "json":
        return [f"* def requestBody = {data.body}", "* request requestBody"]

    if data.body_type == "form":
        if data.form_fields is None:
            return [f"* form field data = {quote(data.body)}"]
        return _assignments("form field", data.form_fields)

    return [f"* text requestBody = {quote(data.body)}", "* request requestBody"]


def emit_request(node: Node, steps: StepSequence) -> StepSequence:
    """Emit url, headers, params, body and method for a request node."""
    data = node.data
    assert isinstance(data, RequestPayload)

    if not data.url:
        return steps.diagnostic(node, "URL not configured")

    steps = steps.add(node, f"Given url {quote(data.url)}")

    if "headers" in data.problems:
        steps = steps.diagnostic(node, data.problems["headers"])
    steps = steps.add(node, *_assignments("header", data.headers))

    if node.type in _WITH_PARAMS:
        if "queryParams" in data.problems:
            steps = steps.diagnostic(node, data.problems["queryParams"])
        steps = steps.add(node, *_assignments("param", data.query_params))
        if data.timeout:
            steps = steps.add(node, f"* configure timeout = {data.timeout}")

    if node.type in _WITH_BODY:
        if "body" in data.problems:
            steps = steps.diagnostic(node, data.problems["body"])
        steps = steps.add(node, *_body_steps(data))

    return steps.add(node, f"When method {_METHODS[node.type]}")
