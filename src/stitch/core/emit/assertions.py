"""Steps for the validation kinds.

Each comparison kind maps operator names to a step template. An operator
that is missing or not in the mapping falls back to the kind's default
template instead of failing.
"""

from __future__ import annotations

from stitch.core.emit.steps import StepSequence
from stitch.core.graph.model import Node
from stitch.core.logging_config import get_logger
from stitch.core.payloads import (
    FieldMatcherPayload,
    ResponseTimePayload,
    SchemaValidationPayload,
    StatusAssertionPayload,
)
from stitch.core.text import quote

logger = get_logger(__name__)

STATUS_OPERATORS = {
    "equals": "Then status {expected}",
    "not_equals": "Then status != {expected}",
    "greater_than": "Then status > {expected}",
    "less_than": "Then status < {expected}",
}
STATUS_DEFAULT = "equals"

FIELD_OPERATORS = {
    "equals": "And match {path} == {value}",
    "not_equals": "And match {path} != {value}",
    "contains": "And match {path} contains {value}",
    "matches": "And match {path} == {regex}",
    "exists": "And match {path} != null",
}
FIELD_DEFAULT = "equals"

RESPONSE_TIME_OPERATORS = {
    "less_than": "And match responseTime < {limit}",
    "less_than_or_equal": "And match responseTime <= {limit}",
    "greater_than": "And match responseTime > {limit}",
    "greater_than_or_equal": "And match responseTime >= {limit}",
}
RESPONSE_TIME_DEFAULT = "less_than"

TYPE_MARKERS = {
    "string": "#string",
    "number": "#number",
    "boolean": "#boolean",
    "object": "#object",
    "array": "#array",
}


def select_template(templates: dict[str, str], operator: str | None, default: str) -> str:
    """Pick the template for an operator, falling back to the default one."""
    if operator in templates:
        return templates[operator]  # type: ignore[index]
    logger.debug("operator_fallback: operator=%r default=%s", operator, default)
    return templates[default]


def emit_status_assertion(node: Node, steps: StepSequence) -> StepSequence:
    data = node.data
    assert isinstance(data, StatusAssertionPayload)

    if data.expected_status is None:
        return steps.diagnostic(node, "Expected status not configured")
    template = select_template(STATUS_OPERATORS, data.operator, STATUS_DEFAULT)
    return steps.add(node, template.format(expected=data.expected_status))


def emit_field_matcher(node: Node, steps: StepSequence) -> StepSequence:
    data = node.data
    assert isinstance(data, FieldMatcherPayload)

    if not data.json_path or data.expected_value is None:
        return steps.diagnostic(node, "JSON path or expected value not configured")
    template = select_template(FIELD_OPERATORS, data.operator, FIELD_DEFAULT)
    step = template.format(
        path=data.json_path,
        value=quote(data.expected_value),
        regex=quote(f"#regex {data.expected_value}"),
    )
    return steps.add(node, step)


def emit_schema_validation(node: Node, steps: StepSequence) -> StepSequence:
    """Emit a schema, null or type check for a response path."""
    data = node.data
    assert isinstance(data, SchemaValidationPayload)

    path = data.json_path
    if not path:
        return steps.diagnostic(node, "JSON path not configured")

    if data.validation_type == "json_schema":
        if data.schema is None:
            return steps.diagnostic(node, "JSON schema not provided")
        if data.schema_json is None:
            return steps.diagnostic(node, "Invalid JSON schema provided")
        steps = steps.add(node, f"* def schema = {data.schema_json}")
        if data.allow_null:
            return steps.add(
                node,
                f"* match {path} == {quote(f'#notnull || {path} == null')}",
                f"* if ({path} != null) match {path} == '#(schema)'",
            )
        return steps.add(node, f"* match {path} == '#(schema)'")

    if data.validation_type == "not_null":
        return steps.add(node, f"* match {path} == '#notnull'")

    if data.validation_type == "is_null":
        return steps.add(node, f"* match {path} == null")

    if data.validation_type == "type_check":
        if data.schema is None:
            return steps.diagnostic(node, "Expected type not provided")
        expected_type = data.schema.lower()
        marker = TYPE_MARKERS.get(expected_type)
        if marker is None:
            return steps.diagnostic(node, f"Unknown type '{expected_type}'")
        return steps.add(node, f"* match {path} == '{marker}'")

    return steps.diagnostic(node, "Unknown validation type")


def emit_response_time_check(node: Node, steps: StepSequence) -> StepSequence:
    data = node.data
    assert isinstance(data, ResponseTimePayload)

    if data.max_time is None:
        return steps.diagnostic(node, "Max time not configured")
    template = select_template(RESPONSE_TIME_OPERATORS, data.operator, RESPONSE_TIME_DEFAULT)
    return steps.add(node, template.format(limit=data.max_time))
