"""Typed component payloads.

Raw node data is an open JSON object whose shape depends on the node's
kind, and editors are loose about it: headers arrive as objects or as
JSON strings, bodies as strings or objects, numbers as strings. Every
such variation is resolved here, once, so the emitters only ever see
one canonical representation per field.

Normalization never fails. Anything that cannot be made sense of is
either left as None (the emitter reports it as missing) or recorded in
the payload's ``problems`` (the emitter reports it as malformed).
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from stitch.core.text import collapse_whitespace, compact_json, inline, js_string
from stitch.core.types import ComponentType


@dataclass(frozen=True)
class RequestPayload:
    """Data of the four HTTP request kinds.

    Attributes:
        url: Target URL, None when not configured.
        headers: Header name to value, in input order.
        query_params: Query parameter name to value, in input order.
        timeout: Request timeout in milliseconds, rendered.
        body: Request body, rendered single-line. None when absent.
        body_type: Declared body type ("json", "form", "text", ...).
        form_fields: Body fields when a form body is a JSON object.
        problems: Field name to message for malformed sub-payloads.
    """

    url: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)
    timeout: str | None = None
    body: str | None = None
    body_type: str | None = None
    form_fields: dict[str, str] | None = None
    problems: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class BearerAuthPayload:
    token: str | None = None
    header_name: str = "Authorization"


@dataclass(frozen=True)
class BasicAuthPayload:
    username: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class ApiKeyAuthPayload:
    key: str | None = None
    value: str | None = None
    location: str = "header"


@dataclass(frozen=True)
class StatusAssertionPayload:
    expected_status: str | None = None
    operator: str | None = None


@dataclass(frozen=True)
class FieldMatcherPayload:
    json_path: str | None = None
    expected_value: str | None = None
    operator: str | None = None


@dataclass(frozen=True)
class SchemaValidationPayload:
    """Data of a schema validation.

    Attributes:
        json_path: Response path to validate.
        validation_type: "json_schema", "not_null", "is_null" or "type_check".
        schema: Schema text or type name as given, None when absent.
        schema_json: Compact JSON of the schema when it parsed.
        allow_null: Whether a null value also passes a json_schema check.
    """

    json_path: str | None = None
    validation_type: str | None = None
    schema: str | None = None
    schema_json: str | None = None
    allow_null: bool = False


@dataclass(frozen=True)
class ResponseTimePayload:
    max_time: str | None = None
    operator: str | None = None


@dataclass(frozen=True)
class Extraction:
    """One requested extraction; fields are "" when not provided."""

    variable_name: str
    json_path: str
    default_value: str | None = None


@dataclass(frozen=True)
class VariableExtractorPayload:
    extractions: tuple[Extraction, ...] = ()


@dataclass(frozen=True)
class Assignment:
    """One static variable; value is None when not provided."""

    variable_name: str
    value: str | None = None


@dataclass(frozen=True)
class VariableSetterPayload:
    variables: tuple[Assignment, ...] = ()


Payload = Union[
    RequestPayload,
    BearerAuthPayload,
    BasicAuthPayload,
    ApiKeyAuthPayload,
    StatusAssertionPayload,
    FieldMatcherPayload,
    SchemaValidationPayload,
    ResponseTimePayload,
    VariableExtractorPayload,
    VariableSetterPayload,
]


# ============================================================================
# Field helpers
# ============================================================================


def _text(value: Any) -> str | None:
    """Rendered value, or None for absent/empty values."""
    if value is None or value == "":
        return None
    return js_string(value)


def _truthy_text(value: Any) -> str | None:
    """Rendered value, or None for anything falsy (0 and false included)."""
    if not value:
        return None
    return js_string(value)


def _token(value: Any) -> str | None:
    """Like _text, folded onto one line for unquoted step positions."""
    text = _text(value)
    return None if text is None else inline(text) or None


def _named(items: Mapping[Any, Any], noun: str) -> tuple[dict[str, str], str | None]:
    """Stringify entries, dropping those whose name cannot appear in a step.

    Names are folded onto one line; empty names and names with spaces are
    dropped and reported together as one problem.
    """
    kept: dict[str, str] = {}
    rejected: list[str] = []
    for key, value in items.items():
        name = inline(key)
        if not name or " " in name:
            rejected.append(repr(name))
            continue
        kept[name] = js_string(value)
    if not rejected:
        return kept, None
    plural = "s" if len(rejected) > 1 else ""
    return kept, f"Invalid {noun} name{plural} {', '.join(rejected)}"


def _mapping(value: Any, what: str, noun: str) -> tuple[dict[str, str], str | None]:
    """Normalize an object-or-JSON-string field into an ordered str mapping.

    Returns:
        (mapping, problem) where problem is None when every entry was usable.
        Entries with unusable names are left out of the mapping.
    """
    if value is None or value == "":
        return {}, None
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            return {}, f"Invalid {what} JSON"
    if not isinstance(value, Mapping):
        return {}, f"Invalid {what} JSON"
    return _named(value, noun)


def _entries(value: Any) -> list[Mapping[str, Any]]:
    """List entries, with non-mapping entries read as empty ones."""
    if not isinstance(value, (list, tuple)):
        return []
    return [entry if isinstance(entry, Mapping) else {} for entry in value]


def _name(value: Any) -> str:
    return "" if value is None else inline(value)


# ============================================================================
# Per-kind parsers
# ============================================================================


def _parse_body(
    raw: Any, body_type: str | None
) -> tuple[str | None, Mapping[str, Any] | None]:
    if raw is None or raw == "":
        return None, None

    if body_type == "form":
        parsed = raw
        if isinstance(raw, str):
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                parsed = None
        if isinstance(parsed, Mapping):
            return compact_json(parsed), dict(parsed)
        return js_string(raw), None

    if body_type == "json":
        if isinstance(raw, str):
            try:
                return compact_json(json.loads(raw)), None
            except json.JSONDecodeError:
                # Karate also accepts JS object literals; keep them, one line
                return collapse_whitespace(raw), None
        return js_string(raw), None

    return js_string(raw), None


def _parse_request(data: Mapping[str, Any]) -> RequestPayload:
    problems: dict[str, str] = {}
    headers, problem = _mapping(data.get("headers"), "headers", "header")
    if problem:
        problems["headers"] = problem
    query_params, problem = _mapping(data.get("queryParams"), "query params", "query param")
    if problem:
        problems["queryParams"] = problem

    body_type = _text(data.get("bodyType"))
    body, raw_fields = _parse_body(data.get("body"), body_type)
    form_fields = None
    if raw_fields is not None:
        form_fields, problem = _named(raw_fields, "form field")
        if problem:
            problems["body"] = problem

    return RequestPayload(
        url=_text(data.get("url")),
        headers=headers,
        query_params=query_params,
        timeout=_token(data.get("timeout") or None),
        body=body,
        body_type=body_type,
        form_fields=form_fields,
        problems=problems,
    )


def _parse_bearer(data: Mapping[str, Any]) -> BearerAuthPayload:
    return BearerAuthPayload(
        token=_text(data.get("token")),
        header_name=_token(data.get("headerName")) or "Authorization",
    )


def _parse_basic(data: Mapping[str, Any]) -> BasicAuthPayload:
    return BasicAuthPayload(
        username=_text(data.get("username")), password=_text(data.get("password"))
    )


def _parse_api_key(data: Mapping[str, Any]) -> ApiKeyAuthPayload:
    return ApiKeyAuthPayload(
        key=_token(data.get("key")),
        value=_text(data.get("value")),
        location=_text(data.get("location")) or "header",
    )


def _parse_status(data: Mapping[str, Any]) -> StatusAssertionPayload:
    return StatusAssertionPayload(
        expected_status=_token(data.get("expectedStatus")),
        operator=_text(data.get("operator")),
    )


def _parse_field_matcher(data: Mapping[str, Any]) -> FieldMatcherPayload:
    return FieldMatcherPayload(
        json_path=_token(data.get("jsonPath")),
        expected_value=_text(data.get("expectedValue")),
        operator=_text(data.get("operator")),
    )


def _parse_schema(data: Mapping[str, Any]) -> SchemaValidationPayload:
    raw = data.get("schema")
    schema: str | None
    schema_json: str | None = None
    if isinstance(raw, (Mapping, list)):
        schema = compact_json(raw)
        schema_json = schema
    else:
        schema = _text(raw)
        if isinstance(raw, str) and schema is not None:
            try:
                schema_json = compact_json(json.loads(raw))
            except json.JSONDecodeError:
                schema_json = None

    return SchemaValidationPayload(
        json_path=_token(data.get("jsonPath")),
        validation_type=_text(data.get("validationType")),
        schema=schema,
        schema_json=schema_json,
        allow_null=bool(data.get("allowNull")),
    )


def _parse_response_time(data: Mapping[str, Any]) -> ResponseTimePayload:
    return ResponseTimePayload(
        max_time=_token(data.get("maxTime")),
        operator=_text(data.get("operator")),
    )


def _parse_extractor(data: Mapping[str, Any]) -> VariableExtractorPayload:
    extractions = tuple(
        Extraction(
            variable_name=_name(entry.get("variableName")),
            json_path=_name(entry.get("jsonPath")),
            default_value=_truthy_text(entry.get("defaultValue")),
        )
        for entry in _entries(data.get("extractions"))
    )
    return VariableExtractorPayload(extractions=extractions)


def _parse_setter(data: Mapping[str, Any]) -> VariableSetterPayload:
    variables = tuple(
        Assignment(
            variable_name=_name(entry.get("variableName")),
            value=None if entry.get("value") is None else js_string(entry.get("value")),
        )
        for entry in _entries(data.get("variables"))
    )
    return VariableSetterPayload(variables=variables)


_PARSERS: dict[ComponentType, Callable[[Mapping[str, Any]], Payload]] = {
    ComponentType.GET_REQUEST: _parse_request,
    ComponentType.POST_REQUEST: _parse_request,
    ComponentType.PUT_REQUEST: _parse_request,
    ComponentType.DELETE_REQUEST: _parse_request,
    ComponentType.BEARER_AUTH: _parse_bearer,
    ComponentType.BASIC_AUTH: _parse_basic,
    ComponentType.API_KEY_AUTH: _parse_api_key,
    ComponentType.STATUS_ASSERTION: _parse_status,
    ComponentType.FIELD_MATCHER: _parse_field_matcher,
    ComponentType.SCHEMA_VALIDATION: _parse_schema,
    ComponentType.RESPONSE_TIME_CHECK: _parse_response_time,
    ComponentType.VARIABLE_EXTRACTOR: _parse_extractor,
    ComponentType.VARIABLE_SETTER: _parse_setter,
}

_missing = set(ComponentType) - set(_PARSERS)
if _missing:
    missing = sorted(m.value for m in _missing)
    raise RuntimeError(f"Component kinds without a payload parser: {missing}")


def parse_payload(kind: ComponentType, data: Mapping[str, Any] | None) -> Payload:
    """Normalize a node's raw data into the typed payload for its kind.

    Args:
        kind: The node's component kind.
        data: Raw data object; None or a non-mapping reads as empty.

    Returns:
        The typed payload.
    """
    if not isinstance(data, Mapping):
        data = {}
    return _PARSERS[kind](data)
