"""Component registry.

One ComponentDefinition per ComponentType: palette metadata, the default
data a new component starts with, and the logical ports connections may
name. Ports are advisory; a kind that declares none accepts any name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from stitch.core.types import ComponentCategory, ComponentType


@dataclass(frozen=True)
class ComponentDefinition:
    """Static description of one component kind.

    Attributes:
        type: The kind described.
        name: Display name.
        label: Prefix used in diagnostic steps.
        category: Palette category.
        description: One-line summary.
        default_data: Data a freshly placed component starts with.
        outputs: Names of the logical outputs the kind exposes.
        inputs: Names of the logical inputs the kind accepts.
    """

    type: ComponentType
    name: str
    label: str
    category: ComponentCategory
    description: str
    default_data: dict[str, Any] = field(default_factory=dict)
    outputs: tuple[str, ...] = ()
    inputs: tuple[str, ...] = ()

    def accepts_output(self, name: str | None) -> bool:
        return not self.outputs or name is None or name in self.outputs

    def accepts_input(self, name: str | None) -> bool:
        return not self.inputs or name is None or name in self.inputs

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
            "default_data": dict(self.default_data),
            "outputs": list(self.outputs),
            "inputs": list(self.inputs),
        }


_RESPONSE_OUTPUTS = ("response", "status", "body")

_DEFINITIONS = (
    ComponentDefinition(
        type=ComponentType.GET_REQUEST,
        name="GET Request",
        label="GET Request",
        category=ComponentCategory.HTTP_REQUEST,
        description="Make a GET HTTP request",
        default_data={"url": "", "headers": {}, "queryParams": {}, "timeout": 30000},
        outputs=_RESPONSE_OUTPUTS,
        inputs=("url", "headers", "queryParams"),
    ),
    ComponentDefinition(
        type=ComponentType.POST_REQUEST,
        name="POST Request",
        label="POST Request",
        category=ComponentCategory.HTTP_REQUEST,
        description="Make a POST HTTP request",
        default_data={"url": "", "headers": {}, "body": "", "bodyType": "json"},
        outputs=(*_RESPONSE_OUTPUTS, "id"),
        inputs=("url", "headers", "body"),
    ),
    ComponentDefinition(
        type=ComponentType.PUT_REQUEST,
        name="PUT Request",
        label="PUT Request",
        category=ComponentCategory.HTTP_REQUEST,
        description="Make a PUT HTTP request",
        default_data={"url": "", "headers": {}, "body": "", "bodyType": "json"},
        outputs=_RESPONSE_OUTPUTS,
        inputs=("url", "headers", "body"),
    ),
    ComponentDefinition(
        type=ComponentType.DELETE_REQUEST,
        name="DELETE Request",
        label="DELETE Request",
        category=ComponentCategory.HTTP_REQUEST,
        description="Make a DELETE HTTP request",
        default_data={"url": "", "headers": {}},
        outputs=_RESPONSE_OUTPUTS,
        inputs=("url", "headers"),
    ),
    ComponentDefinition(
        type=ComponentType.BEARER_AUTH,
        name="Bearer Token",
        label="Bearer Auth",
        category=ComponentCategory.AUTHENTICATION,
        description="Add Bearer token authentication",
        default_data={"token": "", "headerName": "Authorization"},
    ),
    ComponentDefinition(
        type=ComponentType.BASIC_AUTH,
        name="Basic Auth",
        label="Basic Auth",
        category=ComponentCategory.AUTHENTICATION,
        description="Add Basic authentication",
        default_data={"username": "", "password": ""},
    ),
    ComponentDefinition(
        type=ComponentType.API_KEY_AUTH,
        name="API Key",
        label="API Key Auth",
        category=ComponentCategory.AUTHENTICATION,
        description="Add API key authentication",
        default_data={"key": "", "value": "", "location": "header"},
    ),
    ComponentDefinition(
        type=ComponentType.STATUS_ASSERTION,
        name="Status Check",
        label="Status Assertion",
        category=ComponentCategory.VALIDATION,
        description="Assert HTTP status code",
        default_data={"expectedStatus": 200, "operator": "equals"},
    ),
    ComponentDefinition(
        type=ComponentType.FIELD_MATCHER,
        name="Field Matcher",
        label="Field Matcher",
        category=ComponentCategory.VALIDATION,
        description="Assert specific JSON field values",
        default_data={"jsonPath": "", "expectedValue": "", "operator": "equals"},
    ),
    ComponentDefinition(
        type=ComponentType.SCHEMA_VALIDATION,
        name="Schema Validation",
        label="Schema Validation",
        category=ComponentCategory.VALIDATION,
        description="Validate a response field against a schema or type",
        default_data={
            "jsonPath": "$",
            "validationType": "json_schema",
            "schema": "",
            "allowNull": False,
        },
    ),
    ComponentDefinition(
        type=ComponentType.RESPONSE_TIME_CHECK,
        name="Response Time",
        label="Response Time Check",
        category=ComponentCategory.VALIDATION,
        description="Check response time limits",
        default_data={"maxTime": 1000, "operator": "less_than"},
    ),
    ComponentDefinition(
        type=ComponentType.VARIABLE_EXTRACTOR,
        name="Extract Variables",
        label="Variable Extractor",
        category=ComponentCategory.DATA_MANAGEMENT,
        description="Extract multiple values from response",
        default_data={"extractions": [{"variableName": "", "jsonPath": "", "defaultValue": ""}]},
        outputs=("extractedVariables",),
        inputs=("response",),
    ),
    ComponentDefinition(
        type=ComponentType.VARIABLE_SETTER,
        name="Set Variables",
        label="Variable Setter",
        category=ComponentCategory.DATA_MANAGEMENT,
        description="Set multiple static variable values",
        default_data={"variables": [{"variableName": "", "value": ""}]},
        outputs=("setVariables",),
    ),
)

REGISTRY: MappingProxyType[ComponentType, ComponentDefinition] = MappingProxyType(
    {definition.type: definition for definition in _DEFINITIONS}
)

_missing = set(ComponentType) - set(REGISTRY)
if _missing:
    raise RuntimeError(f"Component kinds without a definition: {sorted(m.value for m in _missing)}")


def get_definition(kind: ComponentType) -> ComponentDefinition:
    """Get the definition of a component kind."""
    return REGISTRY[kind]


def list_definitions(category: ComponentCategory | None = None) -> list[ComponentDefinition]:
    """List definitions in palette order, optionally filtered by category."""
    return [d for d in REGISTRY.values() if category is None or d.category == category]
