"""Pure data types for stitch.core.

These are simple enums and dataclasses with no behavior coupling.
They can be serialized, passed around, and used anywhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ComponentType(str, Enum):
    """Closed set of component kinds a flow can contain."""

    GET_REQUEST = "GET_REQUEST"
    POST_REQUEST = "POST_REQUEST"
    PUT_REQUEST = "PUT_REQUEST"
    DELETE_REQUEST = "DELETE_REQUEST"
    BEARER_AUTH = "BEARER_AUTH"
    BASIC_AUTH = "BASIC_AUTH"
    API_KEY_AUTH = "API_KEY_AUTH"
    STATUS_ASSERTION = "STATUS_ASSERTION"
    FIELD_MATCHER = "FIELD_MATCHER"
    SCHEMA_VALIDATION = "SCHEMA_VALIDATION"
    RESPONSE_TIME_CHECK = "RESPONSE_TIME_CHECK"
    VARIABLE_EXTRACTOR = "VARIABLE_EXTRACTOR"
    VARIABLE_SETTER = "VARIABLE_SETTER"

    @classmethod
    def parse(cls, value: Any) -> ComponentType | None:
        """Look up a kind by its wire name.

        Returns:
            The matching kind, or None if the value is not a known kind.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class ComponentCategory(str, Enum):
    """Palette grouping of component kinds."""

    HTTP_REQUEST = "HTTP_REQUEST"
    AUTHENTICATION = "AUTHENTICATION"
    VALIDATION = "VALIDATION"
    DATA_MANAGEMENT = "DATA_MANAGEMENT"


class WarningCode(str, Enum):
    """Reasons a record is dropped or flagged while building a graph."""

    INVALID_RECORD = "invalid_record"
    MISSING_ID = "missing_id"
    UNKNOWN_TYPE = "unknown_type"
    DUPLICATE_ID = "duplicate_id"
    UNKNOWN_ENDPOINT = "unknown_endpoint"
    SELF_LOOP = "self_loop"
    UNKNOWN_PORT = "unknown_port"


@dataclass(frozen=True)
class GraphWarning:
    """A graph-level problem found while building a flow graph.

    Attributes:
        code: What kind of problem this is.
        message: Human-readable explanation.
        subject: Id of the node or connection concerned, if it had one.
    """

    code: WarningCode
    message: str
    subject: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code.value, "message": self.message, "subject": self.subject}

    def __str__(self) -> str:
        return self.message
