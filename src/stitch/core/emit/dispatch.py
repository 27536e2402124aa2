"""Dispatch from component kind to step emitter."""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType

from stitch.core.emit.assertions import (
    emit_field_matcher,
    emit_response_time_check,
    emit_schema_validation,
    emit_status_assertion,
)
from stitch.core.emit.auth import emit_api_key_auth, emit_basic_auth, emit_bearer_auth
from stitch.core.emit.requests import emit_request
from stitch.core.emit.steps import StepSequence
from stitch.core.emit.variables import emit_variable_extractor, emit_variable_setter
from stitch.core.graph.model import Node
from stitch.core.logging_config import get_logger
from stitch.core.types import ComponentType

logger = get_logger(__name__)

Emitter = Callable[[Node, StepSequence], StepSequence]

EMITTERS: MappingProxyType[ComponentType, Emitter] = MappingProxyType(
    {
        ComponentType.GET_REQUEST: emit_request,
        ComponentType.POST_REQUEST: emit_request,
        ComponentType.PUT_REQUEST: emit_request,
        ComponentType.DELETE_REQUEST: emit_request,
        ComponentType.BEARER_AUTH: emit_bearer_auth,
        ComponentType.BASIC_AUTH: emit_basic_auth,
        ComponentType.API_KEY_AUTH: emit_api_key_auth,
        ComponentType.STATUS_ASSERTION: emit_status_assertion,
        ComponentType.FIELD_MATCHER: emit_field_matcher,
        ComponentType.SCHEMA_VALIDATION: emit_schema_validation,
        ComponentType.RESPONSE_TIME_CHECK: emit_response_time_check,
        ComponentType.VARIABLE_EXTRACTOR: emit_variable_extractor,
        ComponentType.VARIABLE_SETTER: emit_variable_setter,
    }
)

# Adding a kind without an emitter must fail at import, not drop nodes later
_missing = set(ComponentType) - set(EMITTERS)
if _missing:
    raise RuntimeError(f"Component kinds without an emitter: {sorted(m.value for m in _missing)}")


def emit_node(node: Node, steps: StepSequence) -> StepSequence:
    """Append a node's steps.

    Args:
        node: The node to emit.
        steps: Steps emitted so far.

    Returns:
        The sequence with this node's steps (zero or more) appended.
    """
    result = EMITTERS[node.type](node, steps)
    emitted = len(result) - len(steps)
    logger.debug("node_emitted: id=%s type=%s steps=%d", node.id, node.type.value, emitted)
    return result
