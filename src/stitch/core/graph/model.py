"""Flow graph data model.

Nodes and connections form a small property graph. build_graph() is the
boundary between loosely-shaped editor records and the compiler: it drops
records the compiler cannot use (with a GraphWarning each) and normalizes
every kept node's data into its typed payload.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from stitch.core.components import get_definition
from stitch.core.logging_config import get_logger
from stitch.core.payloads import Payload, parse_payload
from stitch.core.types import ComponentType, GraphWarning, WarningCode

logger = get_logger(__name__)


@dataclass(frozen=True)
class Node:
    """One component placed in a flow.

    Attributes:
        id: Unique identifier within the flow.
        type: The component kind.
        data: Typed payload normalized from raw_data.
        raw_data: The data object as received, kept for export.
    """

    id: str
    type: ComponentType
    data: Payload
    raw_data: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def create(
        cls, id: str, type: ComponentType | str, data: Mapping[str, Any] | None = None
    ) -> Node:
        """Build a node from raw data.

        Raises:
            ValueError: If the type is not a known component kind.
        """
        kind = ComponentType.parse(type)
        if kind is None:
            raise ValueError(f"Unknown component type: {type}")
        raw = dict(data or {})
        return cls(id=id, type=kind, data=parse_payload(kind, raw), raw_data=raw)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type.value, "data": dict(self.raw_data)}


@dataclass(frozen=True)
class Connection:
    """A directed edge: the source node's output feeds the target's input.

    The target depends on the source.
    """

    id: str
    from_node_id: str
    to_node_id: str
    from_output: str | None = None
    to_input: str | None = None

    @classmethod
    def from_dict(cls, record: Mapping[str, Any], index: int = 0) -> Connection:
        return cls(
            id=str(record.get("id") or f"connection-{index + 1}"),
            from_node_id=str(record.get("fromNodeId", "")),
            to_node_id=str(record.get("toNodeId", "")),
            from_output=record.get("fromOutput"),
            to_input=record.get("toInput"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "fromNodeId": self.from_node_id,
            "toNodeId": self.to_node_id,
            "fromOutput": self.from_output,
            "toInput": self.to_input,
        }


@dataclass(frozen=True)
class FlowGraph:
    """Validated nodes and connections, in input order.

    Attributes:
        nodes: Kept nodes, in input order.
        connections: Kept connections, in input order.
        warnings: Why records were dropped or flagged.
    """

    nodes: tuple[Node, ...] = ()
    connections: tuple[Connection, ...] = ()
    warnings: tuple[GraphWarning, ...] = ()

    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    def __repr__(self) -> str:
        return f"FlowGraph(nodes={self.node_ids()}, connections={len(self.connections)})"


def _warn(
    warnings: list[GraphWarning], code: WarningCode, message: str, subject: str | None
) -> None:
    logger.warning("%s: %s", code.value, message, extra={"subject": subject})
    warnings.append(GraphWarning(code=code, message=message, subject=subject))


def _coerce_node(record: Any, index: int, warnings: list[GraphWarning]) -> Node | None:
    if isinstance(record, Node):
        return record

    if not isinstance(record, Mapping):
        _warn(warnings, WarningCode.INVALID_RECORD, f"Node {index + 1} is not an object", None)
        return None

    node_id = record.get("id")
    if node_id is None or node_id == "":
        _warn(warnings, WarningCode.MISSING_ID, f"Node {index + 1} has no id", None)
        return None
    node_id = str(node_id)

    kind = ComponentType.parse(record.get("type"))
    if kind is None:
        _warn(
            warnings,
            WarningCode.UNKNOWN_TYPE,
            f"Unknown component type: {record.get('type')} (node {node_id})",
            node_id,
        )
        return None

    data = record.get("data")
    if data is None:
        data = record.get("properties")
    raw = dict(data) if isinstance(data, Mapping) else {}
    return Node(id=node_id, type=kind, data=parse_payload(kind, raw), raw_data=raw)


def _coerce_connection(record: Any, index: int, warnings: list[GraphWarning]) -> Connection | None:
    if isinstance(record, Connection):
        return record
    if not isinstance(record, Mapping):
        message = f"Connection {index + 1} is not an object"
        _warn(warnings, WarningCode.INVALID_RECORD, message, None)
        return None
    return Connection.from_dict(record, index)


def build_graph(
    nodes: Iterable[Node | Mapping[str, Any]] | None,
    connections: Iterable[Connection | Mapping[str, Any]] | None = None,
) -> FlowGraph:
    """Build a flow graph from node and connection records.

    Dropped with a warning: nodes without an id, of an unknown type, or
    repeating an earlier id (the first one wins); connections with an
    endpoint that is not a kept node, and self-loops. Connections naming a
    port the kind does not declare are kept, with a warning.

    Args:
        nodes: Node records (JSON shape) or Node objects.
        connections: Connection records or objects; None means none.

    Returns:
        The flow graph.
    """
    warnings: list[GraphWarning] = []

    kept_nodes: dict[str, Node] = {}
    for index, record in enumerate(nodes or ()):
        node = _coerce_node(record, index, warnings)
        if node is None:
            continue
        if node.id in kept_nodes:
            _warn(warnings, WarningCode.DUPLICATE_ID, f"Duplicate node id: {node.id}", node.id)
            continue
        kept_nodes[node.id] = node

    kept_connections: list[Connection] = []
    for index, record in enumerate(connections or ()):
        connection = _coerce_connection(record, index, warnings)
        if connection is None:
            continue

        missing = [
            endpoint
            for endpoint in (connection.from_node_id, connection.to_node_id)
            if endpoint not in kept_nodes
        ]
        if missing:
            _warn(
                warnings,
                WarningCode.UNKNOWN_ENDPOINT,
                f"Connection {connection.id} references unknown node {missing[0]!r}",
                connection.id,
            )
            continue

        if connection.from_node_id == connection.to_node_id:
            _warn(
                warnings,
                WarningCode.SELF_LOOP,
                f"Connection {connection.id} connects node {connection.from_node_id} to itself",
                connection.id,
            )
            continue

        source = get_definition(kept_nodes[connection.from_node_id].type)
        target = get_definition(kept_nodes[connection.to_node_id].type)
        if not source.accepts_output(connection.from_output):
            _warn(
                warnings,
                WarningCode.UNKNOWN_PORT,
                f"Connection {connection.id}: {source.name} has no output "
                f"{connection.from_output!r}",
                connection.id,
            )
        if not target.accepts_input(connection.to_input):
            _warn(
                warnings,
                WarningCode.UNKNOWN_PORT,
                f"Connection {connection.id}: {target.name} has no input {connection.to_input!r}",
                connection.id,
            )

        kept_connections.append(connection)

    return FlowGraph(
        nodes=tuple(kept_nodes.values()),
        connections=tuple(kept_connections),
        warnings=tuple(warnings),
    )
