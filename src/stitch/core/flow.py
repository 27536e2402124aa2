"""Flow files.

A flow file is the JSON an editor saves or an importer produces:

    {
        "version": "1.0.0",
        "nodes": [{"id": "n1", "type": "GET_REQUEST", "data": {...}}, ...],
        "connections": [{"id": "c1", "fromNodeId": "n1", "toNodeId": "n2", ...}, ...],
        "exportedAt": "2026-10-19T12:00:00+00:00"
    }

A bare JSON array of nodes is accepted as a flow without connections.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from stitch.core.errors import FlowFormatError
from stitch.core.graph import Connection, Node

FLOW_FORMAT_VERSION = "1.0.0"


@dataclass
class Flow:
    """Raw node and connection records read from a flow file."""

    nodes: list[Any] = field(default_factory=list)
    connections: list[Any] = field(default_factory=list)
    version: str | None = None


def load_flow(text: str) -> Flow:
    """Parse flow JSON.

    Args:
        text: Flow file contents.

    Returns:
        The flow's records, unvalidated.

    Raises:
        FlowFormatError: If the text is not JSON or not shaped like a flow.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FlowFormatError(f"Flow is not valid JSON: {e}") from e

    if isinstance(data, list):
        return Flow(nodes=data)

    if not isinstance(data, Mapping):
        raise FlowFormatError("Flow must be a JSON object or an array of nodes")

    nodes = data.get("nodes", [])
    connections = data.get("connections") or []
    if not isinstance(nodes, list):
        raise FlowFormatError("Flow 'nodes' must be an array")
    if not isinstance(connections, list):
        raise FlowFormatError("Flow 'connections' must be an array")

    version = data.get("version")
    return Flow(nodes=nodes, connections=connections, version=str(version) if version else None)


def read_flow(path: str | Path) -> Flow:
    """Read and parse a flow file.

    Raises:
        FlowFormatError: If the file cannot be read or parsed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FlowFormatError(f"Cannot read flow file {path}: {e}") from e
    return load_flow(text)


def _record(item: Any) -> Any:
    if isinstance(item, (Node, Connection)):
        return item.to_dict()
    return item


def dump_flow(
    nodes: Iterable[Node | Mapping[str, Any]],
    connections: Iterable[Connection | Mapping[str, Any]] | None = None,
    exported_at: datetime | None = None,
) -> str:
    """Serialize nodes and connections as flow JSON.

    Args:
        nodes: Node objects or records.
        connections: Connection objects or records.
        exported_at: Export timestamp. Defaults to now (UTC).

    Returns:
        Indented flow JSON.
    """
    exported_at = exported_at or datetime.now(timezone.utc)
    payload = {
        "version": FLOW_FORMAT_VERSION,
        "nodes": [_record(node) for node in nodes],
        "connections": [_record(connection) for connection in connections or ()],
        "exportedAt": exported_at.isoformat(),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)
