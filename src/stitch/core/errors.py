"""Stitch error types.

Only graph-level failures raise. Problems with a single node's
configuration are rendered as diagnostic steps instead.
"""

from __future__ import annotations


class StitchError(Exception):
    """Base error for stitch operations."""


class CycleError(StitchError, ValueError):
    """Raised when connections form a dependency cycle.

    Step order is undefined for a cyclic flow, so no document is produced.

    Attributes:
        node_id: A node that participates in the cycle.
        cycle: The cycle as a list of node ids, first and last equal.
    """

    def __init__(self, node_id: str, cycle: list[str] | None = None):
        self.node_id = node_id
        self.cycle = list(cycle) if cycle else [node_id, node_id]
        path = " -> ".join(self.cycle)
        super().__init__(f"Circular dependency detected involving node {node_id} ({path})")


class FlowFormatError(StitchError):
    """Raised when a flow file cannot be read as nodes and connections."""
