"""Flow compilation.

    nodes + connections
        -> build_graph          (drop unusable records, normalize payloads)
        -> DependencyResolver   (order nodes after their dependencies)
        -> emit_node per node   (append steps)
        -> FeatureDocument      (wrap in feature/scenario)

Compilation is a pure function of its inputs. All working state (the
graph, the dependency map, the step sequence) is created per call, so
concurrent compilations need no coordination.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from stitch.core.document import FeatureDocument
from stitch.core.emit import Step, StepSequence, emit_node
from stitch.core.graph import Connection, DependencyResolver, Node, build_graph
from stitch.core.logging_config import get_logger
from stitch.core.types import GraphWarning

logger = get_logger(__name__)

NodeRecords = Iterable[Node | Mapping[str, Any]]
ConnectionRecords = Iterable[Connection | Mapping[str, Any]]


@dataclass(frozen=True)
class CompileResult:
    """Everything a compilation produced.

    Attributes:
        document: The compiled feature.
        order: Node ids in the order their steps were emitted.
        warnings: Records dropped or flagged while building the graph.
    """

    document: FeatureDocument
    order: tuple[str, ...]
    warnings: tuple[GraphWarning, ...]

    @property
    def text(self) -> str:
        return self.document.render()

    @property
    def diagnostics(self) -> list[Step]:
        return [step for step in self.document.steps if step.diagnostic]

    @property
    def ok(self) -> bool:
        """True when nothing was dropped and no node needed a diagnostic."""
        return not self.warnings and not self.diagnostics

    def to_dict(self) -> dict[str, Any]:
        return {
            "feature": self.text,
            "order": list(self.order),
            "steps": [
                {"node_id": s.node_id, "text": s.text, "diagnostic": s.diagnostic}
                for s in self.document.steps
            ],
            "warnings": [w.to_dict() for w in self.warnings],
            "diagnostics": [s.text for s in self.diagnostics],
        }


def compile_flow(
    nodes: NodeRecords | None, connections: ConnectionRecords | None = None
) -> CompileResult:
    """Compile a flow and report how it went.

    Args:
        nodes: Node records (JSON shape) or Node objects. May be empty.
        connections: Connection records or objects. None means no connections.

    Returns:
        The compile result.

    Raises:
        CycleError: If the connections form a dependency cycle.
    """
    graph = build_graph(nodes, connections)
    ordered = DependencyResolver(graph).execution_order()

    steps = StepSequence()
    for node in ordered:
        steps = emit_node(node, steps)

    result = CompileResult(
        document=FeatureDocument(steps=steps.steps),
        order=tuple(node.id for node in ordered),
        warnings=graph.warnings,
    )
    logger.debug(
        "flow_compiled: nodes=%d steps=%d warnings=%d diagnostics=%d",
        len(ordered),
        len(steps),
        len(result.warnings),
        len(result.diagnostics),
    )
    return result


def compile(
    nodes: NodeRecords | None, connections: ConnectionRecords | None = None
) -> str:
    """Compile a flow into feature file text.

    Args:
        nodes: Node records (JSON shape) or Node objects. May be empty.
        connections: Connection records or objects. None means no connections.

    Returns:
        The feature file text.

    Raises:
        CycleError: If the connections form a dependency cycle.

    Example:
        >>> print(compile([
        ...     {"id": "n1", "type": "GET_REQUEST", "data": {"url": "https://x/y"}},
        ...     {"id": "n2", "type": "STATUS_ASSERTION", "data": {"expectedStatus": 200}},
        ... ]))
        Feature: Generated API Test
        <BLANKLINE>
        Scenario: User Test Flow
          Given url 'https://x/y'
          When method GET
          Then status 200
        <BLANKLINE>
    """
    return compile_flow(nodes, connections).text

