"""Dependency resolution for flow graphs."""

from __future__ import annotations

from stitch.core.errors import CycleError
from stitch.core.graph.model import FlowGraph, Node
from stitch.core.logging_config import get_logger

logger = get_logger(__name__)


class DependencyResolver:
    """Orders a flow graph's nodes so every node follows its dependencies.

    A node depends on the source of every connection that ends at it.
    Ordering is a depth-first walk started from each node in input order,
    so unconnected nodes keep their input order and a node's dependencies
    are placed just before it. This makes the result depend on input
    order when there are several roots, which callers rely on.

    The resolver owns the dependency map it derives; it is rebuilt per
    resolver and never shared.

    Example:
        >>> resolver = DependencyResolver(graph)
        >>> errors = resolver.validate()
        >>> order = resolver.execution_order()
    """

    def __init__(self, graph: FlowGraph) -> None:
        self._graph = graph
        self._nodes = {node.id: node for node in graph.nodes}
        self._dependencies = self._build_dependency_map(graph)

    @staticmethod
    def _build_dependency_map(graph: FlowGraph) -> dict[str, list[str]]:
        dependencies: dict[str, list[str]] = {node.id: [] for node in graph.nodes}
        for connection in graph.connections:
            deps = dependencies.setdefault(connection.to_node_id, [])
            if connection.from_node_id not in deps:
                deps.append(connection.from_node_id)
        return dependencies

    def dependency_map(self) -> dict[str, set[str]]:
        """Get node id -> ids of the nodes it depends on."""
        return {node_id: set(deps) for node_id, deps in self._dependencies.items()}

    def dependencies_of(self, node_id: str) -> list[str]:
        """Get a node's dependencies in connection order."""
        return list(self._dependencies.get(node_id, ()))

    def validate(self) -> list[str]:
        """Validate the graph.

        Returns:
            List of error messages (empty if the graph can be ordered).
        """
        try:
            self.execution_order()
        except CycleError as e:
            return [str(e)]
        return []

    def execution_order(self) -> list[Node]:
        """Get nodes in dependency order.

        Returns:
            Every node of the graph, each after all its dependencies.

        Raises:
            CycleError: If the connections form a cycle.
        """
        visited: set[str] = set()
        order: list[Node] = []

        for root in self._graph.nodes:
            if root.id in visited:
                continue

            # Explicit stack of (node id, next dependency index); the stack
            # doubles as the in-progress path for cycle reporting
            in_progress: set[str] = {root.id}
            stack: list[tuple[str, int]] = [(root.id, 0)]

            while stack:
                node_id, dep_index = stack[-1]
                deps = self._dependencies.get(node_id, [])

                if dep_index < len(deps):
                    stack[-1] = (node_id, dep_index + 1)
                    dep_id = deps[dep_index]
                    if dep_id in in_progress:
                        path = [entry[0] for entry in stack]
                        cycle = path[path.index(dep_id) :] + [dep_id]
                        logger.debug("cycle_detected: %s", " -> ".join(cycle))
                        raise CycleError(dep_id, cycle)
                    if dep_id not in visited:
                        in_progress.add(dep_id)
                        stack.append((dep_id, 0))
                    continue

                stack.pop()
                in_progress.discard(node_id)
                visited.add(node_id)
                order.append(self._nodes[node_id])

        return order

    def execution_order_ids(self) -> list[str]:
        """Get node ids in dependency order."""
        return [node.id for node in self.execution_order()]

    def __repr__(self) -> str:
        return f"DependencyResolver({self._graph.node_ids()})"
