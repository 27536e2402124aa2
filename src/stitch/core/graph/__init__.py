"""Flow graph model and dependency resolution.

Classes:
    Node: A component placed in a flow.
    Connection: A directed edge between two nodes.
    FlowGraph: Validated nodes and connections.
    DependencyResolver: Orders nodes after their dependencies.
"""

from stitch.core.graph.model import Connection, FlowGraph, Node, build_graph
from stitch.core.graph.resolver import DependencyResolver

__all__ = ["Node", "Connection", "FlowGraph", "build_graph", "DependencyResolver"]
