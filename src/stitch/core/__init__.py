"""Core - the flow compiler.

This module contains no knowledge of:
- Files, terminals, or command lines
- Logging handlers (it only logs)
- How the generated feature is executed

Architecture:
    types       Component kinds, categories, graph warnings
    components  Registry of component definitions and ports
    payloads    Typed per-kind data, normalized from raw records
    graph/      Node/Connection model and dependency resolution
    emit/       Per-kind step emitters and the step sequence
    document    Feature/scenario assembly
    compiler    The compile pipeline
    flow        Flow file reading and writing

Example:
    >>> from stitch.core import compile
    >>>
    >>> text = compile(
    ...     [
    ...         {"id": "login", "type": "POST_REQUEST", "data": {"url": "https://api/login"}},
    ...         {"id": "ok", "type": "STATUS_ASSERTION", "data": {"expectedStatus": 200}},
    ...     ],
    ...     [{"id": "c1", "fromNodeId": "login", "toNodeId": "ok"}],
    ... )
"""

from stitch.core.compiler import CompileResult, compile, compile_flow
from stitch.core.components import ComponentDefinition, get_definition, list_definitions
from stitch.core.document import FeatureDocument
from stitch.core.emit import Step, StepSequence, emit_node
from stitch.core.errors import CycleError, FlowFormatError, StitchError
from stitch.core.flow import Flow, dump_flow, load_flow, read_flow
from stitch.core.graph import Connection, DependencyResolver, FlowGraph, Node, build_graph
from stitch.core.types import ComponentCategory, ComponentType, GraphWarning, WarningCode

__all__ = [
    # Compile
    "compile",
    "compile_flow",
    "CompileResult",
    # Graph
    "Node",
    "Connection",
    "FlowGraph",
    "build_graph",
    "DependencyResolver",
    # Emission
    "Step",
    "StepSequence",
    "emit_node",
    "FeatureDocument",
    # Components
    "ComponentType",
    "ComponentCategory",
    "ComponentDefinition",
    "get_definition",
    "list_definitions",
    # Flow files
    "Flow",
    "load_flow",
    "read_flow",
    "dump_flow",
    # Errors and warnings
    "StitchError",
    "CycleError",
    "FlowFormatError",
    "GraphWarning",
    "WarningCode",
]
