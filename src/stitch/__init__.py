"""Stitch - compile visual API test flows into Karate features.

A flow is a graph of test components (requests, auth, assertions,
variables) wired together by connections. Stitch orders the components
after their dependencies and emits one Karate step sequence for them.

Layers:
    core/       Pure compiler (graph, resolver, emitters, document)
    frontends/  User interfaces (CLI)

Quick Start:
    >>> import stitch
    >>>
    >>> feature = stitch.compile(
    ...     [
    ...         {"id": "n1", "type": "GET_REQUEST", "data": {"url": "https://x/y"}},
    ...         {"id": "n2", "type": "STATUS_ASSERTION", "data": {"expectedStatus": 200}},
    ...     ]
    ... )

With diagnostics:
    >>> result = stitch.compile_flow(nodes, connections)
    >>> result.warnings      # records that were dropped
    >>> result.diagnostics   # nodes whose configuration was incomplete
"""

from stitch.__version__ import __version__
from stitch.core import (
    CompileResult,
    ComponentType,
    Connection,
    CycleError,
    FeatureDocument,
    FlowFormatError,
    Node,
    StitchError,
    compile,
    compile_flow,
)

__all__ = [
    "__version__",
    "compile",
    "compile_flow",
    "CompileResult",
    "FeatureDocument",
    "Node",
    "Connection",
    "ComponentType",
    "StitchError",
    "CycleError",
    "FlowFormatError",
]
