#!/usr/bin/env python3
"""Flow compilation example - using core only.

Compiles the user CRUD flow next to this directory and prints the feature,
then shows what happens when a flow has a dependency cycle.

Usage:
    python examples/core_only/compile_flow.py
"""

from pathlib import Path

from stitch.core import CycleError, compile_flow, read_flow

FLOW_PATH = Path(__file__).resolve().parent.parent / "user_crud_flow.json"


def main():
    flow = read_flow(FLOW_PATH)
    print(f"Loaded {len(flow.nodes)} nodes, {len(flow.connections)} connections")

    result = compile_flow(flow.nodes, flow.connections)
    print(f"Execution order: {' -> '.join(result.order)}")
    print()
    print(result.text)

    for warning in result.warnings:
        print(f"warning: {warning}")
    for step in result.diagnostics:
        print(f"diagnostic [{step.node_id}]: {step.text}")

    # Connect the last request back to the first one
    loop = {"id": "loop", "fromNodeId": "delete-user", "toNodeId": "create-user"}
    looped = [*flow.connections, loop]
    try:
        compile_flow(flow.nodes, looped)
    except CycleError as e:
        print(f"Refused: {e}")


if __name__ == "__main__":
    main()
