"""Step emission.

Each component kind has one emitter: a pure function taking the node and
the steps emitted so far and returning them with the node's steps
appended. Configuration problems become diagnostic steps, never errors.
"""

from stitch.core.emit.dispatch import EMITTERS, emit_node
from stitch.core.emit.steps import Step, StepSequence

__all__ = ["EMITTERS", "emit_node", "Step", "StepSequence"]
