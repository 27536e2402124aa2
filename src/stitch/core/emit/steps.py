"""Steps and the append-only sequence emitters build."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from stitch.core.components import get_definition
from stitch.core.graph.model import Node
from stitch.core.text import LINE_BREAKS


@dataclass(frozen=True)
class Step:
    """One line of the generated scenario.

    Attributes:
        text: The step, without indentation. Never contains a newline.
        node_id: The node that emitted it.
        diagnostic: True for a notice standing in for a node's normal output.
    """

    text: str
    node_id: str | None = None
    diagnostic: bool = False

    def __post_init__(self) -> None:
        if any(char in LINE_BREAKS for char in self.text):
            raise ValueError(f"Step must be a single line: {self.text!r}")

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class StepSequence:
    """Immutable, append-only sequence of steps.

    Every append returns a new sequence, so an emitter can only contribute
    by returning its result:

        >>> steps = StepSequence()
        >>> steps = steps.add(node, "Given url 'https://example.com'")
        >>> steps = steps.diagnostic(node, "Token not configured")
    """

    steps: tuple[Step, ...] = ()

    def add(self, node: Node, *texts: str) -> StepSequence:
        """Append normal steps emitted by a node."""
        added = tuple(Step(text=text, node_id=node.id) for text in texts)
        return StepSequence(self.steps + added)

    def diagnostic(self, node: Node, message: str) -> StepSequence:
        """Append a diagnostic step for a node.

        Renders as ``* print "<label>: <message>"`` where the label names
        the node's kind.
        """
        label = get_definition(node.type).label
        notice = f"{label}: {message}".replace("\\", "\\\\").replace('"', '\\"')
        notice = " ".join(notice.split())
        step = Step(text=f'* print "{notice}"', node_id=node.id, diagnostic=True)
        return StepSequence(self.steps + (step,))

    @property
    def diagnostics(self) -> list[Step]:
        return [step for step in self.steps if step.diagnostic]

    def for_node(self, node_id: str) -> list[Step]:
        return [step for step in self.steps if step.node_id == node_id]

    def lines(self) -> list[str]:
        return [step.text for step in self.steps]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> Step:
        return self.steps[index]
