"""Feature document assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stitch.core.emit.steps import Step

FEATURE_NAME = "Generated API Test"
SCENARIO_NAME = "User Test Flow"
STEP_INDENT = "  "


@dataclass(frozen=True)
class FeatureDocument:
    """A compiled feature: one scenario holding every step in order.

    Attributes:
        steps: Steps in emission order.
        feature_name: Title of the feature.
        scenario_name: Title of the single scenario.
    """

    steps: tuple[Step, ...] = field(default_factory=tuple)
    feature_name: str = FEATURE_NAME
    scenario_name: str = SCENARIO_NAME

    def render(self) -> str:
        """Render as feature file text.

        The feature line, a blank line, the scenario line, then one step
        per line indented one level, ending with a newline.
        """
        lines = [f"Feature: {self.feature_name}", "", f"Scenario: {self.scenario_name}"]
        lines.extend(f"{STEP_INDENT}{step.text}" for step in self.steps)
        return "\n".join(lines) + "\n"

    def to_dict(self) -> dict[str, Any]:
        return {
            "feature_name": self.feature_name,
            "scenario_name": self.scenario_name,
            "steps": [step.text for step in self.steps],
        }

    def __str__(self) -> str:
        return self.render()
