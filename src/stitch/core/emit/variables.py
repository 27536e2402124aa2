"""Steps for the data management kinds."""

from __future__ import annotations

from stitch.core.emit.steps import StepSequence
from stitch.core.graph.model import Node
from stitch.core.payloads import Extraction, VariableExtractorPayload, VariableSetterPayload
from stitch.core.text import quote
from stitch.core.validation import validate_response_path, validate_variable_name

# Name of the object collecting every variable one extractor accepted
AGGREGATE_VARIABLE = "extractedVariables"


def check_extractions(
    node: Node, extractions: tuple[Extraction, ...], steps: StepSequence
) -> tuple[list[Extraction], StepSequence]:
    """Validate extractions independently of each other.

    An entry is rejected, with a diagnostic naming its 1-based position, when
    its name or path is missing, its name repeats an accepted one, its name is
    not an identifier, or its path is not rooted at $ or @.

    Returns:
        (accepted extractions, steps with the diagnostics appended)
    """
    accepted: list[Extraction] = []
    seen: set[str] = set()

    for position, extraction in enumerate(extractions, start=1):
        prefix = f"Extraction {position} - "
        name, path = extraction.variable_name, extraction.json_path

        if not name or not path:
            steps = steps.diagnostic(node, prefix + "Variable name or JSON path not configured")
            continue

        if name in seen:
            steps = steps.diagnostic(node, prefix + f"Duplicate variable name '{name}'")
            continue

        try:
            validate_variable_name(name)
            validate_response_path(path)
        except ValueError as e:
            steps = steps.diagnostic(node, prefix + str(e))
            continue

        seen.add(name)
        accepted.append(extraction)

    return accepted, steps


def emit_variable_extractor(node: Node, steps: StepSequence) -> StepSequence:
    """Bind each accepted extraction, then an object holding all of them."""
    data = node.data
    assert isinstance(data, VariableExtractorPayload)

    if not data.extractions:
        return steps.diagnostic(node, "No extractions configured")

    accepted, steps = check_extractions(node, data.extractions, steps)
    if not accepted:
        return steps.diagnostic(node, "No valid extractions found")

    for extraction in accepted:
        binding = f"* def {extraction.variable_name} = {extraction.json_path}"
        if extraction.default_value:
            binding += f" || {quote(extraction.default_value)}"
        steps = steps.add(node, binding)

    members = ", ".join(f"{e.variable_name}: {e.variable_name}" for e in accepted)
    return steps.add(node, f"* def {AGGREGATE_VARIABLE} = {{ {members} }}")


def emit_variable_setter(node: Node, steps: StepSequence) -> StepSequence:
    """Bind each complete entry; incomplete entries are diagnosed and skipped."""
    data = node.data
    assert isinstance(data, VariableSetterPayload)

    if not data.variables:
        return steps.diagnostic(node, "No variables configured")

    for position, variable in enumerate(data.variables, start=1):
        if not variable.variable_name or variable.value is None:
            steps = steps.diagnostic(node, f"Variable {position} not properly configured")
            continue
        try:
            validate_variable_name(variable.variable_name)
        except ValueError as e:
            steps = steps.diagnostic(node, f"Variable {position} - {e}")
            continue
        steps = steps.add(node, f"* def {variable.variable_name} = {quote(variable.value)}")

    return steps
