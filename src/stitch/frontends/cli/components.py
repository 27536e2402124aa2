"""Components command: list the component registry."""

from __future__ import annotations

import rich_click as click

from stitch.core.components import list_definitions
from stitch.core.types import ComponentCategory
from stitch.frontends.cli.output import output_json, print_table


@click.command()
@click.option(
    "--category",
    "-c",
    type=click.Choice([c.value for c in ComponentCategory], case_sensitive=False),
    default=None,
    help="Only list components of this category",
)
@click.option("--json", "-j", "json_output", is_flag=True, help="Output as JSON")
def components(category: str | None, json_output: bool) -> None:
    """List the component kinds a flow can use.

    **Examples:**

        stitch components

        stitch components --category VALIDATION

        stitch components --json
    """
    selected = ComponentCategory(category.upper()) if category else None
    definitions = list_definitions(selected)

    if json_output:
        output_json([d.to_dict() for d in definitions])
        return

    rows = [
        [d.type.value, d.name, d.category.value, ", ".join(d.outputs) or "-"]
        for d in definitions
    ]
    print_table(["TYPE", "NAME", "CATEGORY", "OUTPUTS"], rows)
