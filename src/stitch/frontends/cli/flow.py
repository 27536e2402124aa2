"""Flow commands: compile and validate flow files."""

from __future__ import annotations

from pathlib import Path

import rich_click as click

from stitch.core.compiler import CompileResult, compile_flow
from stitch.core.errors import CycleError, FlowFormatError
from stitch.core.flow import Flow, load_flow, read_flow
from stitch.core.logging_config import get_logger
from stitch.frontends.cli.output import error_exit, output_json, warning_print

logger = get_logger(__name__)


def _read(flow_path: str) -> Flow:
    """Read a flow from a path, or from stdin for "-"."""
    if flow_path == "-":
        return load_flow(click.get_text_stream("stdin").read())
    return read_flow(flow_path)


def _compile(flow_path: str) -> CompileResult:
    try:
        flow = _read(flow_path)
        return compile_flow(flow.nodes, flow.connections)
    except FlowFormatError as e:
        error_exit(str(e))
    except CycleError as e:
        logger.error("compile_failed: %s", e)
        error_exit(str(e))


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


@click.command("compile")
@click.argument("flow_path", metavar="FLOW")
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the feature to this file instead of stdout",
)
@click.option(
    "--json", "-j", "json_output", is_flag=True, help="Output feature, order and diagnostics"
)
def compile_command(flow_path: str, output_path: str | None, json_output: bool) -> None:
    """Compile a flow file into a Karate feature.

    FLOW is a flow JSON file (nodes and connections), or - for stdin.
    Dropped records are reported on stderr; incomplete components show
    up as print steps in the feature itself.

    **Examples:**

        stitch compile flow.json

        stitch compile flow.json -o tests/users.feature

        cat flow.json | stitch compile - --json
    """
    result = _compile(flow_path)

    for warning in result.warnings:
        warning_print(warning.message)

    if json_output:
        output_json(result.to_dict())
        return

    if output_path:
        Path(output_path).write_text(result.text, encoding="utf-8")
        click.echo(
            f"Wrote {output_path} ({_plural(len(result.document.steps), 'step')}, "
            f"{_plural(len(result.diagnostics), 'diagnostic')})",
            err=True,
        )
        return

    click.echo(result.text, nl=False)


@click.command()
@click.argument("flow_path", metavar="FLOW")
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on warnings and diagnostics too (also set by STITCH_STRICT)",
)
@click.pass_context
def validate(ctx: click.Context, flow_path: str, strict: bool) -> None:
    """Check a flow without writing a feature.

    Reports dropped records, dependency cycles and components whose
    configuration is incomplete. Exits non-zero on a cycle, and with
    **--strict** on any reported problem.

    **Examples:**

        stitch validate flow.json

        stitch validate flow.json --strict
    """
    settings = ctx.obj.get("settings") if ctx.obj else None
    strict = strict or bool(settings and settings.strict)

    result = _compile(flow_path)

    for warning in result.warnings:
        warning_print(warning.message)
    for step in result.diagnostics:
        warning_print(f"[{step.node_id}] {step.text}")

    summary = (
        f"{_plural(len(result.order), 'node')}, {_plural(len(result.document.steps), 'step')}, "
        f"{_plural(len(result.warnings), 'warning')}, "
        f"{_plural(len(result.diagnostics), 'diagnostic')}"
    )
    if result.ok:
        click.echo(f"Flow OK: {summary}")
        return

    click.echo(f"Flow has problems: {summary}")
    if strict:
        ctx.exit(1)
