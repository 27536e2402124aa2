"""Root command group."""

from __future__ import annotations

import rich_click as click

from stitch.config import load_settings
from stitch.core.logging_config import configure_logging
from stitch.frontends.cli.components import components
from stitch.frontends.cli.flow import compile_command, validate

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running '--help' for more information."
click.rich_click.ERRORS_EPILOGUE = ""
click.rich_click.MAX_WIDTH = 100


@click.group()
@click.version_option(package_name="stitch-karate")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Log level (default: STITCH_LOG_LEVEL or INFO)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Stitch - compile visual API test flows into Karate features.

    A flow is a JSON file of components (requests, auth, assertions,
    variables) and the connections between them.

        stitch compile       Compile a flow into a feature file

        stitch validate      Report problems in a flow

        stitch components    List available component kinds
    """
    settings = load_settings()
    configure_logging(
        level=log_level or settings.log_level,
        format=settings.log_format,
        file_path=settings.log_file,
    )
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


cli.add_command(compile_command)
cli.add_command(validate)
cli.add_command(components)
