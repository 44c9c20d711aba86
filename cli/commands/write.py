"""Write calendar events to the configured org file."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.utils import calendar_names_or_default, parse_bounds
from orgcal.exceptions import OrgCalError
from orgcal.export import write_calendars_to_file

logger = logging.getLogger(__name__)


def write_command(
    calendars: Annotated[
        list[str] | None,
        typer.Argument(help="Calendar names (default: ORGCAL_CALENDARS)"),
    ] = None,
    start: Annotated[
        str | None,
        typer.Option("--start", "-s", help="Start date (YYYY-MM-DD) or day offset"),
    ] = None,
    end: Annotated[
        str | None,
        typer.Option("--end", "-e", help="End date (YYYY-MM-DD) or day offset"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (overrides ORGCAL_OUTPUT_PATH)"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail if a calendar name has no match"),
    ] = False,
) -> None:
    """
    Write calendar events to an org file.

    The file is replaced on every run. Calendars, dates and output path
    default to the configured values.
    """
    ctx = get_context()
    config = ctx.config
    if output is not None:
        config = config.model_copy(update={"output_path": output.expanduser()})

    try:
        start_bound, end_bound = parse_bounds(start, end)
        path = write_calendars_to_file(
            calendar_names_or_default(calendars),
            start_bound,
            end_bound,
            config=config,
            fetcher=ctx.make_fetcher(strict=strict or config.strict_calendars),
        )
    except OrgCalError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if not ctx.quiet:
        print(f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} Wrote calendar")
        print(f"  {path.resolve()}")

