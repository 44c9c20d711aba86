"""Print the org document without writing it."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.utils import calendar_names_or_default, parse_bounds
from orgcal.exceptions import OrgCalError
from orgcal.export import build_document
from orgcal.output.org_writer import OrgWriter

logger = logging.getLogger(__name__)


def preview_command(
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
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail if a calendar name has no match"),
    ] = False,
) -> None:
    """Print the org document that 'write' would produce."""
    ctx = get_context()
    config = ctx.config

    try:
        start_bound, end_bound = parse_bounds(start, end)
        document = build_document(
            calendar_names_or_default(calendars),
            start_bound,
            end_bound,
            config=config,
            fetcher=ctx.make_fetcher(strict=strict or config.strict_calendars),
        )
    except OrgCalError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    typer.echo(OrgWriter().render(document), nl=False)
