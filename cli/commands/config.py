"""Display configuration file path and settings."""

import os
from pathlib import Path

from rich.table import Table

from cli.context import get_context
from cli.display import console
from orgcal.config import OrgCalConfig


def _find_env_file() -> Path | None:
    """Find .env file by searching current directory and parent directories."""
    current = Path.cwd()

    for path in [current] + list(current.parents):
        env_file = path / ".env"
        if env_file.exists():
            return env_file.resolve()

    return None


def _get_source(env_key: str, value, default_value) -> str:
    """Determine the source of a config value."""
    if env_key in os.environ or value != default_value:
        return "env"
    return "default"


def _create_table(setting_width: int, source_width: int) -> Table:
    """Create a styled table for config sections with fixed column widths."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SETTING", style="cyan", min_width=setting_width, no_wrap=True)
    table.add_column("SOURCE", style="dim", min_width=source_width, no_wrap=True)
    table.add_column("VALUE")
    return table


def config_command() -> None:
    """Display configuration file path and settings."""
    env_file = _find_env_file()
    default_config = OrgCalConfig()
    cfg = get_context().config

    calendars_display = ", ".join(cfg.default_calendars) or "[dim]None[/dim]"

    sections: list[tuple[str, list[tuple[str, str, str]]]] = [
        (
            "Output",
            [
                (
                    "output_path",
                    str(cfg.output_path),
                    _get_source(
                        "ORGCAL_OUTPUT_PATH", cfg.output_path, default_config.output_path
                    ),
                ),
            ],
        ),
        (
            "Fetch Defaults",
            [
                (
                    "default_calendars",
                    calendars_display,
                    _get_source(
                        "ORGCAL_CALENDARS",
                        cfg.default_calendars,
                        default_config.default_calendars,
                    ),
                ),
                (
                    "start_offset_days",
                    str(cfg.start_offset_days),
                    _get_source(
                        "ORGCAL_START_OFFSET",
                        cfg.start_offset_days,
                        default_config.start_offset_days,
                    ),
                ),
                (
                    "end_offset_days",
                    str(cfg.end_offset_days),
                    _get_source(
                        "ORGCAL_END_OFFSET",
                        cfg.end_offset_days,
                        default_config.end_offset_days,
                    ),
                ),
                (
                    "strict_calendars",
                    str(cfg.strict_calendars),
                    _get_source(
                        "ORGCAL_STRICT",
                        cfg.strict_calendars,
                        default_config.strict_calendars,
                    ),
                ),
            ],
        ),
        (
            "Provider",
            [
                (
                    "access_timeout",
                    f"{cfg.access_timeout:g}s",
                    _get_source(
                        "ORGCAL_ACCESS_TIMEOUT",
                        cfg.access_timeout,
                        default_config.access_timeout,
                    ),
                ),
            ],
        ),
        (
            "Logging",
            [
                (
                    "log_dir",
                    str(cfg.log_dir.resolve()),
                    _get_source("LOG_DIR", cfg.log_dir, default_config.log_dir),
                ),
                (
                    "log_filename",
                    cfg.log_filename,
                    _get_source("LOG_FILENAME", cfg.log_filename, default_config.log_filename),
                ),
            ],
        ),
    ]

    all_rows = [row for _, rows in sections for row in rows]
    setting_width = max(max(len(row[0]) for row in all_rows), len("SETTING"))
    source_width = max(max(len(row[2]) for row in all_rows), len("SOURCE"))

    console.print()
    console.print("━" * 50)
    console.print("[bold]  Configuration[/bold]")
    console.print("━" * 50)

    console.print("\n[bold]Config File:[/bold]")
    if env_file:
        console.print(f"  [cyan]{env_file}[/cyan]")
    else:
        console.print("  [dim]Not found (using defaults and environment variables)[/dim]")

    for section_name, rows in sections:
        console.print(f"\n[bold]{section_name}:[/bold]")
        table = _create_table(setting_width, source_width)
        for setting, value, source in rows:
            table.add_row(setting, source, value)
        console.print(table)

    console.print()
