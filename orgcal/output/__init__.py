"""Output layer for org files."""

from orgcal.output.org_formatter import (
    format_document,
    format_entry,
    format_section,
    format_timestamp,
)
from orgcal.output.org_writer import OrgWriter

__all__ = [
    "OrgWriter",
    "format_document",
    "format_entry",
    "format_section",
    "format_timestamp",
]
