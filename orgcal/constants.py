"""Shared constants for calendar export."""

from pathlib import Path

# First line of every output file
MODE_LINE = "# -*- mode: org -*-"

# Outline heading marker, repeated once per nesting level
HEADING_MARKER = "*"

# Level used for event entries nested under a calendar heading
EVENT_LEVEL = 2

DEFAULT_OUTPUT_PATH = Path("~/.cache/orgcal/calendar.org")
DEFAULT_START_OFFSET_DAYS = -7
DEFAULT_END_OFFSET_DAYS = 30
