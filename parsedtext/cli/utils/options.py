"""Shared CLI options and enums for commands."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from parsedtext.core.constants import OffsetMode, PatternPreset


class OutputFormat(StrEnum):
    """Supported output formats across commands."""

    RICH = "rich"  # Only for parse command
    TABLE = "table"
    JSON = "json"
    CSV = "csv"


# Common typer options
OUTPUT_PATH_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output file path for json/csv formats (stdout when omitted)",
    ),
]

PATTERN_OPTION = Annotated[
    list[str] | None,
    typer.Option(
        "--pattern",
        "-p",
        help="Regex rule, applied after rules file entries and presets (repeatable)",
    ),
]

PRESET_OPTION = Annotated[
    list[PatternPreset] | None,
    typer.Option(
        "--preset",
        help="Built-in rule, applied after rules file entries (repeatable)",
        case_sensitive=False,
    ),
]

RULES_FILE_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--rules",
        help="JSON file with a list of rules, applied first",
    ),
]

RANGE_OPTION = Annotated[
    list[str] | None,
    typer.Option(
        "--range",
        "-r",
        help="Pre-highlighted range as START:END or START|END (repeatable)",
    ),
]

OFFSET_MODE_OPTION = Annotated[
    OffsetMode | None,
    typer.Option(
        "--offset-mode",
        help="Offsets reported to callbacks (default from PARSEDTEXT_OFFSET_MODE)",
        case_sensitive=False,
    ),
]

VERBOSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]
