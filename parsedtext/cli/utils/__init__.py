"""CLI utilities module."""

from parsedtext.cli.utils.options import (
    OFFSET_MODE_OPTION,
    OUTPUT_PATH_OPTION,
    PATTERN_OPTION,
    PRESET_OPTION,
    RANGE_OPTION,
    RULES_FILE_OPTION,
    VERBOSE_OPTION,
    OutputFormat,
)
from parsedtext.cli.utils.output import console, handle_csv_output, handle_json_output, setup_logging

__all__ = [
    "OFFSET_MODE_OPTION",
    "OUTPUT_PATH_OPTION",
    "PATTERN_OPTION",
    "PRESET_OPTION",
    "RANGE_OPTION",
    "RULES_FILE_OPTION",
    "VERBOSE_OPTION",
    "OutputFormat",
    "console",
    "handle_csv_output",
    "handle_json_output",
    "setup_logging",
]
