"""
Constants and configuration values for parsedtext.
"""

from enum import IntEnum, StrEnum

# Version
PACKAGE_VERSION = "0.1.0"

# Rule keys consumed by the matcher itself and never copied into match metadata
RESERVED_RULE_KEYS = frozenset(
    {
        "pattern",
        "render_text",
        "renderText",
        "max_matches",
        "maxMatches",
        "nonExhaustiveModeMaxMatchCount",
    }
)

# Metadata key carrying the style descriptor of a segment
STYLE_KEY = "style"

# Separator used by "start|end" range keys
RANGE_KEY_SEPARATOR = "|"


class OffsetMode(StrEnum):
    """How match offsets handed to bound callbacks are measured."""

    RELATIVE = "relative"  # within the text left after the previous match
    ABSOLUTE = "absolute"  # within the original input


class PatternPreset(StrEnum):
    """Names of the built-in rule patterns."""

    URL = "url"
    EMAIL = "email"
    PHONE = "phone"
    MENTION = "mention"
    HASHTAG = "hashtag"


class StyleDefaults(StrEnum):
    """Default rich styles."""

    HIGHLIGHT = "bold black on yellow"
    PATTERN = "bold cyan"


class FormattingConstants(IntEnum):
    """Formatting constants."""

    JSON_INDENT = 2


class TableColumnWidths(IntEnum):
    """Table column width constants for CLI display."""

    INDEX = 5
    OFFSET = 8
    TEXT = 40
    STYLE = 22
    METADATA = 40
