"""Core functionality module."""

from parsedtext.core.constants import FormattingConstants, OffsetMode, PatternPreset
from parsedtext.core.extraction import RulePass, TextExtraction, apply_rules, parse
from parsedtext.core.highlighting import pre_highlight, sort_ranges
from parsedtext.core.patterns import PRESET_PATTERNS, load_rules, preset_rule

__all__ = [
    "PRESET_PATTERNS",
    "FormattingConstants",
    "OffsetMode",
    "PatternPreset",
    "RulePass",
    "TextExtraction",
    "apply_rules",
    "load_rules",
    "parse",
    "pre_highlight",
    "preset_rule",
    "sort_ranges",
]
