"""parsedtext - split text into annotated parts for styled rendering."""

from parsedtext.core.constants import PACKAGE_VERSION, OffsetMode, PatternPreset
from parsedtext.core.extraction import TextExtraction, parse
from parsedtext.core.highlighting import pre_highlight
from parsedtext.core.patterns import preset_rule
from parsedtext.models.ranges import HighlightRange
from parsedtext.models.rule import Rule, RuleSpec
from parsedtext.models.segment import BoundCallback, Segment, TextPart

__version__ = PACKAGE_VERSION

__all__ = [
    "BoundCallback",
    "HighlightRange",
    "OffsetMode",
    "PatternPreset",
    "Rule",
    "RuleSpec",
    "Segment",
    "TextExtraction",
    "TextPart",
    "parse",
    "pre_highlight",
    "preset_rule",
]
