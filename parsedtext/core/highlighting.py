"""Pre-highlighting of caller-supplied index ranges."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from parsedtext.core.constants import STYLE_KEY
from parsedtext.exceptions import InvalidRangeError, OverlappingRangeError
from parsedtext.models.ranges import HighlightRange
from parsedtext.models.segment import Segment

logger = logging.getLogger(__name__)


def sort_ranges(text: str, ranges: Iterable[Any] | Mapping[str, Any]) -> list[HighlightRange]:
    """Validate highlight ranges against the text and sort them by start.

    Args:
        text: The text the ranges index into
        ranges: Ranges as HighlightRange, (start, end) pairs or "start|end" keys.
            A mapping is read by its keys.

    Returns:
        Ranges sorted ascending by start offset

    Raises:
        InvalidRangeError: If a range is malformed or exceeds the text
        OverlappingRangeError: If two ranges overlap
    """
    highlight_ranges = []
    for item in ranges:
        highlight = item if isinstance(item, HighlightRange) else HighlightRange.model_validate(item)
        if highlight.end > len(text):
            raise InvalidRangeError(highlight.as_tuple(), f"end exceeds text length {len(text)}")
        highlight_ranges.append(highlight)

    highlight_ranges.sort(key=lambda r: r.start)

    for previous, current in zip(highlight_ranges, highlight_ranges[1:], strict=False):
        if previous.overlaps(current):
            raise OverlappingRangeError(previous.as_tuple(), current.as_tuple())

    return highlight_ranges


def pre_highlight(
    text: str,
    ranges: Iterable[Any] | Mapping[str, Any] | None = None,
    style: Any = None,
) -> list[Segment]:
    """Split text into plain segments and claimed segments for each range.

    Claimed segments carry ``style`` under the ``style`` metadata key and are
    skipped by every pattern rule. A trailing plain segment is always
    emitted, even when empty.

    Args:
        text: The text to split
        ranges: Highlight ranges, see ``sort_ranges``
        style: Style descriptor shared by every range

    Returns:
        Segments covering the whole text in order
    """
    highlight_ranges = sort_ranges(text, ranges or [])
    if not highlight_ranges:
        return [Segment(text=text)]

    logger.debug(f"Pre-highlighting {len(highlight_ranges)} ranges")

    segments: list[Segment] = []
    cursor = 0
    for highlight in highlight_ranges:
        # Plain text between the previous range and this one
        if cursor < highlight.start:
            segments.append(Segment(text=text[cursor : highlight.start], start=cursor))

        segments.append(
            Segment(
                text=text[highlight.start : highlight.end],
                matched=True,
                start=highlight.start,
                metadata={STYLE_KEY: style},
            )
        )
        cursor = highlight.end

    segments.append(Segment(text=text[cursor:], start=cursor))
    return segments
