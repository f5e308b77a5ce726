"""Sequential pattern matching over pre-highlighted segments."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from parsedtext.config import load_config
from parsedtext.core.constants import OffsetMode
from parsedtext.core.highlighting import pre_highlight
from parsedtext.exceptions import ConfigurationError
from parsedtext.models.rule import Rule
from parsedtext.models.segment import Segment, TextPart

logger = logging.getLogger(__name__)


def coerce_rule(rule: Rule | Mapping[str, Any]) -> Rule:
    """Accept a Rule or a mapping of rule keys."""
    if isinstance(rule, Rule):
        return rule
    return Rule.model_validate(dict(rule))


def resolve_offset_mode(offset_mode: OffsetMode | str | None) -> OffsetMode:
    """Explicit offset mode, or the configured default."""
    if offset_mode is None:
        return load_config().offset_mode
    try:
        return OffsetMode(offset_mode)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown offset mode '{offset_mode}'",
            {"offset_mode": offset_mode, "available": [mode.value for mode in OffsetMode]},
        ) from e


class RulePass:
    """One rule applied across a segment list.

    The accepted-match count is shared by every segment of the pass, so
    ``max_matches`` limits the whole text rather than each segment.
    """

    def __init__(self, rule: Rule, offset_mode: OffsetMode = OffsetMode.RELATIVE) -> None:
        self.rule = rule
        self.offset_mode = offset_mode
        self.accepted = 0

    @property
    def exhausted(self) -> bool:
        return self.accepted >= self.rule.limit

    def apply(self, segments: Iterable[Segment]) -> list[Segment]:
        """Split every unclaimed segment around the rule's matches."""
        parts: list[Segment] = []
        for segment in segments:
            if segment.matched:
                parts.append(segment)
            else:
                parts.extend(self.split(segment))

        logger.debug(
            f"Rule {self.rule.pattern.pattern!r} accepted {min(self.accepted, self.rule.limit)} matches"
            f" (limit: {self.rule.max_matches or 'none'})"
        )
        return parts

    def split(self, segment: Segment) -> list[Segment]:
        """Split one unclaimed segment into plain and matched pieces."""
        if self.exhausted:
            return [segment]

        parts: list[Segment] = []
        tail = segment.text  # text left after the last accepted match
        tail_start = segment.start
        cursor = 0  # only moves forward over zero-length matches

        while cursor < len(tail):
            # tail restarts at each accepted match, so anchors see the remainder;
            # the cursor only skips zero-length matches and keeps the text before
            # it visible to anchors and lookbehinds
            match = self.rule.pattern.search(tail, cursor)
            if match is None:
                break

            begin, finish = match.span()
            if begin == finish:
                cursor = begin + 1
                continue

            self.accepted += 1
            if self.accepted > self.rule.limit:
                logger.debug(f"Match limit {self.rule.max_matches} reached for {self.rule.pattern.pattern!r}")
                break

            matched_text = match.group(0)
            index = begin if self.offset_mode == OffsetMode.RELATIVE else tail_start + begin

            parts.append(Segment(text=tail[:begin], start=tail_start))
            parts.append(
                Segment(
                    text=self.rule.render(matched_text, match),
                    matched=True,
                    start=tail_start + begin,
                    metadata=self.rule.project(matched_text, index),
                )
            )

            tail = tail[finish:]
            tail_start += finish
            cursor = 0

        parts.append(Segment(text=tail, start=tail_start))
        return parts


def apply_rules(
    segments: list[Segment],
    rules: Iterable[Rule | Mapping[str, Any]],
    offset_mode: OffsetMode = OffsetMode.RELATIVE,
) -> list[Segment]:
    """Run each rule in order; segments claimed by one rule are frozen for the rest.

    Empty segments are kept so the result still partitions the input.
    """
    for rule in rules:
        segments = RulePass(coerce_rule(rule), offset_mode).apply(segments)
    return segments


class TextExtraction:
    """Converts text into parts carrying the metadata of the rule that matched them."""

    def __init__(
        self,
        text: str,
        rules: Iterable[Rule | Mapping[str, Any]] | None = None,
        ranges: Iterable[Any] | Mapping[str, Any] | None = None,
        style: Any = None,
        offset_mode: OffsetMode | str | None = None,
    ) -> None:
        """Initialize extraction.

        Args:
            text: Text to be parsed
            rules: Rules applied in order; mappings are validated into Rule
            ranges: Index ranges styled before any rule runs
            style: Style descriptor for the ranges
            offset_mode: Offset reported to callbacks, defaults to configuration
        """
        self.text = text
        self.rules = [coerce_rule(rule) for rule in rules or []]
        self.ranges = ranges
        self.style = style
        self.offset_mode = resolve_offset_mode(offset_mode)

    def segments(self) -> list[Segment]:
        """All segments after matching, including empty ones."""
        return apply_rules(pre_highlight(self.text, self.ranges, self.style), self.rules, self.offset_mode)

    def parse(self) -> list[TextPart]:
        """Return the non-empty parts of the text with their metadata."""
        return [segment.to_part() for segment in self.segments() if segment.text]


def parse(
    text: str,
    rules: Iterable[Rule | Mapping[str, Any]] | None = None,
    ranges: Iterable[Any] | Mapping[str, Any] | None = None,
    style: Any = None,
    offset_mode: OffsetMode | str | None = None,
) -> list[TextPart]:
    """Pre-highlight ``ranges`` then apply ``rules`` in order.

    Returns:
        Non-empty parts in text order, without pipeline bookkeeping
    """
    return TextExtraction(text, rules, ranges, style, offset_mode).parse()
