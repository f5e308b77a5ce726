"""Highlight range data models."""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from parsedtext.core.constants import RANGE_KEY_SEPARATOR
from parsedtext.exceptions import InvalidRangeError


class HighlightRange(BaseModel):
    """A ``[start, end)`` span of the text styled ahead of pattern matching."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(description="First offset covered by the range")
    end: int = Field(description="Offset just past the range")

    @model_validator(mode="before")
    @classmethod
    def coerce_bounds(cls, data: Any) -> Any:
        """Accept pairs, mappings and "start|end" keys, and check the bounds."""
        if isinstance(data, cls):
            return {"start": data.start, "end": data.end}
        raw = data
        if isinstance(data, str):
            pieces = data.split(RANGE_KEY_SEPARATOR)
            if len(pieces) != 2:
                raise InvalidRangeError(raw, f"expected 'start{RANGE_KEY_SEPARATOR}end'")
            data = pieces
        if isinstance(data, Mapping):
            if "start" not in data or "end" not in data:
                raise InvalidRangeError(raw, "missing start or end")
            data = (data["start"], data["end"])
        if not isinstance(data, Sequence) or isinstance(data, str) or len(data) != 2:
            raise InvalidRangeError(raw, "expected a (start, end) pair")

        start, end = (_to_offset(raw, bound) for bound in data)
        if start < 0:
            raise InvalidRangeError(raw, "start is negative")
        if start >= end:
            raise InvalidRangeError(raw, "start must be smaller than end")
        return {"start": start, "end": end}

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end - self.start

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def overlaps(self, other: "HighlightRange") -> bool:
        return self.start < other.end and other.start < self.end


def _to_offset(raw: Any, bound: Any) -> int:
    if isinstance(bound, bool):
        raise InvalidRangeError(raw, f"bound {bound!r} is not an integer")
    if isinstance(bound, int):
        return bound
    if isinstance(bound, float) and bound.is_integer():
        return int(bound)
    if isinstance(bound, str):
        try:
            return int(bound.strip())
        except ValueError:
            pass
    raise InvalidRangeError(raw, f"bound {bound!r} is not an integer")
