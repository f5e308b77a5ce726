"""Segment data models."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from parsedtext.core.constants import STYLE_KEY


class BoundCallback(BaseModel):
    """A rule callable bound to the text and offset of one match.

    Calling the instance with no arguments invokes ``func(text, index)``.
    """

    model_config = ConfigDict(frozen=True)

    func: Callable[..., Any] = Field(description="Caller-supplied callable from the rule")
    text: str = Field(description="Matched text passed as first argument")
    index: int = Field(description="Match offset passed as second argument")

    def __call__(self) -> Any:
        return self.func(self.text, self.index)

    def __str__(self) -> str:
        name = getattr(self.func, "__name__", type(self.func).__name__)
        return f"{name}({self.text!r}, {self.index})"


class Segment(BaseModel):
    """A contiguous slice of the input moving through the pipeline."""

    text: str = Field(description="Literal content of the segment")
    matched: bool = Field(default=False, description="Claimed by a range or a rule")
    start: int = Field(default=0, ge=0, description="Offset of the segment source in the original text")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Caller-defined annotations")

    @property
    def end(self) -> int:
        """Offset just past the segment source, valid while the text is unrendered."""
        return self.start + len(self.text)

    def to_part(self) -> "TextPart":
        """Drop pipeline bookkeeping and keep what a renderer needs."""
        return TextPart(text=self.text, metadata=self.metadata)


class TextPart(BaseModel):
    """Caller-visible segment returned by ``parse``."""

    text: str = Field(description="Content to render")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Caller-defined annotations")

    @property
    def style(self) -> Any:
        """Style descriptor attached by a range or a rule, if any."""
        return self.metadata.get(STYLE_KEY)

    def to_props(self) -> dict[str, Any]:
        """Flatten into a single mapping of text plus metadata."""
        return {**self.metadata, "text": self.text}
