"""Pattern rule data models."""

import re
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from parsedtext.core.constants import RESERVED_RULE_KEYS, PatternPreset
from parsedtext.exceptions import RegexValidationError
from parsedtext.models.segment import BoundCallback


class Rule(BaseModel):
    """One matching pass: a regex plus what to attach to each match.

    Keys other than the reserved ones are collected into ``extras`` and
    projected onto every match. Callable extras become ``BoundCallback``
    closures over the matched text and its offset, everything else is copied
    as-is. A mapping under ``extras`` is merged into the collected keys; any
    other value under that name is a regular key.
    """

    model_config = ConfigDict(frozen=True)

    pattern: re.Pattern[str] = Field(description="Compiled regular expression")
    max_matches: int | None = Field(
        default=None,
        validation_alias=AliasChoices("max_matches", "maxMatches", "nonExhaustiveModeMaxMatchCount"),
        description="Total matches accepted across the pass (None for unlimited)",
    )
    render_text: Callable[[str, re.Match[str]], str] | None = Field(
        default=None,
        validation_alias=AliasChoices("render_text", "renderText"),
        description="Rewrites the matched text before it is emitted",
    )
    extras: dict[str, Any] = Field(default_factory=dict, description="Caller keys projected onto each match")

    @model_validator(mode="before")
    @classmethod
    def collect_extras(cls, data: Any) -> Any:
        """Fold every non-reserved key into ``extras``."""
        if not isinstance(data, dict):
            return data

        fields: dict[str, Any] = {}
        extras: dict[str, Any] = {}
        for key, value in data.items():
            if key == "extras" and isinstance(value, Mapping):
                extras.update(value)
            elif key in RESERVED_RULE_KEYS:
                fields[key] = value
            else:
                extras[key] = value
        fields["extras"] = extras
        return fields

    @field_validator("pattern", mode="before")
    @classmethod
    def compile_pattern(cls, v: Any) -> Any:
        """Compile string patterns, reporting malformed ones."""
        if isinstance(v, str):
            try:
                return re.compile(v)
            except re.error as e:
                raise RegexValidationError(v, str(e)) from e
        return v

    @field_validator("max_matches", mode="before")
    @classmethod
    def coerce_limit(cls, v: Any) -> int | None:
        """Treat anything but a positive integer as unlimited."""
        if isinstance(v, bool):
            return None
        if isinstance(v, float) and v.is_integer():
            v = int(v)
        if isinstance(v, int) and v > 0:
            return v
        return None

    @property
    def limit(self) -> float:
        """Effective number of matches permitted in one pass."""
        return self.max_matches if self.max_matches is not None else float("inf")

    def render(self, text: str, match: re.Match[str]) -> str:
        """Text emitted for a match."""
        if self.render_text is None:
            return text
        return self.render_text(text, match)

    def project(self, text: str, index: int) -> dict[str, Any]:
        """Metadata for one match."""
        metadata: dict[str, Any] = {}
        for key, value in self.extras.items():
            if callable(value):
                metadata[key] = BoundCallback(func=value, text=text, index=index)
            else:
                metadata[key] = value
        return metadata


class RuleSpec(BaseModel):
    """Serializable description of a rule, as read from a rules file."""

    pattern: str | None = Field(default=None, description="Regular expression source")
    preset: PatternPreset | None = Field(default=None, description="Built-in pattern name")
    flags: list[str] = Field(default_factory=list, description="Names of re flags, e.g. IGNORECASE")
    max_matches: Any = Field(default=None, description="Match limit, coerced like Rule.max_matches")
    style: str | None = Field(default=None, description="Style attached to each match")
    props: dict[str, Any] = Field(default_factory=dict, description="Extra static metadata")

    @field_validator("flags", mode="before")
    @classmethod
    def ensure_flag_list(cls, v: Any) -> list[str]:
        """Accept a single flag name or a list of them."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return list(v)

    @field_validator("flags")
    @classmethod
    def check_flags(cls, v: list[str]) -> list[str]:
        names = [name.upper() for name in v]
        unknown = [name for name in names if name not in re.RegexFlag.__members__]
        if unknown:
            raise ValueError(f"Unknown regex flag(s): {', '.join(unknown)}")
        return names

    @model_validator(mode="after")
    def check_source(self) -> "RuleSpec":
        """Exactly one of pattern or preset must be given."""
        if (self.pattern is None) == (self.preset is None):
            raise ValueError("Specify exactly one of 'pattern' or 'preset'")
        return self

    @property
    def compiled_flags(self) -> re.RegexFlag:
        flags = re.RegexFlag(0)
        for name in self.flags:
            flags |= re.RegexFlag[name]
        return flags
