"""Built-in pattern presets and rule file loading."""

import json
import logging
import re
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from parsedtext.core.constants import RESERVED_RULE_KEYS, STYLE_KEY, PatternPreset
from parsedtext.exceptions import ConfigurationError, RegexValidationError
from parsedtext.models.rule import Rule, RuleSpec

logger = logging.getLogger(__name__)


PRESET_PATTERNS: dict[PatternPreset, re.Pattern[str]] = {
    PatternPreset.URL: re.compile(
        r"(?:https?://|www\.)[-a-zA-Z0-9@:%._+~#=]{1,256}\.(?:xn--)?[a-z0-9-]{2,20}\b"
        r"(?:[-a-zA-Z0-9@:%_+\[\],.~#?&/=]*[-a-zA-Z0-9@:%_+\]~#?&/=])*",
        re.IGNORECASE,
    ),
    PatternPreset.EMAIL: re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+"),
    PatternPreset.PHONE: re.compile(r"[+\d]?(?:\d{2,3}[-.\s]?){1,2}\d{4}"),
    PatternPreset.MENTION: re.compile(r"(?<!\w)@\w+"),
    PatternPreset.HASHTAG: re.compile(r"(?<!\w)#\w+"),
}

DEFAULT_PRESET_STYLES: dict[PatternPreset, str] = {
    PatternPreset.URL: "underline blue",
    PatternPreset.EMAIL: "underline magenta",
    PatternPreset.PHONE: "green",
    PatternPreset.MENTION: "bold cyan",
    PatternPreset.HASHTAG: "bold magenta",
}


def get_preset(name: str | PatternPreset) -> PatternPreset:
    """Resolve a preset name.

    Raises:
        ConfigurationError: If no preset has that name
    """
    try:
        return PatternPreset(str(name).lower())
    except ValueError as e:
        available = [preset.value for preset in PatternPreset]
        raise ConfigurationError(
            f"Unknown pattern preset '{name}'. Available: {', '.join(available)}",
            {"preset": name, "available": available},
        ) from e


def preset_rule(name: str | PatternPreset, **extras: Any) -> Rule:
    """Build a rule from a preset.

    Args:
        name: Preset name (url, email, phone, mention, hashtag)
        **extras: Rule keys; ``style`` defaults to the preset's style

    Returns:
        Rule using the preset pattern
    """
    preset = get_preset(name)
    extras.setdefault(STYLE_KEY, DEFAULT_PRESET_STYLES[preset])
    return Rule(pattern=PRESET_PATTERNS[preset], **extras)


def compile_pattern(source: str, flags: int = 0) -> re.Pattern[str]:
    """Compile a pattern, reporting errors as RegexValidationError."""
    try:
        return re.compile(source, flags)
    except (re.error, ValueError) as e:
        raise RegexValidationError(source, str(e)) from e


def build_rule(spec: RuleSpec) -> Rule:
    """Turn a serializable rule description into a Rule."""
    extras: dict[str, Any] = {}
    for key, value in spec.props.items():
        if key in RESERVED_RULE_KEYS:
            logger.warning(f"Ignoring reserved key '{key}' in rule props")
            continue
        extras[key] = value
    if spec.style is not None:
        extras[STYLE_KEY] = spec.style

    if spec.preset is not None:
        base = PRESET_PATTERNS[spec.preset]
        extras.setdefault(STYLE_KEY, DEFAULT_PRESET_STYLES[spec.preset])
        # str patterns carry UNICODE implicitly, which clashes with an explicit ASCII
        flags = (base.flags & ~re.UNICODE) | spec.compiled_flags
        pattern = compile_pattern(base.pattern, flags) if spec.flags else base
    else:
        pattern = compile_pattern(spec.pattern or "", spec.compiled_flags)

    return Rule.model_validate({**extras, "pattern": pattern, "max_matches": spec.max_matches})


def load_rule_specs(path: Path) -> list[RuleSpec]:
    """Load rule descriptions from a JSON file.

    The file holds either a list of rule objects or ``{"rules": [...]}``.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read rules file {path}: {e}", {"path": str(path)}) from e

    if isinstance(raw, dict):
        raw = raw.get("rules")
    if not isinstance(raw, list):
        raise ConfigurationError(f"Rules file {path} must contain a list of rules", {"path": str(path)})

    try:
        specs = [RuleSpec.model_validate(item) for item in raw]
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid rule in {path}: {e}", {"path": str(path)}) from e

    logger.debug(f"Loaded {len(specs)} rules from {path}")
    return specs


def load_rules(path: Path) -> list[Rule]:
    """Load and build the rules described in a JSON file."""
    return [build_rule(spec) for spec in load_rule_specs(path)]
