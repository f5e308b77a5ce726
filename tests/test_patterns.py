"""Tests for parsedtext.core.patterns."""

import json
import re

import pytest

from parsedtext.core.constants import PatternPreset
from parsedtext.core.extraction import parse
from parsedtext.core.patterns import (
    DEFAULT_PRESET_STYLES,
    PRESET_PATTERNS,
    build_rule,
    get_preset,
    load_rule_specs,
    load_rules,
    preset_rule,
)
from parsedtext.exceptions import ConfigurationError, RegexValidationError
from parsedtext.models.rule import RuleSpec


def _found(preset, text):
    match = PRESET_PATTERNS[preset].search(text)
    return match.group(0) if match else None


class TestPresetPatterns:
    def test_every_preset_has_style(self) -> None:
        assert set(PRESET_PATTERNS) == set(PatternPreset) == set(DEFAULT_PRESET_STYLES)

    @pytest.mark.parametrize(
        "preset,text,expected",
        [
            (PatternPreset.URL, "visit https://example.com/docs today", "https://example.com/docs"),
            (PatternPreset.URL, "or www.example.org.", "www.example.org"),
            (PatternPreset.EMAIL, "mail me at jane.doe@example.org.", "jane.doe@example.org"),
            (PatternPreset.PHONE, "call 555-123-4567 now", "555-123-4567"),
            (PatternPreset.MENTION, "hi @alice!", "@alice"),
            (PatternPreset.HASHTAG, "love #python.", "#python"),
        ],
    )
    def test_matches(self, preset, text, expected) -> None:
        assert _found(preset, text) == expected

    def test_mention_ignores_email(self) -> None:
        assert _found(PatternPreset.MENTION, "bob@example.com") is None

    def test_url_claims_before_mention(self) -> None:
        parts = parse("ping @bob at https://x.io/@bob", [preset_rule("url"), preset_rule("mention")])
        assert [p.text for p in parts] == ["ping ", "@bob", " at ", "https://x.io/@bob"]
        assert [p.style for p in parts] == ["bold cyan", None, None, "underline blue"]


class TestPresetRule:
    def test_default_style(self) -> None:
        rule = preset_rule(PatternPreset.HASHTAG)
        assert rule.extras == {"style": "bold magenta"}
        assert rule.pattern is PRESET_PATTERNS[PatternPreset.HASHTAG]

    def test_overrides(self) -> None:
        rule = preset_rule("URL", style="red", max_matches=1, kind="link")
        assert rule.extras == {"style": "red", "kind": "link"}
        assert rule.max_matches == 1

    def test_unknown_preset(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            get_preset("ipv4")
        assert "url" in exc_info.value.details["available"]


class TestBuildRule:
    def test_pattern_with_flags(self) -> None:
        rule = build_rule(RuleSpec(pattern="hello", flags=["IGNORECASE"], style="s"))
        assert rule.pattern.search("say HELLO")
        assert rule.extras == {"style": "s"}

    def test_preset_keeps_pattern_without_flags(self) -> None:
        rule = build_rule(RuleSpec(preset=PatternPreset.EMAIL))
        assert rule.pattern is PRESET_PATTERNS[PatternPreset.EMAIL]
        assert rule.extras == {"style": DEFAULT_PRESET_STYLES[PatternPreset.EMAIL]}

    def test_preset_with_extra_flags(self) -> None:
        rule = build_rule(RuleSpec(preset=PatternPreset.HASHTAG, flags=["ASCII"]))
        assert rule.pattern.flags & re.ASCII

    def test_props_and_limit(self) -> None:
        rule = build_rule(RuleSpec(pattern=r"\d", max_matches=2, props={"kind": "digit", "pattern": "x"}))
        assert rule.max_matches == 2
        assert rule.extras == {"kind": "digit"}
        assert rule.pattern.pattern == r"\d"

    def test_malformed_pattern(self) -> None:
        with pytest.raises(RegexValidationError):
            build_rule(RuleSpec(pattern="("))


class TestLoadRules:
    def test_list_file(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps([{"preset": "mention"}, {"pattern": r"\d+", "style": "green"}]))
        rules = load_rules(path)
        assert len(rules) == 2
        assert rules[1].extras == {"style": "green"}

    def test_wrapped_file(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"rules": [{"pattern": "a"}]}))
        assert [spec.pattern for spec in load_rule_specs(path)] == ["a"]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError):
            load_rule_specs(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            load_rule_specs(path)

    def test_not_a_list(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"pattern": "a"}))
        with pytest.raises(ConfigurationError):
            load_rule_specs(path)

    def test_invalid_rule(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps([{"preset": "url", "pattern": "a"}]))
        with pytest.raises(ConfigurationError):
            load_rule_specs(path)
