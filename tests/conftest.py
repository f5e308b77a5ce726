"""Shared test fixtures for parsedtext tests."""

import pytest

from parsedtext.models.rule import Rule


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user environment and .env files out of configuration."""
    for name in ("PARSEDTEXT_OFFSET_MODE", "PARSEDTEXT_HIGHLIGHT_STYLE", "PARSEDTEXT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def red_style():
    return {"color": "red"}


@pytest.fixture
def calls():
    return []


@pytest.fixture
def recorder(calls):
    def on_press(text, index):
        calls.append((text, index))
        return text

    return on_press


@pytest.fixture
def digits_rule():
    return Rule(pattern=r"\d+", style="digits")
