"""Rendering of parsed parts as Rich text."""

from collections.abc import Iterable, Mapping
from typing import Any

from rich.style import Style
from rich.text import Text

from parsedtext.core.extraction import parse
from parsedtext.models.rule import Rule
from parsedtext.models.segment import TextPart

# Style mapping keys understood besides Rich's own Style arguments
_STYLE_KEY_ALIASES = {
    "backgroundColor": "bgcolor",
    "background": "bgcolor",
    "textDecorationLine": "underline",
    "fontWeight": "bold",
    "fontStyle": "italic",
}


def to_rich_style(style: Any) -> Style | str | None:
    """Convert a style descriptor into something Rich accepts.

    Strings and Rich styles pass through. Mappings are read for color,
    background and the bold/italic/underline/strike switches, also under
    their CSS-like names (``backgroundColor``, ``fontWeight: "bold"``, ...).
    Anything else renders unstyled.
    """
    if style is None or isinstance(style, str | Style):
        return style
    if not isinstance(style, Mapping):
        return None

    kwargs: dict[str, Any] = {}
    for key, value in style.items():
        name = _STYLE_KEY_ALIASES.get(key, key)
        if name in ("color", "bgcolor"):
            kwargs[name] = value
        elif name == "bold":
            kwargs["bold"] = value is True or value == "bold"
        elif name == "italic":
            kwargs["italic"] = value is True or value == "italic"
        elif name == "underline":
            kwargs["underline"] = value is True or value == "underline"
        elif name == "strike":
            kwargs["strike"] = bool(value)
    return Style(**kwargs)


def render_parts(parts: Iterable[TextPart]) -> Text:
    """Join parts into a Rich Text object styled by each part's style.

    Args:
        parts: Parts returned by ``parse``

    Returns:
        Rich Text object with one span per styled part
    """
    rich_text = Text()
    for part in parts:
        rich_text.append(part.text, style=to_rich_style(part.style))
    return rich_text


def highlight_text(
    text: str,
    rules: Iterable[Rule | Mapping[str, Any]] | None = None,
    ranges: Iterable[Any] | None = None,
    style: Any = None,
) -> Text:
    """Parse text and render the result in one step."""
    if not text:
        return Text(text)
    return render_parts(parse(text, rules, ranges, style))
