"""Tests for parsedtext.render."""

from rich.style import Style
from rich.text import Span

from parsedtext.models.rule import Rule
from parsedtext.models.segment import TextPart
from parsedtext.render import highlight_text, render_parts, to_rich_style


class TestToRichStyle:
    def test_strings_pass_through(self) -> None:
        assert to_rich_style("bold red") == "bold red"

    def test_none(self) -> None:
        assert to_rich_style(None) is None

    def test_style_pass_through(self) -> None:
        style = Style(bold=True)
        assert to_rich_style(style) is style

    def test_mapping(self) -> None:
        style = to_rich_style({"color": "red", "backgroundColor": "white", "fontWeight": "bold"})
        assert isinstance(style, Style)
        assert style.color.name == "red"
        assert style.bgcolor.name == "white"
        assert style.bold is True

    def test_mapping_ignores_unknown_keys(self) -> None:
        style = to_rich_style({"fontSize": 12, "underline": True})
        assert style.underline is True
        assert style.color is None

    def test_unsupported_type(self) -> None:
        assert to_rich_style(42) is None


class TestRenderParts:
    def test_spans_follow_parts(self) -> None:
        parts = [TextPart(text="say "), TextPart(text="hi", metadata={"style": "bold"}), TextPart(text=" now")]
        rich_text = render_parts(parts)
        assert rich_text.plain == "say hi now"
        assert rich_text.spans == [Span(4, 6, "bold")]

    def test_highlight_text(self) -> None:
        rich_text = highlight_text("a1b", [Rule(pattern=r"\d", style="green")], [(2, 3)], "yellow")
        assert rich_text.plain == "a1b"
        assert rich_text.spans == [Span(1, 2, "green"), Span(2, 3, "yellow")]

    def test_highlight_empty_text(self) -> None:
        assert highlight_text("").plain == ""
