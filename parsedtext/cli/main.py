"""Main CLI entry point for parsedtext."""

import typer

from parsedtext.cli.commands.parse import parse_text
from parsedtext.cli.commands.presets import list_presets

app = typer.Typer(
    name="parsedtext",
    help="parsedtext - Split text into styled parts with regex rules and highlight ranges",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def callback() -> None:
    """
    parsedtext CLI
    """
    pass


app.command("parse", help="Parse text into parts using rules and highlight ranges")(parse_text)
app.command("presets", help="List the built-in pattern presets")(list_presets)


if __name__ == "__main__":
    app()
