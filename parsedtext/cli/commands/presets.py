"""Presets command implementation."""

from typing import Annotated, Any

import typer
from rich.markup import escape
from rich.table import Table

from parsedtext.cli.utils.options import OUTPUT_PATH_OPTION, OutputFormat
from parsedtext.cli.utils.output import console, handle_json_output
from parsedtext.core.constants import PatternPreset
from parsedtext.core.patterns import DEFAULT_PRESET_STYLES, PRESET_PATTERNS


def presets_as_dicts() -> list[dict[str, Any]]:
    return [
        {
            "name": preset.value,
            "pattern": PRESET_PATTERNS[preset].pattern,
            "style": DEFAULT_PRESET_STYLES[preset],
        }
        for preset in PatternPreset
    ]


def list_presets(
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format (table, json)", case_sensitive=False),
    ] = OutputFormat.TABLE,
    output: OUTPUT_PATH_OPTION = None,
) -> None:
    """List the built-in pattern presets."""
    if output_format == OutputFormat.JSON:
        handle_json_output(presets_as_dicts(), output)
        return

    table = Table(title="Pattern Presets", show_lines=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Style", no_wrap=True)
    table.add_column("Pattern", style="dim", overflow="fold")

    for preset in presets_as_dicts():
        table.add_row(
            preset["name"],
            f"[{preset['style']}]{preset['style']}[/]",
            escape(preset["pattern"]),
        )

    console.print(table)
