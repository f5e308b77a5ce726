"""Parse command implementation."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.markup import escape
from rich.table import Table

from parsedtext.cli.utils.options import (
    OFFSET_MODE_OPTION,
    OUTPUT_PATH_OPTION,
    PATTERN_OPTION,
    PRESET_OPTION,
    RANGE_OPTION,
    RULES_FILE_OPTION,
    VERBOSE_OPTION,
    OutputFormat,
)
from parsedtext.cli.utils.output import console, handle_csv_output, handle_json_output, setup_logging
from parsedtext.config import load_config
from parsedtext.core.constants import RANGE_KEY_SEPARATOR, StyleDefaults, TableColumnWidths
from parsedtext.core.extraction import TextExtraction
from parsedtext.core.patterns import load_rules, preset_rule
from parsedtext.exceptions import ParsedTextError
from parsedtext.models.rule import Rule
from parsedtext.models.segment import TextPart
from parsedtext.render import render_parts

logger = logging.getLogger(__name__)


def parse_range_option(value: str) -> str:
    """Normalize START:END to the START|END key form."""
    return value.replace(":", RANGE_KEY_SEPARATOR)


def collect_rules(
    rules_file: Path | None,
    presets: list[str],
    patterns: list[str],
    style: str,
    max_matches: int | None,
) -> list[Rule]:
    """Rules file entries first, then presets, then ad-hoc patterns."""
    rules: list[Rule] = []
    if rules_file:
        rules.extend(load_rules(rules_file))
    rules.extend(preset_rule(name) for name in presets)
    rules.extend(Rule(pattern=pattern, max_matches=max_matches, style=style) for pattern in patterns)
    logger.debug(f"Collected {len(rules)} rules")
    return rules


def handle_table_output(parts: list[TextPart]) -> None:
    """Handle table format output."""
    table = Table(title="Parsed Parts", show_lines=True)

    table.add_column("#", style="dim", width=TableColumnWidths.INDEX, justify="right")
    table.add_column("Text", min_width=TableColumnWidths.TEXT, overflow="fold")
    table.add_column("Style", style="cyan", min_width=TableColumnWidths.STYLE)
    table.add_column("Metadata", style="dim", min_width=TableColumnWidths.METADATA, overflow="fold")

    for index, part in enumerate(parts):
        extra = {key: value for key, value in part.metadata.items() if key != "style"}
        table.add_row(
            str(index),
            escape(part.text),
            escape(str(part.style)) if part.style is not None else "",
            escape(", ".join(f"{key}={value}" for key, value in extra.items())),
        )

    console.print(table)
    console.print(f"\n[bold]Total parts:[/bold] {len(parts)}")


def transform_parts_for_json(parts: list[TextPart]) -> dict[str, Any]:
    """Transform parsed parts for JSON output."""
    return {
        "count": len(parts),
        "parts": [{"text": part.text, "metadata": part.metadata} for part in parts],
    }


def transform_part_for_csv(item: tuple[int, TextPart]) -> dict[str, Any]:
    """Transform a single numbered part for CSV output."""
    index, part = item
    return {
        "index": index,
        "text": part.text,
        "style": "" if part.style is None else str(part.style),
        "metadata": {key: value for key, value in part.metadata.items() if key != "style"},
    }


def parse_text(
    text: Annotated[str | None, typer.Argument(help="Text to parse (omit when using --file)")] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", help="Read the text from a file", exists=True, dir_okay=False, readable=True),
    ] = None,
    patterns: PATTERN_OPTION = None,
    presets: PRESET_OPTION = None,
    rules_file: RULES_FILE_OPTION = None,
    style: Annotated[
        str,
        typer.Option("--style", help="Rich style for --pattern matches"),
    ] = StyleDefaults.PATTERN.value,
    max_matches: Annotated[
        int | None,
        typer.Option("--max-matches", help="Match limit for each --pattern rule (0 for unlimited)"),
    ] = None,
    ranges: RANGE_OPTION = None,
    range_style: Annotated[
        str | None,
        typer.Option("--range-style", help="Rich style for --range spans (default from PARSEDTEXT_HIGHLIGHT_STYLE)"),
    ] = None,
    offset_mode: OFFSET_MODE_OPTION = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format", case_sensitive=False),
    ] = OutputFormat.RICH,
    output: OUTPUT_PATH_OPTION = None,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Split text into styled parts using pattern rules and highlight ranges.

    Rules run in order: entries of the --rules file, then --preset, then
    --pattern. Text claimed by an earlier rule is never matched again.
    """
    config = load_config()
    setup_logging(config.log_level, verbose)

    if file is not None:
        try:
            text = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Error: could not read {escape(str(file))}: {escape(str(e))}[/red]")
            raise typer.Exit(1) from e
    if text is None:
        console.print("[red]Provide TEXT or --file.[/red]")
        raise typer.Exit(1)

    try:
        rules = collect_rules(rules_file, list(presets or []), list(patterns or []), style, max_matches)
        extraction = TextExtraction(
            text,
            rules,
            ranges=[parse_range_option(value) for value in ranges or []],
            style=range_style or config.highlight_style,
            offset_mode=offset_mode,
        )
        parts = extraction.parse()
    except ParsedTextError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if output_format == OutputFormat.RICH:
        console.print(render_parts(parts))
    elif output_format == OutputFormat.TABLE:
        handle_table_output(parts)
    elif output_format == OutputFormat.JSON:
        handle_json_output(parts, output, transformer=transform_parts_for_json)
    elif output_format == OutputFormat.CSV:
        handle_csv_output(list(enumerate(parts)), output, row_transformer=transform_part_for_csv)
