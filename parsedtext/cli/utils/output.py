"""Shared output handlers for CLI commands."""

import csv
import io
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from parsedtext.core.constants import FormattingConstants

console = Console()


def setup_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def handle_json_output(
    data: Any,
    output_path: Path | None,
    transformer: Callable[[Any], dict[str, Any]] | None = None,
) -> None:
    """Handle JSON format output.

    Args:
        data: Data to output (can be any type)
        output_path: Optional file path to save output
        transformer: Optional function to transform data before serialization
    """
    output_data = transformer(data) if transformer else data

    # Bound callbacks and other objects serialize through str()
    json_content = json.dumps(output_data, indent=FormattingConstants.JSON_INDENT, default=str)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_content, encoding="utf-8")
        console.print(f"[bold green]✓ Saved to:[/bold green] {output_path}")
    else:
        print(json_content)


def handle_csv_output(
    data: list[Any],
    output_path: Path | None,
    row_transformer: Callable[[Any], dict[str, Any]],
) -> None:
    """Handle CSV format output.

    Args:
        data: Items to output, one row each
        output_path: Optional file path to save output
        row_transformer: Function turning each item into a row
    """
    string_buffer = io.StringIO()

    if data:
        rows = [row_transformer(item) for item in data]
        writer = csv.DictWriter(string_buffer, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for row in rows:
            # Flatten nested values
            writer.writerow(
                {
                    key: json.dumps(value, default=str) if isinstance(value, dict | list) else value
                    for key, value in row.items()
                }
            )

    csv_content = string_buffer.getvalue()

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(csv_content, encoding="utf-8")
        console.print(f"[bold green]✓ Saved to:[/bold green] {output_path}")
    else:
        print(csv_content)
