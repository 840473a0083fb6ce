"""CLI output formatting — JSON and human-readable modes."""
from __future__ import annotations

import json
import sys

import click


def output(data: dict[str, object], human: bool = False) -> None:
    """Print result as JSON (default) or human-readable text."""
    if "error" in data:
        if human:
            click.echo(f"error: {data['error']}", err=True)
        else:
            click.echo(json.dumps(data, indent=2, default=str), err=True)
        sys.exit(1)
    if human:
        click.echo(_format_human(data))
    else:
        click.echo(json.dumps(data, indent=2, default=str))


def _format_item(record: dict[str, object]) -> str:
    flag = "" if record.get("active", True) else "  [inactive]"
    line = f"{record['name']:24s} {float(record['prio']):7.3f}{flag}"
    note = record.get("note")
    if note:
        line += f"  - {note}"
    return line


def _format_human(data: dict[str, object]) -> str:
    lines: list[str] = []

    # Confirmation line for mutating commands
    message = data.get("message")
    if isinstance(message, str):
        lines.append(message)

    items = data.get("items")
    if isinstance(items, list):
        if not items:
            lines.append("(nothing to show)")
        for record in items:
            if isinstance(record, dict):
                lines.append(_format_item(record))

    if not lines and "name" in data:
        lines.append(_format_item(data))

    if not lines:
        return json.dumps(data, indent=2, default=str)

    return "\n".join(lines)
