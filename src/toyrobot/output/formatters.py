"""Human/quiet/verbose/JSON rendering of session results.

Human mode prints what the robot reported, one line per REPORT, so the
output of a session is exactly the report text. Verbose mode adds a
per-line trace table; JSON mode dumps the ServiceResult.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.table import Table
from rich.text import Text

from toyrobot.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from toyrobot.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    echo_commands: bool = False


def _render_lines(console: Console, lines: list[dict[str, Any]], *, echo: bool) -> None:
    for entry in lines:
        if echo:
            console.print(Text(f"Executing command: {entry['line']}", style="robot.line"))
        if entry.get("output") is not None:
            console.print(Text(entry["output"], style="robot.report"))


def _render_trace(console: Console, lines: list[dict[str, Any]]) -> None:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("command")
    table.add_column("status")
    table.add_column("detail")
    for entry in lines:
        status = entry["status"]
        if entry.get("error"):
            detail = entry["error"]["message"]
        else:
            detail = entry.get("output") or ""
        table.add_row(
            str(entry["number"]),
            Text(entry["line"]),
            Text(status, style=style_for_status(status)),
            Text(detail),
        )
    console.print(table)


def format_session(result: ServiceResult, settings: OutputSettings | None = None) -> str:
    """Format one session result for stdout (non-JSON modes)."""
    settings = settings or OutputSettings()
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    lines: list[dict[str, Any]] = result.data.get("lines", [])
    if settings.quiet:
        return "\n".join(result.data.get("reports", []))

    console = create_console()
    _render_lines(console, lines, echo=settings.echo_commands)
    if settings.verbose:
        _render_trace(console, lines)
        console.print(Text(f"final: {result.data.get('final')}", style="dim"))
    return get_output(console).rstrip("\n")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode flags (defaults to human mode).
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return format_session(result, settings)


def format_results(results: list[ServiceResult], *, settings: OutputSettings) -> str:
    """Format several session results (one per input file)."""
    if settings.json_output:
        return json.dumps([r.model_dump(mode="json") for r in results], indent=2)

    blocks: list[str] = []
    for result in results:
        body = format_session(result, settings)
        if settings.quiet:
            blocks.append(body)
            continue
        source = (result.data or {}).get("source") or (
            result.error.detail.get("source") if result.error else ""
        )
        blocks.append(f"Executing commands from: {source}\n\n{body}".rstrip("\n"))
    separator = "\n" if settings.quiet else "\n\n-----------------------\n\n"
    return separator.join(b for b in blocks if b or not settings.quiet)
