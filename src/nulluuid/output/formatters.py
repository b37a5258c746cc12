"""Render ServiceResult for humans (Rich) or machines (--json).

Human output is a status line followed by indented key/value fields;
``None`` values are shown as ``null`` so an absent NullUUID reads the
same way it encodes.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from nulluuid.output.console import render_text

if TYPE_CHECKING:
    from rich.console import Console

    from nulluuid.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags taken from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _render_quiet(result)

    render = _render_ok if result.ok else _render_error
    return render_text(lambda console: render(result, console, verbose=settings.verbose))


def _render_quiet(result: ServiceResult) -> str:
    """Only the encoded payload (or uuid) on success; one line on error."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if "encoded" in result.data:
        return _scalar(result.data["encoded"])
    return _scalar(result.data.get("uuid"))


def _scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _field(console: Console, key: str, value: Any, *, indent: int = 2) -> None:
    k = Text(f"{' ' * indent}{key}: ", style="nu.key")
    if value is None:
        v = Text("null", style="nu.null")
    elif key == "uuid":
        v = Text(str(value), style="nu.uuid")
    else:
        v = Text(_scalar(value))
    console.print(k, v, sep="")


def _render_ok(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="nu.ok"), Text(f"  {result.op}", style="nu.op"), sep="")
    for key, value in result.data.items():
        if isinstance(value, dict):
            console.print(Text(f"  {key}:", style="nu.key"))
            for sub_key, sub_value in value.items():
                _field(console, sub_key, sub_value, indent=4)
        else:
            _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(Text(f"    {k}: {v}"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="nu.error")
    op = Text(f"  {result.op}", style="nu.op")
    console.print(label, op, Text(f": {msg}"), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
