"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich), for scripts (--quiet
prints just the slug or decoded value), or for machines (--json).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from slugline.output.console import create_console, get_output

if TYPE_CHECKING:
    from slugline.services.result import ServiceResult

# Data key holding the primary value of each result, in lookup order.
_PRIMARY_KEYS = ("slug", "value")


@dataclass(frozen=True)
class OutputSettings:
    """How a ServiceResult should be rendered."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _display(value: Any) -> str:
    return "null" if value is None else str(value)


def _primary_value(result: ServiceResult) -> Any:
    if "value" in result.data and result.op.startswith("decode_"):
        return result.data["value"]
    for key in _PRIMARY_KEYS:
        if key in result.data:
            return result.data[key]
    return None


def render_quiet(result: ServiceResult) -> str:
    """Just the slug (encode) or the decoded value (decode)."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return _display(_primary_value(result))


def render_human(result: ServiceResult, *, verbose: bool = False) -> str:
    """Status line followed by indented key-value fields."""
    console = create_console()
    if result.ok:
        console.print(Text("OK", style="slug.ok"), Text(f"  {result.op}", style="slug.op"), sep="")
        for key, value in result.data.items():
            style = "slug.value" if key in _PRIMARY_KEYS else ""
            console.print(
                Text(f"  {key}: ", style="slug.key"), Text(_display(value), style=style), sep=""
            )
    else:
        msg = result.error.message if result.error else "Unknown error"
        console.print(Text("ERROR", style="slug.error"), Text(f"  {result.op} — {msg}"), sep="")
        if verbose and result.error and result.error.detail:
            for key, value in result.error.detail.items():
                console.print(Text(f"  {key}: ", style="slug.key"), Text(_display(value)), sep="")
    return get_output(console).rstrip("\n")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_human(result, verbose=settings.verbose)
