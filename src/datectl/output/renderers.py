"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from datectl.output.console import create_console, get_output, style_for_field

if TYPE_CHECKING:
    from rich.console import Console

    from datectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the primary value."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    value = result.value
    if value is None:
        return f"OK: {result.op}"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="dt.ok")
    op = Text(f"  {result.op}", style="dt.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dt.key")
    shown = str(value).lower() if isinstance(value, bool) else str(value)
    v = Text(shown, style=style_for_field(key, value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dt.error")
    op = Text(f"  {result.op}", style="dt.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if key == "value":
            continue
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_shift(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render day/month/year shifts as ``date +N unit → result``."""
    data = result.data
    unit = next((u for u in ("days", "months", "years") if u in data), None)
    if unit is None:
        _render_generic(result, console, verbose=verbose)
        return
    amount = data[unit]
    _status_line(console, result)
    sign = "-" if result.op == "subtract_months" else "+"
    if sign == "+" and amount < 0:
        sign, amount = "-", -amount
    line = Text("  ")
    line.append(str(data["date"]), style="dt.date")
    line.append(f" {sign} {amount} {unit} → ")
    line.append(str(data["value"]), style="dt.value")
    console.print(line)
    if verbose:
        _render_meta(console, result)


def _render_period(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a calendar period as a one-row table."""
    data = result.data
    _status_line(console, result)
    table = Table(show_header=True, header_style="dt.key", box=None, padding=(0, 2))
    for col in ("start", "end", "years", "months", "days", "period"):
        table.add_column(col)
    table.add_row(
        str(data["start"]),
        str(data["end"]),
        str(data["years"]),
        str(data["months"]),
        str(data["days"]),
        str(data["value"]),
    )
    console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "add_days": _render_shift,
    "subtract_months": _render_shift,
    "add_months": _render_shift,
    "add_years": _render_shift,
    "period_between": _render_period,
}
