"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from dnsnames.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from dnsnames.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    Matching prints only the matched names, one per line; other ops print
    their primary value.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "match_pattern":
        return "\n".join(data.get("matches", []))
    key = _QUIET_KEYS.get(result.op)
    if key is None or key not in data:
        return f"OK: {result.op}"
    value = data[key]
    return str(value).lower() if isinstance(value, bool) else str(value)


# The one data field --quiet prints for each op.
_QUIET_KEYS: dict[str, str] = {
    "inspect_name": "name",
    "relativize": "relative",
    "join_names": "name",
    "is_subdomain": "is_subdomain",
}


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="dns.ok")
    op = Text(f"  {result.op}", style="dns.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="dns.key")
    if key in ("name", "relative", "parent", "origin", "base"):
        v = Text(str(value), style="dns.name")
    elif key == "pattern":
        v = Text(str(value), style="dns.pattern")
    elif key == "kind":
        v = Text(str(value), style=style_for_kind(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="dns.warning"), warning, end="")
        console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dns.error")
    op = Text(f"  {result.op}", style="dns.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a name with its segments laid out most-specific first."""
    d = result.data
    _status_line(console, result)
    for key in ("name", "kind", "length"):
        _field(console, key, d.get(key, ""))

    segments = d.get("segments", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Segment", style="dns.name")
    table.add_column("Length", justify="right")
    for index, segment in enumerate(segments):
        table.add_row(str(index), segment, str(len(segment)))
    if segments:
        console.print(table)

    if verbose:
        _field(console, "wildcard", d.get("wildcard", False))
        _field(console, "origin_relative", d.get("origin_relative", False))


def _render_match(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render matched names, and misses when verbose."""
    d = result.data
    _status_line(console, result)
    _field(console, "pattern", d.get("pattern", ""))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="dns.name")
    table.add_column("Match")
    for name in d.get("matches", []):
        table.add_row(name, Text("yes", style="dns.match"))
    if verbose:
        for name in d.get("misses", []):
            table.add_row(name, Text("no", style="dns.miss"))
    if table.row_count:
        console.print(table)

    matched = d.get("count", 0)
    console.print(f"\n{matched} of {matched + len(d.get('misses', []))} matched")
    _render_warnings(console, result)


def _render_relativize(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("name", "origin", "relative"):
        _field(console, key, result.data.get(key, ""))


def _render_join(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    if verbose:
        _field(console, "relative", result.data.get("relative", ""))
        _field(console, "base", result.data.get("base", ""))
    _field(console, "name", result.data.get("name", ""))
    _field(console, "kind", result.data.get("kind", ""))


def _render_subdomain(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    verdict = "is a subdomain of" if d.get("is_subdomain") else "is not a subdomain of"
    console.print(
        Text(f"  {d.get('name', '')}", style="dns.name"),
        verdict,
        Text(str(d.get("parent", "")), style="dns.name"),
    )


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    _render_warnings(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "inspect_name": _render_inspect,
    "match_pattern": _render_match,
    "relativize": _render_relativize,
    "join_names": _render_join,
    "is_subdomain": _render_subdomain,
}
