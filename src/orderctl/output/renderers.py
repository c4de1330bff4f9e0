"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from orderctl.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from orderctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "build_order":
        return str(result.data.get("id", ""))
    return f"OK: {result.op}"


def render_warnings(warnings: list[str]) -> str:
    """Render non-fatal warnings, one ``WARNING:`` line each."""
    console = create_console()
    for warning in warnings:
        console.print(Text("WARNING:", style="order.warning"), Text(warning))
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="order.ok"), Text(f"  {result.op}", style="order.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="order.key"), Text(str(value), style=style))


def _money(amount: Any, currency: str = "") -> str:
    text = f"{Decimal(str(amount)):.2f}" if amount not in (None, "") else "0.00"
    return f"{currency} {text}".strip()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="order.error"),
        Text(f"  {result.op}", style="order.op"),
        Text(" — "),
        Text(msg),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Order / product / config renderers ────────────────────────────────


def _render_order(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Order summary: header fields, one row per item, grand total."""
    d = result.data
    currency = str(d.get("currency", ""))
    customer = d.get("customer") or {}

    _status_line(console, result)
    _field(console, "id", d.get("id", ""), "order.id")
    _field(console, "customer", customer.get("name", "N/A"))
    if verbose:
        _field(console, "customer_id", customer.get("id", ""), "order.id")
        _field(console, "email", customer.get("email", ""))
    _field(console, "date", d.get("created_at", ""))
    _field(console, "status", d.get("status", ""), "order.status")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Product")
    table.add_column("Qty", justify="right")
    if verbose:
        table.add_column("Unit Price", justify="right")
    table.add_column("Subtotal", justify="right", style="order.money")

    for item in d.get("items", []):
        product = item.get("product", {})
        description = Text(str(item.get("description", "")), style=style_for_kind(product.get("kind", "")))
        row: list[Text] = [description, Text(str(item.get("quantity", "")))]
        if verbose:
            row.append(Text(_money(item.get("unit_price"), currency)))
        row.append(Text(_money(item.get("subtotal"), currency)))
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print(Text(f"TOTAL: {_money(d.get('total'), currency)}", style="order.money"))


def _render_product(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "kind", d.get("kind", ""), style_for_kind(str(d.get("kind", ""))))
    _field(console, "name", d.get("name", ""))
    _field(console, "price", _money(d.get("price")))
    if "weight" in d:
        _field(console, "weight", f"{d['weight']}kg")
    if "download_url" in d:
        _field(console, "download_url", d["download_url"] or "N/A")


def _render_config(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "max_items_per_order", d.get("max_items_per_order", ""))
    _field(console, "default_currency", d.get("default_currency", ""))
    if "fields_changed" in d:
        _field(console, "fields_changed", ", ".join(d["fields_changed"]) or "none")
    if result.meta and result.meta.get("persisted") is False:
        console.print(Text("  applies to this process only; not saved", style="dim"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "build_order": _render_order,
    "create_product": _render_product,
    "show_config": _render_config,
    "update_config": _render_config,
}
