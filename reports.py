# reports.py
"""
Read-only text projections over an InventoryStore.

Nothing here mutates the store; screens call these after every operation
and re-render the returned text.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Tuple

from models import MovementType, Product, StockMovement
from store import InventoryStore
from utils import format_ts

NO_SUPPLIER = "—"

RECENT_MOVEMENTS_LIMIT = 50
PRODUCT_DETAIL_LIMIT = 10


def format_movement(m: StockMovement) -> str:
    sign = "+" if m.kind is MovementType.IN else "-"
    sup = f" ({m.supplier.name})" if m.supplier is not None else ""
    return f"[{format_ts(m.ts)}] {sign}{m.amount} {m.product.code} - {m.product.name}{sup} -- {m.note}"


# -------------------------
# Current stock
# -------------------------
def current_stock_lines(store: InventoryStore) -> List[str]:
    out = []
    for p in store.products:
        sup = p.supplier.name if p.supplier is not None else NO_SUPPLIER
        out.append(f"{p.code} | {p.name} | Qty: {p.quantity} | Supplier: {sup}")
    return out


def current_stock_report(store: InventoryStore) -> str:
    lines = ["Report - Current Stock", ""]
    lines.extend(current_stock_lines(store))
    return "\n".join(lines) + "\n"


# -------------------------
# Movements
# -------------------------
def recent_movements(store: InventoryStore, limit: int = RECENT_MOVEMENTS_LIMIT) -> List[StockMovement]:
    """Last `limit` movements by timestamp, oldest first. Ties keep insertion order."""
    ordered = sorted(store.movements, key=lambda m: m.ts)
    if limit <= 0:
        return []
    return ordered[-limit:]


def recent_movements_report(store: InventoryStore, limit: int = RECENT_MOVEMENTS_LIMIT) -> str:
    lines = [f"Report - Movements (last {limit})", ""]
    lines.extend(format_movement(m) for m in recent_movements(store, limit))
    return "\n".join(lines) + "\n"


def product_movements(store: InventoryStore, product: Product, limit: int = PRODUCT_DETAIL_LIMIT) -> List[StockMovement]:
    ordered = sorted(store.movements_of(product), key=lambda m: m.ts, reverse=True)
    return ordered[:max(0, limit)]


def product_detail(store: InventoryStore, product: Product, limit: int = PRODUCT_DETAIL_LIMIT) -> str:
    if product.supplier is not None:
        sup = f"{product.supplier.name} ({product.supplier.contact})"
    else:
        sup = NO_SUPPLIER
    lines = [
        f"Code: {product.code}",
        f"Name: {product.name}",
        f"Current quantity: {product.quantity}",
        f"Preferred supplier: {sup}",
        "",
        "Recent movements:",
    ]
    lines.extend(format_movement(m) for m in product_movements(store, product, limit))
    return "\n".join(lines) + "\n"


# -------------------------
# Chart data
# -------------------------
def stock_level_series(store: InventoryStore, product: Product) -> List[Tuple[datetime, int]]:
    """
    (timestamp, quantity after movement) points, oldest first.

    Rebuilt backwards from the current quantity, so the last point always
    equals product.quantity even when older history does not reconcile.
    """
    ordered = sorted(store.movements_of(product), key=lambda m: m.ts)
    points: List[Tuple[datetime, int]] = []
    level = product.quantity
    for m in reversed(ordered):
        points.append((m.ts, level))
        level -= m.signed_amount
    points.reverse()
    return points
