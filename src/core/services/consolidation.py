"""Merge invoice lines that share a description."""

from collections.abc import Iterable

from src.core.entities.invoice import InvoiceLine


def line_key(description: str | None) -> str:
    """Grouping key: trimmed, case-insensitive description."""
    return (description or "").strip().lower()


def consolidate_lines(lines: Iterable[InvoiceLine]) -> list[InvoiceLine]:
    """
    Collapse lines with the same description into one.

    Quantities are summed; price, description and item_id come from the
    first occurrence. Blank descriptions are placeholder rows and are
    dropped. Output follows first-seen key order.
    """
    merged: dict[str, InvoiceLine] = {}
    for line in lines:
        key = line_key(line.description)
        if not key:
            continue
        first = merged.get(key)
        if first is None:
            merged[key] = InvoiceLine(
                item_id=line.item_id,
                description=line.description,
                qty=line.qty,
                price=line.price,
            )
        else:
            first.qty += line.qty
    return list(merged.values())
