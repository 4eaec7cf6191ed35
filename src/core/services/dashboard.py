"""Dashboard summary over saved invoices."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from src.core.entities.invoice import Invoice


@dataclass
class MonthSummary:
    """Invoice count and revenue for one calendar month."""

    month: str
    invoice_count: int = 0
    revenue: float = 0.0


@dataclass
class DashboardSummary:
    total_invoices: int = 0
    total_revenue: float = 0.0
    months: list[MonthSummary] = field(default_factory=list)


def summarize(invoices: Iterable[Invoice]) -> DashboardSummary:
    """Totals plus a per-month breakdown keyed ``YYYY-MM``, newest first."""
    summary = DashboardSummary()
    by_month: dict[str, MonthSummary] = {}

    for invoice in invoices:
        summary.total_invoices += 1
        summary.total_revenue += invoice.total

        key = f"{invoice.date:%Y-%m}"
        month = by_month.setdefault(key, MonthSummary(month=key))
        month.invoice_count += 1
        month.revenue += invoice.total

    summary.total_revenue = round(summary.total_revenue, 2)
    for month in by_month.values():
        month.revenue = round(month.revenue, 2)
    summary.months = sorted(by_month.values(), key=lambda m: m.month, reverse=True)
    return summary
