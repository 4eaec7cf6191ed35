"""Invoice list filtering."""

from collections.abc import Iterable

from src.core.entities.invoice import Invoice, InvoiceFilter


def apply_invoice_filter(
    invoices: Iterable[Invoice], invoice_filter: InvoiceFilter | None
) -> list[Invoice]:
    """
    Apply the conjunctive list filter, preserving input order.

    Customer match is a case-insensitive substring test; invoice number
    match is a plain substring test; date bounds are inclusive.
    """
    result = list(invoices)
    if invoice_filter is None:
        return result

    if invoice_filter.customer_query:
        query = invoice_filter.customer_query.lower()
        result = [inv for inv in result if query in (inv.customer.name or "").lower()]
    if invoice_filter.invoice_number_query:
        query = invoice_filter.invoice_number_query
        result = [inv for inv in result if query in (inv.invoice_number or "")]
    if invoice_filter.from_date:
        result = [inv for inv in result if inv.date >= invoice_filter.from_date]
    if invoice_filter.to_date:
        result = [inv for inv in result if inv.date <= invoice_filter.to_date]
    return result
