"""
JSON export/import of invoices.

Export writes the versioned envelope::

    {"exportInfo": {...}, "invoices": [...]}

Import accepts that envelope or a bare array of invoice objects, with
camelCase keys. Missing fields fall back to configured defaults.
"""

import json
from datetime import UTC, date, datetime
from typing import Any

from src.config import get_logger
from src.core.entities import BankDetails, Invoice, InvoiceCustomer, InvoiceLine, Seller
from src.core.entities.invoice import coerce_date
from src.core.exceptions import ImportFormatError

logger = get_logger(__name__)

EXPORT_VERSION = "2.0"
EXPORT_FORMAT = "invoice-generator-format"


def _number(value: float) -> int | float:
    """Render whole floats as ints so exports stay readable."""
    value = round(float(value), 2)
    return int(value) if value.is_integer() else value


def seller_to_dict(seller: Seller) -> dict[str, Any]:
    return {
        "businessName": seller.business_name,
        "owner": seller.owner,
        "address": seller.address,
        "contact": seller.contact,
        "panNo": seller.pan_no,
        "bank": {
            "accountName": seller.bank.account_name,
            "name": seller.bank.name,
            "accountNo": seller.bank.account_no,
            "ifsc": seller.bank.ifsc,
            "upi": seller.bank.upi,
        },
    }


def invoice_to_dict(invoice: Invoice) -> dict[str, Any]:
    """One entry of the ``invoices`` array."""
    total_amount = _number(invoice.subtotal)
    return {
        "invoiceNumber": invoice.invoice_number,
        "date": invoice.date.isoformat(),
        "customer": {
            "name": invoice.customer.name,
            "address": invoice.customer.address,
            "contact": invoice.customer.contact,
        },
        "seller": seller_to_dict(invoice.seller),
        "items": [
            {
                "srNo": index,
                "description": line.description,
                "qty": _number(line.qty),
                "price": _number(line.price),
                "total": _number(line.total),
            }
            for index, line in enumerate(invoice.lines, start=1)
        ],
        "summary": {
            "totalQty": _number(invoice.total_qty),
            "totalAmount": total_amount,
            "subtotal": total_amount,
            "grandTotal": _number(invoice.total),
        },
        "panNumber": invoice.seller.pan_no if invoice.show_pan_no else "",
        "paymentTerms": invoice.payment_terms,
        "currency": invoice.currency,
        "showPanNo": invoice.show_pan_no,
        "createdAt": invoice.created_at.isoformat(),
    }


def build_export(invoices: list[Invoice], exported_at: datetime | None = None) -> dict[str, Any]:
    """Build the export envelope for ``invoices``."""
    exported_at = exported_at or datetime.now(UTC)
    return {
        "exportInfo": {
            "exportedAt": exported_at.isoformat(),
            "totalInvoices": len(invoices),
            "totalRevenue": _number(sum(inv.total for inv in invoices)),
            "version": EXPORT_VERSION,
            "format": EXPORT_FORMAT,
        },
        "invoices": [invoice_to_dict(inv) for inv in invoices],
    }


def dumps_export(invoices: list[Invoice], exported_at: datetime | None = None) -> str:
    return json.dumps(build_export(invoices, exported_at), indent=2, ensure_ascii=False)


def _seller_from_dict(data: dict[str, Any], fallback: Seller) -> Seller:
    bank = data.get("bank") or {}
    return Seller(
        business_name=data.get("businessName") or "",
        owner=data.get("owner") or "",
        address=data.get("address") or "",
        contact=data.get("contact") or "",
        pan_no=data.get("panNo") or fallback.pan_no,
        bank=BankDetails(
            name=bank.get("name") or "",
            account_name=bank.get("accountName") or "",
            account_no=bank.get("accountNo") or "",
            ifsc=bank.get("ifsc") or "",
            upi=bank.get("upi") or "",
        ),
    )


def _line_from_dict(data: dict[str, Any]) -> InvoiceLine:
    return InvoiceLine(
        item_id=data.get("itemId") or data.get("item_id"),
        description=data.get("description"),
        qty=data.get("qty"),
        price=data.get("price"),
    )


def _flag(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "1", "yes"):
            return True
        if text in ("false", "0", "no", ""):
            return False
    elif isinstance(value, int | float):
        return bool(value)
    raise ValueError(f"invalid showPanNo value {value!r}")


def _declared_total(data: dict[str, Any]) -> float | None:
    summary = data.get("summary")
    if not isinstance(summary, dict):
        summary = {}
    for value in (data.get("total"), summary.get("grandTotal"), summary.get("totalAmount")):
        if not value:
            continue
        try:
            return float(value)
        except (TypeError, ValueError):
            continue
    return None


def invoice_from_dict(
    data: dict[str, Any],
    default_seller: Seller,
    default_payment_terms: str = "Due on receipt",
    default_currency: str = "INR",
) -> Invoice:
    """
    Build an unsaved invoice from one imported entry.

    ``invoice_number`` is left as given (possibly None); the caller assigns
    placeholders. Totals are always recomputed from the lines.
    """
    if not isinstance(data, dict):
        raise ImportFormatError("json", "Invoice entry must be an object")

    customer = data.get("customer") or {}
    seller_data = data.get("seller")
    lines = data.get("lines") or data.get("items") or []

    try:
        invoice = Invoice(
            invoice_number=data.get("invoiceNumber") or None,
            date=coerce_date(data.get("date")) or date.today(),
            customer=InvoiceCustomer(
                name=customer.get("name"),
                address=customer.get("address"),
                contact=customer.get("contact"),
            ),
            seller=(
                _seller_from_dict(seller_data, default_seller)
                if seller_data
                else default_seller.model_copy(deep=True)
            ),
            lines=[_line_from_dict(line) for line in lines],
            payment_terms=data.get("paymentTerms") or default_payment_terms,
            currency=data.get("currency") or default_currency,
            show_pan_no=_flag(data.get("showPanNo")),
        )
    except (ValueError, TypeError, AttributeError) as e:
        raise ImportFormatError("json", f"Invalid invoice entry: {e}") from e

    created_at = data.get("createdAt")
    if created_at:
        try:
            invoice.created_at = datetime.fromisoformat(str(created_at).replace("Z", "+00:00"))
        except ValueError:
            logger.debug("import_created_at_ignored", value=created_at)

    declared = _declared_total(data)
    if declared is not None and abs(declared - invoice.total) > 0.005:
        logger.warning(
            "import_total_mismatch",
            invoice_number=invoice.invoice_number,
            declared=declared,
            computed=invoice.total,
        )
    return invoice


def parse_import(
    payload: str | bytes | list | dict,
    default_seller: Seller,
    default_payment_terms: str = "Due on receipt",
    default_currency: str = "INR",
) -> list[Invoice]:
    """
    Parse a JSON import payload.

    Raises:
        ImportFormatError: payload is not JSON, or neither an array nor an
            envelope with an ``invoices`` array
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ImportFormatError("json", f"Invalid JSON: {e.msg}", line=e.lineno) from e

    if isinstance(payload, list):
        entries = payload
    elif isinstance(payload, dict) and isinstance(payload.get("invoices"), list):
        entries = payload["invoices"]
    else:
        raise ImportFormatError("json", "Invalid JSON format")

    return [
        invoice_from_dict(entry, default_seller, default_payment_terms, default_currency)
        for entry in entries
    ]
