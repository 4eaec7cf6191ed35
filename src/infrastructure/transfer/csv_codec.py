"""
CSV export/import of invoices.

Two export layouts:
- a single invoice laid out like the printed form, preceded by a
  ``#format,invoice-csv,1`` tag row
- a summary report of many invoices with one row per line

Tagged files are parsed strictly and raise ``ImportFormatError`` on any
deviation. Untagged files go through the lenient legacy parser that
skips rows it does not recognize.
"""

import csv
import io
from collections.abc import Iterator
from datetime import date
from itertools import chain

from src.config import get_logger
from src.core.entities import Invoice, InvoiceCustomer, InvoiceLine, Seller
from src.core.entities.invoice import coerce_date
from src.core.exceptions import ImportFormatError

logger = get_logger(__name__)

FORMAT_TAG = "#format"
FORMAT_NAME = "invoice-csv"
FORMAT_VERSION = "1"
SUPPORTED_VERSIONS = {"1"}

TABLE_HEADER = ["Sr. No", "Description", "Qty", "Amount", "Total"]
REPORT_HEADER = [
    "Invoice #",
    "Date",
    "Customer Name",
    "Item Description",
    "Qty",
    "Unit Price",
    "Line Total",
    "Invoice Total",
]


def format_number(value: float) -> str:
    """``5.0`` -> ``5``; ``12.5`` -> ``12.5``."""
    value = round(float(value), 2)
    return str(int(value)) if value.is_integer() else str(value)


def _write(rows: list[list]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def _seller_rows(seller: Seller) -> list[list]:
    return [[seller.owner], [seller.business_name], [seller.address], [seller.contact]]


def _bank_rows(seller: Seller, title: str) -> list[list]:
    return [
        [title],
        [seller.bank.account_name],
        [seller.bank.name],
        [f"Account No: {seller.bank.account_no}"],
        [f"IFSC Code: {seller.bank.ifsc}"],
    ]


def export_invoice(invoice: Invoice, empty_rows: int = 12) -> str:
    """Single invoice in the printed-form layout."""
    rows: list[list] = [[FORMAT_TAG, FORMAT_NAME, FORMAT_VERSION]]
    rows += _seller_rows(invoice.seller)
    rows.append([""])
    rows.append(["Name:", invoice.customer.name, "", "Date:", invoice.date.isoformat()])
    rows.append([""])
    rows.append(TABLE_HEADER)
    for index, line in enumerate(invoice.lines, start=1):
        rows.append([
            index,
            line.description,
            format_number(line.qty),
            format_number(line.price),
            format_number(line.total),
        ])
    rows += [["", "", "", "", ""] for _ in range(empty_rows)]
    rows.append([""])

    pan = invoice.seller.pan_no if invoice.show_pan_no else ""
    rows.append(["Pan No", pan, "", "Total Qty:", format_number(invoice.total_qty)])
    rows.append(["", "", "", "Total Amount:", format_number(invoice.total)])
    rows.append([""])
    rows += _bank_rows(invoice.seller, "Bank Details:")
    return _write(rows)


def date_range_text(from_date: date | None, to_date: date | None) -> str:
    if from_date and to_date:
        return f"Date Range: {from_date.isoformat()} to {to_date.isoformat()}"
    if from_date:
        return f"From: {from_date.isoformat()}"
    if to_date:
        return f"To: {to_date.isoformat()}"
    return "All Invoices"


def export_report(
    invoices: list[Invoice],
    seller: Seller,
    from_date: date | None = None,
    to_date: date | None = None,
    export_date: date | None = None,
) -> str:
    """Summary report over already-filtered ``invoices``."""
    export_date = export_date or date.today()
    rows: list[list] = [["INVOICE SUMMARY REPORT"]]
    rows += _seller_rows(seller)
    rows.append([""])
    rows.append([date_range_text(from_date, to_date)])
    rows.append([f"Total Invoices: {len(invoices)}"])
    rows.append([f"Export Date: {export_date.isoformat()}"])
    rows.append([""])
    rows.append(REPORT_HEADER)

    grand_total = 0.0
    for invoice in invoices:
        grand_total += invoice.total
        for line in invoice.lines:
            rows.append([
                invoice.invoice_number or "",
                invoice.date.isoformat(),
                invoice.customer.name,
                line.description,
                format_number(line.qty),
                format_number(line.price),
                format_number(line.total),
                format_number(invoice.total),
            ])
        rows.append([""] * len(REPORT_HEADER))

    rows.append([""])
    rows.append(["SUMMARY"])
    rows.append(["Total Invoices:", len(invoices)])
    rows.append(["Grand Total Revenue:", format_number(grand_total)])
    rows.append([""])
    rows += _bank_rows(seller, "BANK DETAILS")
    return _write(rows)


# Import


def _cell(row: list[str], index: int) -> str:
    return row[index].strip() if index < len(row) else ""


def _is_blank(row: list[str]) -> bool:
    return not any(cell.strip() for cell in row)


def _parse_float(value: str, field: str, line: int) -> float:
    try:
        return float(value.replace(",", "")) if value else 0.0
    except ValueError as e:
        raise ImportFormatError("csv", f"Invalid {field} '{value}'", line=line) from e


def _new_invoice(
    seller: Seller, default_payment_terms: str, default_currency: str
) -> Invoice:
    return Invoice(
        date=date.today(),
        customer=InvoiceCustomer(),
        seller=seller.model_copy(deep=True),
        payment_terms=default_payment_terms,
        currency=default_currency,
    )


def _check_tag(row: list[str], line: int) -> None:
    if _cell(row, 1) != FORMAT_NAME:
        raise ImportFormatError("csv", f"Unknown CSV format '{_cell(row, 1)}'", line)
    version = _cell(row, 2)
    if version not in SUPPORTED_VERSIONS:
        raise ImportFormatError("csv", f"Unsupported CSV format version '{version}'", line)


class _TaggedParser:
    """Strict parser for files that start with the format tag row."""

    def __init__(
        self,
        rows: Iterator[tuple[int, list[str]]],
        seller: Seller,
        default_payment_terms: str,
        default_currency: str,
    ):
        self._rows = rows
        self._seller = seller
        self._default_payment_terms = default_payment_terms
        self._default_currency = default_currency
        self._pending: tuple[int, list[str]] | None = None
        self._last_line = 1

    def _next(self, expect: str) -> tuple[int, list[str]]:
        """Next non-blank row; EOF is an error naming what was expected."""
        if self._pending is not None:
            item, self._pending = self._pending, None
            return item
        for line, row in self._rows:
            self._last_line = line
            if not _is_blank(row):
                return line, row
        raise ImportFormatError("csv", f"Unexpected end of file, expected {expect}", self._last_line)

    def _next_raw(self, expect: str) -> tuple[int, list[str]]:
        """Next row including blank ones."""
        if self._pending is not None:
            item, self._pending = self._pending, None
            return item
        item = next(self._rows, None)
        if item is None:
            raise ImportFormatError(
                "csv", f"Unexpected end of file, expected {expect}", self._last_line
            )
        self._last_line = item[0]
        return item

    def _peek(self) -> tuple[int, list[str]] | None:
        if self._pending is None:
            try:
                self._pending = self._next("a row")
            except ImportFormatError:
                return None
        return self._pending

    def parse(self) -> list[Invoice]:
        invoices = []
        while self._peek() is not None:
            invoice = self._parse_block()
            if invoice is not None:
                invoices.append(invoice)
        if not invoices:
            raise ImportFormatError("csv", "No invoices found", self._last_line)
        return invoices

    def _parse_block(self) -> Invoice | None:
        invoice = _new_invoice(self._seller, self._default_payment_terms, self._default_currency)

        # Seller rows are positional and may be blank, so read them raw
        header: list[str] = []
        line, row = self._next("seller header")
        tagged = _cell(row, 0) == FORMAT_TAG
        if tagged:
            _check_tag(row, line)
            item = next(self._rows, None)
            if item is None:
                return None
            line, row = item
            self._last_line = line
        while _cell(row, 0) != "Name:":
            header.append(_cell(row, 0))
            line, row = self._next_raw("'Name:' row")
        while header and not header[-1]:
            header.pop()
        if len(header) > 4:
            raise ImportFormatError("csv", "Expected 'Name:' row after seller header", line)
        if header or tagged:
            header += [""] * (4 - len(header))
            invoice.seller.owner, invoice.seller.business_name = header[0], header[1]
            invoice.seller.address, invoice.seller.contact = header[2], header[3]

        if _cell(row, 3) != "Date:":
            raise ImportFormatError("csv", "Expected 'Date:' in the 'Name:' row", line)
        invoice.customer.name = _cell(row, 1)
        if _cell(row, 4):
            try:
                invoice.date = coerce_date(_cell(row, 4))
            except ValueError as e:
                raise ImportFormatError("csv", f"Invalid date '{_cell(row, 4)}'", line) from e

        line, row = self._next("table header")
        if [c.strip() for c in row[: len(TABLE_HEADER)]] != TABLE_HEADER:
            raise ImportFormatError("csv", "Expected table header 'Sr. No,Description,...'", line)

        while True:
            line, row = self._next("'Pan No' row")
            if _cell(row, 0) == "Pan No":
                break
            try:
                int(_cell(row, 0))
            except ValueError as e:
                raise ImportFormatError("csv", f"Invalid Sr. No '{_cell(row, 0)}'", line) from e
            if not _cell(row, 1):
                raise ImportFormatError("csv", "Missing description", line)
            invoice.lines.append(
                InvoiceLine(
                    description=_cell(row, 1),
                    qty=_parse_float(_cell(row, 2), "quantity", line),
                    price=_parse_float(_cell(row, 3), "amount", line),
                )
            )

        if _cell(row, 3) != "Total Qty:":
            raise ImportFormatError("csv", "Expected 'Total Qty:' in the 'Pan No' row", line)
        _parse_float(_cell(row, 4), "total quantity", line)
        if _cell(row, 1):
            invoice.seller.pan_no = _cell(row, 1)
            invoice.show_pan_no = True

        line, row = self._next("'Total Amount:' row")
        if _cell(row, 3) != "Total Amount:":
            raise ImportFormatError("csv", "Expected 'Total Amount:' row", line)
        declared = _parse_float(_cell(row, 4), "total amount", line)
        if abs(declared - invoice.total) > 0.005:
            logger.warning(
                "import_total_mismatch",
                customer=invoice.customer.name,
                declared=declared,
                computed=invoice.total,
            )

        peeked = self._peek()
        if peeked is not None and _cell(peeked[1], 0) == "Bank Details:":
            self._pending = None
            self._parse_bank(invoice)
        return invoice

    def _parse_bank(self, invoice: Invoice) -> None:
        bank = invoice.seller.bank
        # Positional rows; the names may be blank
        line, row = self._next_raw("bank account name")
        bank.account_name = _cell(row, 0)
        line, row = self._next_raw("bank name")
        bank.name = _cell(row, 0)
        line, row = self._next_raw("'Account No:' row")
        if not _cell(row, 0).startswith("Account No:"):
            raise ImportFormatError("csv", "Expected 'Account No:' row", line)
        bank.account_no = _cell(row, 0).removeprefix("Account No:").strip()
        line, row = self._next_raw("'IFSC Code:' row")
        if not _cell(row, 0).startswith("IFSC Code:"):
            raise ImportFormatError("csv", "Expected 'IFSC Code:' row", line)
        bank.ifsc = _cell(row, 0).removeprefix("IFSC Code:").strip()


def _parse_legacy(
    rows: Iterator[tuple[int, list[str]]],
    seller: Seller,
    default_payment_terms: str,
    default_currency: str,
) -> list[Invoice]:
    """Lenient parser for untagged files; unknown rows are skipped."""
    invoices: list[Invoice] = []
    current: Invoice | None = None
    in_table = False

    for line, row in rows:
        if _is_blank(row):
            continue
        first = _cell(row, 0)

        starts_block = bool(seller.owner) and first == seller.owner
        if (
            first == "Name:"
            and current is not None
            and (current.lines or current.customer.name)
        ):
            starts_block = True
        if starts_block or (first and not in_table and current is None):
            if current is not None:
                invoices.append(current)
            current = _new_invoice(seller, default_payment_terms, default_currency)
            in_table = False

        if current is None:
            continue

        if first == "Name:" and _cell(row, 1):
            current.customer.name = _cell(row, 1)
            if _cell(row, 3) == "Date:" and _cell(row, 4):
                try:
                    current.date = coerce_date(_cell(row, 4)) or current.date
                except ValueError:
                    logger.debug("csv_import_date_ignored", line=line, value=_cell(row, 4))

        if first == "Sr. No" and _cell(row, 1) == "Description":
            in_table = True
            continue

        if in_table:
            try:
                sr_no = int(first)
            except ValueError:
                sr_no = 0
            if sr_no > 0 and _cell(row, 1):
                try:
                    current.lines.append(
                        InvoiceLine(
                            description=_cell(row, 1),
                            qty=_cell(row, 2) or 0,
                            price=_cell(row, 3) or 0,
                        )
                    )
                except ValueError:
                    logger.debug("csv_import_row_skipped", line=line)
            if first == "Pan No" or (_cell(row, 3) == "Total Qty:" and _cell(row, 4)):
                in_table = False

    if current is not None:
        invoices.append(current)

    kept = [inv for inv in invoices if inv.lines or inv.customer.name]
    if len(kept) < len(invoices):
        logger.info("csv_import_empty_blocks_skipped", count=len(invoices) - len(kept))
    return kept


def parse_import(
    text: str,
    seller: Seller,
    default_payment_terms: str = "Due on receipt",
    default_currency: str = "INR",
) -> list[Invoice]:
    """
    Parse a CSV import into unsaved invoices without numbers.

    Raises:
        ImportFormatError: tagged file that deviates from the layout, or an
            unknown format version
    """
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))
    rows = ((reader.line_num, row) for row in reader)

    first = next(rows, None)
    if first is None:
        return []

    line, row = first
    if _cell(row, 0) == FORMAT_TAG:
        _check_tag(row, line)
        return _TaggedParser(
            chain([first], rows), seller, default_payment_terms, default_currency
        ).parse()

    return _parse_legacy(chain([first], rows), seller, default_payment_terms, default_currency)
