"""
Printable HTML rendering of an invoice.

Produces a standalone document that triggers the browser print dialog
after a short delay so images and fonts can finish loading.
"""

import base64
import mimetypes
import os
from html import escape

from src.config import get_logger
from src.config.settings import PdfSettings, get_settings
from src.core.entities import Invoice
from src.core.services.amount_words import format_long_date, number_to_words
from src.infrastructure.transfer.csv_codec import format_number

logger = get_logger(__name__)

_STYLE = """
body { font-family: Arial, Helvetica, sans-serif; color: #222; margin: 24px; }
.header { display: flex; justify-content: space-between; border-bottom: 2px solid #2d5a27; }
.owner { font-size: 26px; font-weight: bold; color: #2d5a27; }
.business { font-size: 18px; font-weight: bold; }
.muted { color: #555; font-size: 13px; }
.meta { text-align: right; }
table { width: 100%; border-collapse: collapse; margin-top: 12px; }
th, td { border: 1px solid #333; padding: 4px 6px; font-size: 13px; height: 18px; }
th { background: #e6e6e6; }
td.num { text-align: right; }
td.center { text-align: center; }
.totals { display: flex; justify-content: space-between; margin-top: 12px; }
.bank { background: #f9f9f9; border: 1px solid #ccc; padding: 8px 12px; margin-top: 16px; }
.stamp { float: right; width: 130px; height: 130px; }
@media print { body { margin: 0; } }
"""


class HtmlPrintRenderer:
    """Renders an invoice as print-ready HTML."""

    def __init__(self, pdf_settings: PdfSettings | None = None, empty_rows: int | None = None):
        settings = get_settings()
        self._settings = pdf_settings or settings.pdf
        self._empty_rows = (
            empty_rows if empty_rows is not None else settings.invoice.empty_table_rows
        )

    def _money(self, value: float) -> str:
        return f"&#8377;{value:,.2f}"

    def _stamp_tag(self) -> str:
        path = self._settings.stamp_path
        if not path or not os.path.isfile(path):
            return ""
        mime = mimetypes.guess_type(path)[0] or "image/png"
        with open(path, "rb") as f:
            encoded = base64.b64encode(f.read()).decode("ascii")
        return f'<img class="stamp" src="data:{mime};base64,{encoded}" alt="Stamp">'

    def render(self, invoice: Invoice) -> str:
        seller = invoice.seller
        customer = invoice.customer

        rows = []
        for index, line in enumerate(invoice.lines, start=1):
            rows.append(
                "<tr>"
                f'<td class="center">{index}</td>'
                f"<td>{escape(line.description)}</td>"
                f'<td class="center">{format_number(line.qty)}</td>'
                f'<td class="num">{self._money(line.price)}</td>'
                f'<td class="num">{self._money(line.total)}</td>'
                "</tr>"
            )
        rows += ["<tr><td></td><td></td><td></td><td></td><td></td></tr>"] * self._empty_rows

        pan_line = ""
        if invoice.show_pan_no and seller.pan_no:
            pan_line = f"<div><strong>Pan No:</strong> {escape(seller.pan_no)}</div>"

        customer_extra = "".join(
            f'<div class="muted">{escape(value)}</div>'
            for value in (customer.address, customer.contact)
            if value
        )

        title = escape(invoice.invoice_number or "Invoice")
        delay = max(self._settings.print_delay_ms, 0)

        return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="header">
  <div>
    <div class="owner">{escape(seller.owner)}</div>
    <div class="business">{escape(seller.business_name)}</div>
    <div class="muted">{escape(seller.address)}</div>
    <div class="muted">{escape(seller.contact)}</div>
  </div>
  <div class="meta">
    <div class="business">Invoice</div>
    <div>{escape(invoice.invoice_number or "")}</div>
    <div class="muted">{format_long_date(invoice.date)}</div>
  </div>
</div>
<div style="margin-top: 12px;">
  <strong>Customer Name:</strong>
  <div>{escape(customer.name)}</div>
  {customer_extra}
</div>
<table>
  <thead>
    <tr><th>Sr. No</th><th>Description</th><th>Qty</th><th>Amount</th><th>Total</th></tr>
  </thead>
  <tbody>
    {"".join(rows)}
  </tbody>
</table>
<div class="totals">
  <div>
    <div class="muted"><em>Amount in Words: {number_to_words(invoice.total)}</em></div>
    {pan_line}
  </div>
  <div style="text-align: right;">
    <div><strong>Total Qty:</strong> {format_number(invoice.total_qty)}</div>
    <div><strong>Total Amount:</strong> {self._money(invoice.total)}</div>
  </div>
</div>
<div class="bank">
  {self._stamp_tag()}
  <strong>Bank Details:</strong>
  <div>{escape(seller.bank.account_name)}</div>
  <div>{escape(seller.bank.name)}</div>
  <div>Account No: {escape(seller.bank.account_no)}</div>
  <div>IFSC Code: {escape(seller.bank.ifsc)}</div>
</div>
<script>
  window.addEventListener("load", function () {{
    setTimeout(function () {{ window.print(); }}, {delay});
  }});
</script>
</body>
</html>
"""
