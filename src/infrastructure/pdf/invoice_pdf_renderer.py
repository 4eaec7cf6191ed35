"""
Invoice PDF renderer using fpdf2.

Renders a single invoice in the shop's printed-form layout (seller
header, customer, padded line table, amount in words, totals, bank
box and optional stamp) and an all-invoices summary report.
"""

import os
from abc import ABC, abstractmethod
from datetime import UTC, date, datetime

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from src.config import get_logger
from src.config.settings import PdfSettings, get_settings
from src.core.entities import Invoice, Seller
from src.core.services.amount_words import format_long_date, number_to_words
from src.infrastructure.transfer.csv_codec import date_range_text, format_number

logger = get_logger(__name__)

OWNER_COLOR = (45, 90, 39)
MUTED_COLOR = (85, 85, 85)
HEADER_FILL = (230, 230, 230)
REPORT_HEADER_FILL = (102, 126, 234)
STRIPE_FILL = (248, 250, 252)
BANK_FILL = (249, 249, 249)

# Sr. No | Description | Qty | Amount | Total
INVOICE_COL_WIDTHS = [20, 80, 22, 34, 34]
# Invoice # | Date | Customer | Description | Qty | Unit Price | Line Total | Invoice Total
REPORT_COL_WIDTHS = [32, 22, 28, 40, 12, 18, 18, 20]


def _latin1(text: str, currency_label: str = "Rs.") -> str:
    """Core fonts only cover latin-1; replace anything else."""
    text = (text or "").replace("₹", currency_label)
    return text.encode("latin-1", "replace").decode("latin-1")


class IInvoicePdfRenderer(ABC):
    """Interface for invoice PDF rendering implementations."""

    @abstractmethod
    def render(self, invoice: Invoice) -> bytes:
        """Render one invoice into PDF bytes."""
        ...

    @abstractmethod
    def render_summary(
        self,
        invoices: list[Invoice],
        seller: Seller,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> bytes:
        """Render the all-invoices summary report into PDF bytes."""
        ...


class _InvoicePdf(FPDF):
    """FPDF subclass that renders a footer on every page."""

    def __init__(self, pdf_settings: PdfSettings) -> None:
        super().__init__(orientation="P", unit="mm", format="A4")
        self._pdf_settings = pdf_settings
        self._generation_date = datetime.now(UTC).strftime("%Y-%m-%d %H:%M UTC")

    def footer(self) -> None:
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(*MUTED_COLOR)
        self.cell(0, 5, _latin1(self._pdf_settings.footer_text), align="L")
        self.set_x(-60)
        self.cell(0, 5, f"Page {self.page_no()} of {{nb}} | {self._generation_date}", align="R")
        self.set_text_color(0, 0, 0)


class Fpdf2InvoiceRenderer(IInvoicePdfRenderer):
    """Renders invoice PDFs using fpdf2 core fonts."""

    def __init__(
        self,
        pdf_settings: PdfSettings | None = None,
        empty_rows: int | None = None,
    ) -> None:
        settings = get_settings()
        self._settings = pdf_settings or settings.pdf
        self._empty_rows = (
            empty_rows if empty_rows is not None else settings.invoice.empty_table_rows
        )

    def _new_pdf(self) -> _InvoicePdf:
        pdf = _InvoicePdf(self._settings)
        pdf.alias_nb_pages()
        pdf.set_auto_page_break(auto=True, margin=20)
        pdf.add_page()
        return pdf

    def _text(self, text: str) -> str:
        return _latin1(text, self._settings.currency_label)

    def _money(self, value: float) -> str:
        return f"{self._settings.currency_label} {value:,.2f}"

    # Single invoice

    def render(self, invoice: Invoice) -> bytes:
        pdf = self._new_pdf()

        self._render_header(pdf, invoice)
        self._render_customer(pdf, invoice)
        self._render_lines_table(pdf, invoice)
        self._render_totals(pdf, invoice)
        self._render_bank_box(pdf, invoice.seller, "Bank Details:")
        self._render_stamp(pdf)

        logger.debug(
            "invoice_pdf_rendered",
            invoice_number=invoice.invoice_number,
            pages=pdf.page_no(),
        )
        return bytes(pdf.output())

    def _render_seller(self, pdf: FPDF, seller: Seller, owner_size: int = 20) -> None:
        pdf.set_font("Helvetica", "B", owner_size)
        pdf.set_text_color(*OWNER_COLOR)
        pdf.cell(120, 9, self._text(seller.owner), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_font("Helvetica", "B", 14)
        pdf.set_text_color(0, 0, 0)
        pdf.cell(120, 7, self._text(seller.business_name), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_font("Helvetica", "", 10)
        pdf.set_text_color(51, 51, 51)
        pdf.multi_cell(120, 5, self._text(seller.address), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        if seller.contact:
            pdf.cell(120, 5, self._text(seller.contact), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)

    def _render_header(self, pdf: FPDF, invoice: Invoice) -> None:
        top = pdf.get_y()
        self._render_seller(pdf, invoice.seller)
        bottom = pdf.get_y()

        # Right-aligned invoice block
        pdf.set_xy(130, top)
        pdf.set_font("Helvetica", "B", 16)
        pdf.cell(0, 8, "Invoice", align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_x(130)
        pdf.set_font("Helvetica", "", 11)
        pdf.cell(0, 6, self._text(invoice.invoice_number or ""), align="R",
                 new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_x(130)
        pdf.set_font("Helvetica", "", 10)
        pdf.cell(0, 6, format_long_date(invoice.date), align="R",
                 new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_y(max(bottom, pdf.get_y()) + 3)
        y = pdf.get_y()
        pdf.set_draw_color(100, 100, 100)
        pdf.line(pdf.l_margin, y, pdf.w - pdf.r_margin, y)
        pdf.set_draw_color(0, 0, 0)
        pdf.ln(4)

    def _render_customer(self, pdf: FPDF, invoice: Invoice) -> None:
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(0, 6, "Customer Name:", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 10)
        pdf.cell(0, 6, self._text(invoice.customer.name), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        if invoice.customer.address:
            pdf.multi_cell(0, 5, self._text(invoice.customer.address),
                           new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        if invoice.customer.contact:
            pdf.cell(0, 5, self._text(invoice.customer.contact),
                     new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(4)

    def _render_lines_table(self, pdf: FPDF, invoice: Invoice) -> None:
        widths = INVOICE_COL_WIDTHS
        headers = ["Sr. No", "Description", "Qty", "Amount", "Total"]
        aligns = ["C", "L", "C", "R", "R"]

        pdf.set_font("Helvetica", "B", 9)
        pdf.set_fill_color(*HEADER_FILL)
        for width, header, align in zip(widths, headers, aligns):
            pdf.cell(width, 8, header, border=1, fill=True, align=align)
        pdf.ln()

        pdf.set_font("Helvetica", "", 9)
        for index, line in enumerate(invoice.lines, start=1):
            cells = [
                str(index),
                self._text(line.description[:48]),
                format_number(line.qty),
                self._money(line.price),
                self._money(line.total),
            ]
            for width, value, align in zip(widths, cells, aligns):
                pdf.cell(width, 7, value, border=1, align=align)
            pdf.ln()

        for _ in range(self._empty_rows):
            for width in widths:
                pdf.cell(width, 7, "", border=1)
            pdf.ln()
        pdf.ln(4)

    def _render_totals(self, pdf: FPDF, invoice: Invoice) -> None:
        y = pdf.get_y()

        pdf.set_font("Helvetica", "I", 9)
        pdf.set_text_color(*MUTED_COLOR)
        pdf.multi_cell(110, 5, f"Amount in Words: {number_to_words(invoice.total)}",
                       new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)

        if invoice.show_pan_no and invoice.seller.pan_no:
            pdf.set_font("Helvetica", "B", 10)
            pdf.cell(110, 6, self._text(f"Pan No: {invoice.seller.pan_no}"),
                     new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        left_bottom = pdf.get_y()

        pdf.set_xy(125, y)
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(0, 6, f"Total Qty: {format_number(invoice.total_qty)}", align="R",
                 new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_x(125)
        pdf.cell(0, 6, f"Total Amount: {self._money(invoice.total)}", align="R",
                 new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_y(max(left_bottom, pdf.get_y()) + 6)

    def _render_bank_box(self, pdf: FPDF, seller: Seller, title: str) -> None:
        if pdf.get_y() + 34 > pdf.page_break_trigger:
            pdf.add_page()
        x, y = pdf.l_margin, pdf.get_y()
        width = pdf.w - pdf.l_margin - pdf.r_margin

        pdf.set_fill_color(*BANK_FILL)
        pdf.rect(x, y, width, 32, style="DF")

        pdf.set_xy(x + 4, y + 2)
        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(0, 6, title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "", 10)
        for text in (
            seller.bank.account_name,
            seller.bank.name,
            f"Account No: {seller.bank.account_no}",
            f"IFSC Code: {seller.bank.ifsc}",
        ):
            pdf.set_x(x + 4)
            pdf.cell(0, 5, self._text(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_y(y + 36)

    def _render_stamp(self, pdf: FPDF) -> None:
        stamp_path = self._settings.stamp_path
        if not stamp_path:
            return
        if not os.path.isfile(stamp_path):
            logger.warning("stamp_image_missing", path=stamp_path)
            return
        size = 35
        x = pdf.w - pdf.r_margin - size
        y = min(pdf.get_y(), pdf.page_break_trigger - size)
        pdf.image(stamp_path, x=x, y=y, w=size, h=size)

    # Summary report

    def render_summary(
        self,
        invoices: list[Invoice],
        seller: Seller,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> bytes:
        pdf = self._new_pdf()

        pdf.set_font("Helvetica", "B", 20)
        pdf.set_text_color(*OWNER_COLOR)
        pdf.cell(0, 12, "INVOICE SUMMARY REPORT", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)
        self._render_seller(pdf, seller, owner_size=16)
        pdf.ln(6)

        pdf.set_font("Helvetica", "", 11)
        for text in (
            date_range_text(from_date, to_date),
            f"Total Invoices: {len(invoices)}",
            f"Export Date: {date.today().isoformat()}",
        ):
            pdf.cell(0, 6, text, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(4)

        self._render_report_table(pdf, invoices)

        grand_total = sum(inv.total for inv in invoices)
        pdf.ln(6)
        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(0, 7, "SUMMARY", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "B", 11)
        pdf.cell(0, 6, f"Total Invoices: {len(invoices)}", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.cell(0, 6, f"Grand Total Revenue: {self._money(grand_total)}",
                 new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(6)

        self._render_bank_box(pdf, seller, "BANK DETAILS:")

        logger.debug("summary_pdf_rendered", invoices=len(invoices), pages=pdf.page_no())
        return bytes(pdf.output())

    def _render_report_header(self, pdf: FPDF) -> None:
        headers = [
            "Invoice #",
            "Date",
            "Customer",
            "Item Description",
            "Qty",
            "Unit Price",
            "Line Total",
            "Invoice Total",
        ]
        pdf.set_font("Helvetica", "B", 8)
        pdf.set_fill_color(*REPORT_HEADER_FILL)
        pdf.set_text_color(255, 255, 255)
        for width, header in zip(REPORT_COL_WIDTHS, headers):
            pdf.cell(width, 7, header, border=1, fill=True)
        pdf.ln()
        pdf.set_text_color(0, 0, 0)

    def _render_report_table(self, pdf: FPDF, invoices: list[Invoice]) -> None:
        self._render_report_header(pdf)
        pdf.set_font("Helvetica", "", 7)
        pdf.set_fill_color(*STRIPE_FILL)

        for invoice in invoices:
            for index, line in enumerate(invoice.lines):
                if pdf.get_y() + 6 > pdf.page_break_trigger:
                    pdf.add_page()
                    self._render_report_header(pdf)
                    pdf.set_font("Helvetica", "", 7)
                    pdf.set_fill_color(*STRIPE_FILL)

                cells = [
                    self._text(invoice.invoice_number or ""),
                    invoice.date.isoformat(),
                    self._text(invoice.customer.name[:16]),
                    self._text(line.description[:26]),
                    format_number(line.qty),
                    format_number(line.price),
                    format_number(line.total),
                    format_number(invoice.total),
                ]
                fill = index % 2 == 0
                for width, value in zip(REPORT_COL_WIDTHS, cells):
                    pdf.cell(width, 6, value, border=1, fill=fill)
                pdf.ln()
