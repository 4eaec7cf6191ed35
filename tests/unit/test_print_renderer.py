"""Tests for the printable HTML renderer."""

from pathlib import Path

from src.config.settings import PdfSettings
from src.infrastructure.pdf import HtmlPrintRenderer


def test_render_contains_invoice(sample_invoice):
    html = HtmlPrintRenderer(PdfSettings(), empty_rows=2).render(sample_invoice)

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>YG-20251213-0001</title>" in html
    assert "13 December 2025" in html
    assert "Ramesh Patil" in html
    assert "&#8377;3,700.00" in html
    assert "<strong>Pan No:</strong> ABCDE1234F" in html
    assert "IFSC Code: SBIN0000123" in html


def test_empty_rows_pad_table(sample_invoice):
    empty = "<tr><td></td><td></td><td></td><td></td><td></td></tr>"
    html = HtmlPrintRenderer(PdfSettings(), empty_rows=4).render(sample_invoice)
    assert html.count(empty) == 4


def test_print_is_triggered_after_delay(sample_invoice):
    html = HtmlPrintRenderer(PdfSettings(print_delay_ms=250), empty_rows=0).render(sample_invoice)
    assert "window.print()" in html
    assert "}, 250);" in html


def test_user_text_is_escaped(sample_invoice):
    sample_invoice.customer.name = "<b>Ramesh & Sons</b>"
    html = HtmlPrintRenderer(PdfSettings(), empty_rows=0).render(sample_invoice)
    assert "&lt;b&gt;Ramesh &amp; Sons&lt;/b&gt;" in html


def test_pan_hidden(sample_invoice):
    sample_invoice.show_pan_no = False
    html = HtmlPrintRenderer(PdfSettings(), empty_rows=0).render(sample_invoice)
    assert "Pan No:" not in html


def test_stamp_is_inlined(sample_invoice, tmp_path: Path):
    stamp = tmp_path / "stamp.png"
    stamp.write_bytes(b"\x89PNG fake")
    html = HtmlPrintRenderer(PdfSettings(stamp_path=str(stamp)), empty_rows=0).render(
        sample_invoice
    )
    assert 'src="data:image/png;base64,' in html
