"""ReportLab Invoice Renderer Implementation

Paints an invoice layout onto PDF pages using the ReportLab canvas.
"""

import logging
from io import BytesIO
from typing import List, Optional

from reportlab.lib import colors
from reportlab.pdfgen import canvas

from src.app.services.invoice_renderer import InvoiceRenderer, RenderFailed
from src.adapter.services.invoice_layout import (
    DEFAULT_FOOTER_TEXT,
    DocumentLayout,
    Page,
    build_layout,
)
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.issuer_profile import IssuerProfile

logger = logging.getLogger(__name__)

# Distance from the top of a line to its baseline, as a fraction of font size
BASELINE_FACTOR = 0.8
UNDERLINE_OFFSET = 1.5


class ReportLabInvoiceRenderer(InvoiceRenderer):
    """
    ReportLab implementation of InvoiceRenderer

    The canvas runs in invariant mode, so repeated renders of the same
    input produce identical bytes.
    """

    def __init__(
        self,
        currency_prefix: str = "$",
        footer_text: str = DEFAULT_FOOTER_TEXT,
    ):
        self.currency_prefix = currency_prefix
        self.footer_text = footer_text

    def render(
        self,
        invoice: Invoice,
        items: List[InvoiceItem],
        profile: Optional[IssuerProfile],
    ) -> bytes:
        """
        Render an invoice PDF

        Args:
            invoice: Invoice with its derived totals
            items: Line items in invoice order
            profile: Issuer identity printed in the header

        Returns:
            PDF document as bytes

        Raises:
            RenderFailed: Layout or PDF generation failed
        """
        try:
            layout = build_layout(
                invoice,
                items,
                profile,
                currency_prefix=self.currency_prefix,
                footer_text=self.footer_text,
            )
            return self._paint(layout, title=f"Invoice {invoice.invoice_number}")
        except Exception as e:
            logger.error(f"Failed to render invoice {invoice.id}: {e}")
            raise RenderFailed(str(e)) from e

    def _paint(self, layout: DocumentLayout, title: str) -> bytes:
        buffer = BytesIO()
        pdf = canvas.Canvas(
            buffer,
            pagesize=(layout.width, layout.height),
            invariant=1,
        )
        pdf.setTitle(title)

        for page in layout.pages:
            self._paint_page(pdf, page, layout.height)
            pdf.showPage()

        pdf.save()
        pdf_bytes = buffer.getvalue()
        buffer.close()
        return pdf_bytes

    def _paint_page(self, pdf: canvas.Canvas, page: Page, height: float):
        pdf.setStrokeColor(colors.black)
        pdf.setFillColor(colors.black)

        for rule in page.rules:
            pdf.setLineWidth(rule.width)
            pdf.line(rule.x1, height - rule.y, rule.x2, height - rule.y)

        for run in page.runs:
            baseline = height - run.y - run.size * BASELINE_FACTOR
            pdf.setFont(run.font, run.size)
            pdf.drawString(run.x, baseline, run.text)
            if run.underline:
                pdf.setLineWidth(0.5)
                pdf.line(
                    run.x,
                    baseline - UNDERLINE_OFFSET,
                    run.x + run.width,
                    baseline - UNDERLINE_OFFSET,
                )
