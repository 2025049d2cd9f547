"""Invoice Document Layout

Positions every piece of text and every rule of an invoice document.
Coordinates are points with the origin at the top-left corner of a US Letter
page; y grows downwards and marks the top of a line. The layout is pure
data, the PDF painter only has to draw it.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional, Sequence

from reportlab.lib.pagesizes import LETTER
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.invoice_totals import format_money, format_number
from src.domain.issuer_profile import IssuerProfile

PAGE_WIDTH, PAGE_HEIGHT = LETTER
MARGIN = 50
CONTENT_LEFT = MARGIN
CONTENT_RIGHT = PAGE_WIDTH - MARGIN
CONTENT_WIDTH = CONTENT_RIGHT - CONTENT_LEFT

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
LINE_HEIGHT_FACTOR = 1.15

TITLE_SIZE = 24
HEADING_SIZE = 12
BODY_SIZE = 10
FOOTER_SIZE = 8

# Item table
ITEM_X = 50
QTY_X = 300
RATE_X = 370
AMOUNT_X = 470
DESCRIPTION_WIDTH = 240
TABLE_RULE_LEFT = 50
TABLE_RULE_RIGHT = 550
HEADER_RULE_OFFSET = 15
FIRST_ROW_OFFSET = 25
ROW_STEP = 25
ROW_PADDING = 10

# Totals
TOTALS_LABEL_X = 400
TOTALS_GAP = 15
TOTALS_STEP = 20

FOOTER_Y = PAGE_HEIGHT - MARGIN
FOOTER_GAP = 20
BOTTOM_LIMIT = FOOTER_Y - FOOTER_GAP

DEFAULT_FOOTER_TEXT = "Thank you for your business!"


def line_height(size: float) -> float:
    return size * LINE_HEIGHT_FACTOR


@dataclass(frozen=True)
class TextRun:
    text: str
    x: float
    y: float
    font: str = FONT
    size: float = BODY_SIZE
    underline: bool = False

    @property
    def width(self) -> float:
        return stringWidth(self.text, self.font, self.size)


@dataclass(frozen=True)
class Rule:
    x1: float
    x2: float
    y: float
    width: float = 1.0


@dataclass
class Page:
    runs: List[TextRun] = field(default_factory=list)
    rules: List[Rule] = field(default_factory=list)


@dataclass
class DocumentLayout:
    pages: List[Page]
    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT


class _LayoutCursor:
    """Keeps the current page and vertical position while flowing content"""

    def __init__(self, footer_text: str):
        self.footer_text = footer_text
        self.pages: List[Page] = []
        self.page: Optional[Page] = None
        self.y: float = MARGIN
        self.new_page()

    def new_page(self):
        self.page = Page()
        self.pages.append(self.page)
        self.y = MARGIN
        self._footer()

    def _footer(self):
        width = stringWidth(self.footer_text, FONT, FOOTER_SIZE)
        self.page.runs.append(
            TextRun(self.footer_text, (PAGE_WIDTH - width) / 2, FOOTER_Y, FONT, FOOTER_SIZE)
        )

    def ensure_room(self, height: float, on_new_page: Optional[Callable[[], None]] = None):
        if self.y + height > BOTTOM_LIMIT:
            self.new_page()
            if on_new_page is not None:
                on_new_page()

    def text_at(
        self,
        text: str,
        x: float,
        y: float,
        size: float = BODY_SIZE,
        font: str = FONT,
        underline: bool = False,
    ):
        self.page.runs.append(TextRun(text, x, y, font, size, underline))

    def flow(
        self,
        text: str,
        size: float = BODY_SIZE,
        font: str = FONT,
        align: str = "left",
        underline: bool = False,
    ):
        """Write wrapped text at the cursor and move below it"""
        for line in simpleSplit(text, font, size, CONTENT_WIDTH) or [""]:
            if align == "right":
                x = CONTENT_RIGHT - stringWidth(line, font, size)
            else:
                x = CONTENT_LEFT
            self.text_at(line, x, self.y, size, font, underline)
            self.y += line_height(size)

    def move_down(self, lines: float, size: float = BODY_SIZE):
        self.y += lines * line_height(size)

    def rule(self, y: float, x1: float = TABLE_RULE_LEFT, x2: float = TABLE_RULE_RIGHT):
        self.page.rules.append(Rule(x1, x2, y))


def _format_date(value) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def build_layout(
    invoice: Invoice,
    items: Sequence[InvoiceItem],
    profile: Optional[IssuerProfile],
    currency_prefix: str = "$",
    footer_text: str = DEFAULT_FOOTER_TEXT,
) -> DocumentLayout:
    """
    Lay out an invoice document

    The flow is fixed: title, issuer block, invoice metadata, bill-to block,
    item table, totals, optional notes. Everything fits on one page unless
    the items or notes run past the footer, in which case the table (with a
    repeated header), the totals block or the notes block continue on a new
    page. A footer line is pinned to the bottom margin of every page.

    Args:
        invoice: Invoice with its derived totals
        items: Line items in invoice order
        profile: Issuer identity, None for an account without a profile
        currency_prefix: Prefix written before every amount
        footer_text: Centered footer message

    Returns:
        DocumentLayout with one or more pages
    """
    cursor = _LayoutCursor(footer_text)

    def money(value) -> str:
        return format_money(value, currency_prefix)

    # Title
    cursor.flow("INVOICE", size=TITLE_SIZE, align="right")
    cursor.move_down(1, TITLE_SIZE)

    # Issuer block
    if profile is not None:
        for value in (
            profile.business_name,
            profile.business_address,
            profile.business_phone,
            profile.business_email,
        ):
            if value:
                cursor.flow(value)
    cursor.move_down(1)

    # Invoice metadata
    cursor.flow(f"Invoice #: {invoice.invoice_number}", align="right")
    cursor.flow(f"Issue Date: {_format_date(invoice.issue_date)}", align="right")
    cursor.flow(f"Due Date: {_format_date(invoice.due_date)}", align="right")
    cursor.move_down(1)

    # Bill to
    cursor.flow("Bill To:", size=HEADING_SIZE, underline=True)
    cursor.flow(invoice.client_name)
    if invoice.client_email:
        cursor.flow(invoice.client_email)
    if invoice.client_address:
        cursor.flow(invoice.client_address)
    cursor.move_down(2)

    # Item table
    def table_header():
        top = cursor.y
        cursor.text_at("Description", ITEM_X, top, font=FONT_BOLD)
        cursor.text_at("Qty", QTY_X, top, font=FONT_BOLD)
        cursor.text_at("Rate", RATE_X, top, font=FONT_BOLD)
        cursor.text_at("Amount", AMOUNT_X, top, font=FONT_BOLD)
        cursor.rule(top + HEADER_RULE_OFFSET)
        cursor.y = top + FIRST_ROW_OFFSET

    cursor.ensure_room(FIRST_ROW_OFFSET + ROW_STEP)
    table_header()

    for item in items:
        description_lines = simpleSplit(item.description, FONT, BODY_SIZE, DESCRIPTION_WIDTH) or [""]
        row_height = max(ROW_STEP, len(description_lines) * line_height(BODY_SIZE) + ROW_PADDING)
        cursor.ensure_room(row_height, on_new_page=table_header)

        row_top = cursor.y
        for index, line in enumerate(description_lines):
            cursor.text_at(line, ITEM_X, row_top + index * line_height(BODY_SIZE))
        cursor.text_at(format_number(item.quantity), QTY_X, row_top)
        cursor.text_at(money(item.rate), RATE_X, row_top)
        cursor.text_at(money(item.amount), AMOUNT_X, row_top)
        cursor.y = row_top + row_height

    cursor.rule(cursor.y)

    # Totals
    show_tax = invoice.tax_rate is not None and invoice.tax_rate > 0
    totals_height = TOTALS_GAP + TOTALS_STEP + line_height(HEADING_SIZE)
    if show_tax:
        totals_height += TOTALS_STEP
    cursor.ensure_room(totals_height)

    y = cursor.y + TOTALS_GAP
    cursor.text_at("Subtotal:", TOTALS_LABEL_X, y)
    cursor.text_at(money(invoice.subtotal), AMOUNT_X, y)

    if show_tax:
        y += TOTALS_STEP
        cursor.text_at(f"Tax ({format_number(invoice.tax_rate)}%):", TOTALS_LABEL_X, y)
        cursor.text_at(money(invoice.tax_amount), AMOUNT_X, y)

    y += TOTALS_STEP
    cursor.text_at("Total:", TOTALS_LABEL_X, y, size=HEADING_SIZE, font=FONT_BOLD)
    cursor.text_at(money(invoice.total), AMOUNT_X, y, size=HEADING_SIZE, font=FONT_BOLD)
    cursor.y = y + line_height(HEADING_SIZE)

    # Notes
    if invoice.notes and invoice.notes.strip():
        cursor.move_down(3, HEADING_SIZE)
        note_lines = simpleSplit(invoice.notes, FONT, BODY_SIZE, CONTENT_WIDTH)
        block_height = line_height(BODY_SIZE) * (1 + len(note_lines))
        cursor.ensure_room(min(block_height, BOTTOM_LIMIT - MARGIN))
        cursor.flow("Notes:", underline=True)
        for line in note_lines:
            cursor.ensure_room(line_height(BODY_SIZE))
            cursor.text_at(line, CONTENT_LEFT, cursor.y)
            cursor.y += line_height(BODY_SIZE)

    return DocumentLayout(pages=cursor.pages)
