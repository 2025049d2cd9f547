"""Invoice Aggregate

Builds a complete invoice record (invoice row plus ordered items) from raw
input. Nothing here touches storage.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional, Sequence

from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem
from src.domain.invoice_totals import Number, calculate_totals, to_decimal


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str


class InvoiceValidationError(ValueError):
    """Raised with every offending field when invoice input is invalid"""

    def __init__(self, errors: List[FieldError]):
        self.errors = errors
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))


@dataclass(frozen=True)
class BillingSnapshot:
    """Client contact fields copied onto the invoice"""
    name: str
    email: Optional[str] = None
    address: Optional[str] = None


@dataclass(frozen=True)
class LineItemInput:
    description: str
    quantity: Number
    rate: Number


@dataclass
class InvoiceAggregate:
    invoice: Invoice
    items: List[InvoiceItem] = field(default_factory=list)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def validate_invoice_input(
    invoice_number: Optional[str],
    client: BillingSnapshot,
    items: Sequence[LineItemInput],
    tax_rate: Number,
) -> List[FieldError]:
    """Collect every validation problem instead of stopping at the first"""
    errors: List[FieldError] = []

    if _is_blank(invoice_number):
        errors.append(FieldError("invoice_number", "EMPTY_INVOICE_NUMBER", "Invoice number is required"))
    if _is_blank(client.name):
        errors.append(FieldError("client_name", "EMPTY_CLIENT_NAME", "Client name is required"))

    for index, item in enumerate(items):
        prefix = f"items[{index}]"
        if _is_blank(item.description):
            errors.append(FieldError(f"{prefix}.description", "EMPTY_DESCRIPTION", "Description is required"))
        if to_decimal(item.quantity) < 0:
            errors.append(FieldError(f"{prefix}.quantity", "INVALID_LINE_ITEM", "Quantity must not be negative"))
        if to_decimal(item.rate) < 0:
            errors.append(FieldError(f"{prefix}.rate", "INVALID_LINE_ITEM", "Rate must not be negative"))

    if to_decimal(tax_rate) < 0:
        errors.append(FieldError("tax_rate", "INVALID_TAX_RATE", "Tax rate must not be negative"))

    return errors


def build_invoice(
    owner_id: int,
    invoice_number: str,
    client: BillingSnapshot,
    issue_date: date,
    due_date: date,
    items: Sequence[LineItemInput],
    tax_rate: Optional[Number] = None,
    notes: Optional[str] = None,
) -> InvoiceAggregate:
    """
    Assemble a new unpaid invoice with its derived totals

    Raises:
        InvoiceValidationError: One or more fields are invalid
    """
    tax_rate = Decimal("0") if tax_rate is None else to_decimal(tax_rate)

    errors = validate_invoice_input(invoice_number, client, items, tax_rate)
    if errors:
        raise InvoiceValidationError(errors)

    totals = calculate_totals([(item.quantity, item.rate) for item in items], tax_rate)

    invoice = Invoice(
        owner_id=owner_id,
        invoice_number=invoice_number.strip(),
        client_name=client.name.strip(),
        client_email=client.email or None,
        client_address=client.address or None,
        issue_date=issue_date,
        due_date=due_date,
        status=InvoiceStatus.UNPAID,
        subtotal=totals.subtotal,
        tax_rate=tax_rate,
        tax_amount=totals.tax_amount,
        total=totals.total,
        notes=notes or None,
    )

    invoice_items = [
        InvoiceItem(
            position=position,
            description=item.description.strip(),
            quantity=to_decimal(item.quantity),
            rate=to_decimal(item.rate),
            amount=amount,
        )
        for position, (item, amount) in enumerate(zip(items, totals.line_amounts))
    ]

    return InvoiceAggregate(invoice=invoice, items=invoice_items)
