"""Invoice arithmetic

Line amounts, subtotal, tax and total are computed with Decimal and held at
the storage precision of six decimal places. Each figure is derived from the
already-quantized figures before it, so stored values satisfy
subtotal == sum(amounts) exactly. Rounding to cents happens only when a value
is formatted.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence, Tuple, Union

Number = Union[Decimal, int, float, str]

HUNDRED = Decimal("100")
CENT = Decimal("0.01")
STORAGE_QUANTUM = Decimal("0.000001")


class InvalidLineItem(ValueError):
    """Quantity or rate of a line item is negative"""


class InvalidTaxRate(ValueError):
    """Tax rate is negative"""


@dataclass(frozen=True)
class InvoiceTotals:
    line_amounts: List[Decimal]
    subtotal: Decimal
    tax_amount: Decimal
    total: Decimal


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal without picking up float noise"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_amount(value: Decimal) -> Decimal:
    """Round to the six decimal places the store keeps"""
    return value.quantize(STORAGE_QUANTUM, rounding=ROUND_HALF_UP)


def calculate_line_amount(quantity: Number, rate: Number) -> Decimal:
    quantity = to_decimal(quantity)
    rate = to_decimal(rate)
    if quantity < 0:
        raise InvalidLineItem(f"quantity must not be negative, got {quantity}")
    if rate < 0:
        raise InvalidLineItem(f"rate must not be negative, got {rate}")
    return quantize_amount(quantity * rate)


def calculate_tax(subtotal: Decimal, tax_rate: Number) -> Decimal:
    tax_rate = to_decimal(tax_rate)
    if tax_rate < 0:
        raise InvalidTaxRate(f"tax rate must not be negative, got {tax_rate}")
    return quantize_amount(subtotal * tax_rate / HUNDRED)


def calculate_totals(
    lines: Sequence[Tuple[Number, Number]], tax_rate: Number = 0
) -> InvoiceTotals:
    """
    Compute derived invoice figures

    Args:
        lines: (quantity, rate) pairs in invoice order
        tax_rate: Tax rate in percent

    Returns:
        InvoiceTotals with one amount per line

    Raises:
        InvalidLineItem: A quantity or rate is negative
        InvalidTaxRate: tax_rate is negative
    """
    line_amounts = [calculate_line_amount(quantity, rate) for quantity, rate in lines]
    subtotal = sum(line_amounts, Decimal("0"))
    tax_amount = calculate_tax(subtotal, tax_rate)
    return InvoiceTotals(
        line_amounts=line_amounts,
        subtotal=subtotal,
        tax_amount=tax_amount,
        total=subtotal + tax_amount,
    )


def format_money(value: Number, prefix: str = "$") -> str:
    """Format an amount for display, e.g. $669.60"""
    rounded = to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    return f"{prefix}{rounded:.2f}"


def format_number(value: Number) -> str:
    """Plain numeric string without trailing zeros, e.g. 10, 1.5, 8.25"""
    normalized = to_decimal(value).normalize()
    text = format(normalized, "f")
    if text in ("-0", ""):
        return "0"
    return text
