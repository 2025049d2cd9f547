"""Invoice Item Domain Entity

A single line item within an invoice.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, IdType


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Line item owned by an invoice

    Domain Rules:
    - Each item belongs to exactly one invoice and is deleted with it
    - amount = quantity * rate
    - position keeps the order the items were supplied in
    - Never created, updated or deleted on its own
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
    )

    invoice_id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    position: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="0-based position of the item on the invoice"
    )

    description: str = Field(
        sa_column=Column(String(500), nullable=False),
    )

    quantity: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
    )

    rate: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Price per unit"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="quantity * rate"
    )
