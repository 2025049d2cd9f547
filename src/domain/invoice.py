"""Invoice Domain Entity

Aggregate root of an invoice and its line items.
"""

from datetime import datetime, date, timezone
from decimal import Decimal
from enum import Enum
from typing import FrozenSet, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Date, Enum as SAEnum, Numeric, String, Text
from src.domain.base import BaseModel, IdType


class InvoiceStatus(str, Enum):
    """Invoice payment status"""
    UNPAID = "unpaid"
    PAID = "paid"

    @classmethod
    def parse(cls, value: str) -> Optional["InvoiceStatus"]:
        """Return the status for a raw value, or None if it is not one"""
        try:
            return cls(value)
        except ValueError:
            return None

    def allowed_predecessors(self) -> FrozenSet["InvoiceStatus"]:
        """Statuses an invoice may be in when it is moved to this one"""
        return _ALLOWED_PREDECESSORS[self]


# paid is terminal: nothing moves an invoice back to unpaid
_ALLOWED_PREDECESSORS = {
    InvoiceStatus.UNPAID: frozenset({InvoiceStatus.UNPAID}),
    InvoiceStatus.PAID: frozenset({InvoiceStatus.UNPAID, InvoiceStatus.PAID}),
}


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing document issued by an account to a client

    Domain Rules:
    - invoice_number is supplied by the caller and is not unique
    - client fields are a snapshot taken at creation time
    - subtotal == sum of invoice_items.amount
    - tax_amount == subtotal * tax_rate / 100
    - total == subtotal + tax_amount
    - Only status may change after creation (unpaid -> paid)
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_owner_id', 'owner_id'),
        Index('ix_invoices_owner_id_created_at', 'owner_id', 'created_at'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    owner_id: int = Field(
        description="Account that owns the invoice"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Invoice number chosen by the owner (e.g., INV-001)"
    )

    client_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Billed client name"
    )

    client_email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    client_address: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    issue_date: date = Field(
        sa_column=Column(Date, nullable=False),
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.UNPAID,
        sa_column=Column(
            SAEnum(
                InvoiceStatus,
                native_enum=False,
                length=20,
                values_callable=lambda statuses: [s.value for s in statuses],
            ),
            nullable=False,
        ),
        description="Payment status (unpaid, paid)"
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Sum of line item amounts"
    )

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Tax rate in percent"
    )

    tax_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="subtotal + tax_amount"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Invoice creation timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "owner_id": 7,
                "invoice_number": "INV-001",
                "client_name": "Acme Corp",
                "client_email": "billing@acme.test",
                "client_address": "1 Main St",
                "issue_date": "2024-01-15",
                "due_date": "2024-02-15",
                "status": "unpaid",
                "subtotal": "620.000000",
                "tax_rate": "8.000000",
                "tax_amount": "49.600000",
                "total": "669.600000",
                "notes": None,
                "created_at": "2024-01-15T10:00:00Z"
            }
        }
