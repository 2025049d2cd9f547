"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class LineItemDTO(BaseModel):
    """Raw line item as supplied by the caller"""

    description: str = Field(..., description="What is being billed")
    quantity: Decimal = Field(..., description="Quantity (must be >= 0)")
    rate: Decimal = Field(..., description="Price per unit (must be >= 0)")


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Derived figures (subtotal, tax amount, total) are not accepted here;
    they are always computed from the items.
    """

    owner_id: int = Field(..., description="Account creating the invoice")
    invoice_number: str = Field(..., description="Invoice number chosen by the owner")
    client_name: str = Field(..., description="Billed client name")
    client_email: Optional[str] = Field(default=None)
    client_address: Optional[str] = Field(default=None)
    issue_date: date = Field(...)
    due_date: date = Field(...)
    items: List[LineItemDTO] = Field(default_factory=list)
    tax_rate: Optional[Decimal] = Field(default=None, description="Tax rate in percent (default 0)")
    notes: Optional[str] = Field(default=None)

    class Config:
        json_schema_extra = {
            "example": {
                "owner_id": 7,
                "invoice_number": "INV-001",
                "client_name": "Acme Corp",
                "client_email": "billing@acme.test",
                "issue_date": "2024-01-15",
                "due_date": "2024-02-15",
                "items": [
                    {"description": "Design", "quantity": "10", "rate": "50.00"},
                    {"description": "Hosting", "quantity": "1", "rate": "120.00"},
                ],
                "tax_rate": "8",
            }
        }


class InvoiceCreatedDTO(BaseModel):
    invoice_id: int = Field(..., serialization_alias="invoiceId")


class InvoiceItemDTO(BaseModel):
    id: int
    description: str
    quantity: Decimal
    rate: Decimal
    amount: Decimal


class InvoiceSummaryDTO(BaseModel):
    """Invoice without its line items, used in listings"""

    id: int
    invoice_number: str
    client_name: str
    issue_date: date
    due_date: date
    total: Decimal
    status: str
    created_at: datetime


class InvoiceDetailDTO(BaseModel):
    """Invoice with totals, status and ordered line items"""

    id: int
    invoice_number: str
    client_name: str
    client_email: Optional[str] = None
    client_address: Optional[str] = None
    issue_date: date
    due_date: date
    status: str
    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total: Decimal
    notes: Optional[str] = None
    created_at: datetime
    items: List[InvoiceItemDTO] = Field(default_factory=list)


class ListInvoicesResponseDTO(BaseModel):
    invoices: List[InvoiceSummaryDTO] = Field(default_factory=list)


class SetInvoiceStatusCommandDTO(BaseModel):
    owner_id: int
    invoice_id: int
    status: str = Field(..., description="New status: unpaid or paid")


class InvoiceStatusDTO(BaseModel):
    invoice_id: int
    status: str


class RenderedInvoiceDTO(BaseModel):
    """Rendered invoice document ready to be downloaded"""

    invoice_id: int
    invoice_number: str
    filename: str
    media_type: str = "application/pdf"
    content: bytes


class DashboardStatsDTO(BaseModel):
    """Invoice counts and totals per payment status"""

    total_invoices: int = 0
    paid_invoices: int = 0
    unpaid_invoices: int = 0
    total_revenue: Decimal = Field(default=Decimal("0.00"), description="Sum of paid invoice totals")
    pending_revenue: Decimal = Field(default=Decimal("0.00"), description="Sum of unpaid invoice totals")

    class Config:
        json_schema_extra = {
            "example": {
                "total_invoices": 3,
                "paid_invoices": 1,
                "unpaid_invoices": 2,
                "total_revenue": "669.60",
                "pending_revenue": "1200.00",
            }
        }
