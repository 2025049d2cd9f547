"""Request schemas for Invoice API

Pydantic models for incoming HTTP requests. Field names are accepted in
camelCase (invoiceNumber) or snake_case (invoice_number). Business rules
(required text, non-negative numbers) are checked by the use cases so that
every offending field is reported together.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class LineItemRequestSchema(BaseModel):
    description: str = Field(default="", description="What is being billed")
    quantity: Decimal = Field(..., description="Quantity (must be >= 0)")
    rate: Decimal = Field(..., description="Price per unit (must be >= 0)")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CreateInvoiceRequestSchema(BaseModel):
    """
    Request schema for creating an invoice

    Used for POST /invoices endpoint.
    """

    invoice_number: str = Field(default="", description="Invoice number (required, non-empty)")
    client_name: str = Field(default="", description="Client name (required, non-empty)")
    client_email: Optional[str] = Field(default=None)
    client_address: Optional[str] = Field(default=None)
    issue_date: date = Field(...)
    due_date: date = Field(...)
    items: List[LineItemRequestSchema] = Field(default_factory=list)
    tax_rate: Optional[Decimal] = Field(default=None, description="Tax rate in percent (default 0)")
    notes: Optional[str] = Field(default=None)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "invoiceNumber": "INV-001",
                "clientName": "Acme Corp",
                "clientEmail": "billing@acme.test",
                "clientAddress": "1 Main St, Springfield",
                "issueDate": "2024-01-15",
                "dueDate": "2024-02-15",
                "items": [
                    {"description": "Design", "quantity": 10, "rate": 50.00},
                    {"description": "Hosting", "quantity": 1, "rate": 120.00}
                ],
                "taxRate": 8,
                "notes": "Payment within 30 days"
            }
        }


class UpdateStatusRequestSchema(BaseModel):
    """
    Request schema for PATCH /invoices/{invoice_id}/status

    Left as a plain string so that unknown values reach the use case and
    come back as INVALID_STATUS.
    """

    status: str = Field(..., description="unpaid or paid")

    class Config:
        json_schema_extra = {"example": {"status": "paid"}}
