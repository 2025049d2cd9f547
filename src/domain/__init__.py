from .base import BaseModel
from .invoice import Invoice, InvoiceStatus
from .invoice_item import InvoiceItem
from .issuer_profile import IssuerProfile
from .client import Client

__all__ = [
    "BaseModel",
    "Invoice",
    "InvoiceStatus",
    "InvoiceItem",
    "IssuerProfile",
    "Client",
]
