from .invoice_repository import InvoiceRepository
from .issuer_profile_repository import IssuerProfileRepository
from .client_repository import ClientRepository

__all__ = [
    "InvoiceRepository",
    "IssuerProfileRepository",
    "ClientRepository",
]
