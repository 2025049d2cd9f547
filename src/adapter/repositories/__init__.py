from .invoice_repository import SqlAlchemyInvoiceRepository
from .issuer_profile_repository import SqlAlchemyIssuerProfileRepository
from .client_repository import SqlAlchemyClientRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyIssuerProfileRepository",
    "SqlAlchemyClientRepository",
]
