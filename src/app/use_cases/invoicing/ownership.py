"""Ownership gate for single-invoice operations"""

from typing import Optional
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice


async def load_owned_invoice(
    invoice_repo: InvoiceRepository, owner_id: int, invoice_id: int
) -> Optional[Invoice]:
    """
    Load an invoice only if it belongs to `owner_id`

    A missing invoice and another account's invoice both give None, so
    callers cannot tell them apart.
    """
    invoice = await invoice_repo.get_by_id(invoice_id)
    if invoice is None or invoice.owner_id != owner_id:
        return None
    return invoice
