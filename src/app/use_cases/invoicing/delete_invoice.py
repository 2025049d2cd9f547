"""DeleteInvoice Use Case

Removes an invoice and all of its line items.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from .errors import invoice_not_found
from .ownership import load_owned_invoice

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete an invoice

    Business Rules:
    1. Only the owning account can delete an invoice
    2. Items are removed in the same transaction as the invoice
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, owner_id: int, invoice_id: int) -> Result[None]:
        """
        Args:
            owner_id: Requesting account
            invoice_id: Invoice ID

        Returns:
            Result[None]: Success or INVOICE_NOT_FOUND / DELETE_INVOICE_FAILED
        """
        try:
            invoice = await load_owned_invoice(self.invoice_repo, owner_id, invoice_id)
            if not invoice:
                return Return.err(invoice_not_found(invoice_id))

            await self.invoice_repo.delete(invoice_id)
            await self.uow.commit()

            logger.info(f"Deleted invoice {invoice_id} of account {owner_id}")
            return Return.ok(None)

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Failed to delete invoice {invoice_id}")
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
