"""SetInvoiceStatus Use Case

Moves an invoice through its payment lifecycle: unpaid -> paid.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import InvoiceStatus
from .dtos import SetInvoiceStatusCommandDTO, InvoiceStatusDTO
from .errors import INVALID_STATUS, INVALID_STATUS_TRANSITION, invoice_not_found
from .ownership import load_owned_invoice

logger = logging.getLogger(__name__)


class SetInvoiceStatus:
    """
    Use Case: Change the payment status of an invoice

    Business Rules:
    1. Status must be one of: unpaid, paid
    2. paid is terminal, an invoice never goes back to unpaid
    3. Setting the current status again succeeds without changes
    4. The update is a single conditional statement, no read-modify-write

    Flow:
    1. Parse the requested status
    2. Check ownership
    3. Update where the current status allows the move
    4. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, command: SetInvoiceStatusCommandDTO) -> Result[InvoiceStatusDTO]:
        # Step 1: Parse status before touching storage
        new_status = InvoiceStatus.parse(command.status)
        if new_status is None:
            allowed = ", ".join(status.value for status in InvoiceStatus)
            return Return.err(
                Error(
                    code=INVALID_STATUS,
                    message=f"Invalid status '{command.status}'. Allowed values: {allowed}",
                    details=[{"field": "status", "code": INVALID_STATUS, "message": f"Must be one of: {allowed}"}],
                )
            )

        try:
            # Step 2: Ownership gate
            invoice = await load_owned_invoice(self.invoice_repo, command.owner_id, command.invoice_id)
            if not invoice:
                return Return.err(invoice_not_found(command.invoice_id))

            # Step 3: Conditional update
            updated = await self.invoice_repo.update_status(
                command.invoice_id,
                new_status,
                allowed_from=new_status.allowed_predecessors(),
            )

            if not updated:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code=INVALID_STATUS_TRANSITION,
                        message=f"Invoice {command.invoice_id} cannot be moved to '{new_status.value}'",
                        reason=f"allowed from: {sorted(s.value for s in new_status.allowed_predecessors())}",
                    )
                )

            # Step 4: Commit transaction
            await self.uow.commit()

            logger.info(f"Invoice {command.invoice_id} status set to {new_status.value}")
            return Return.ok(InvoiceStatusDTO(invoice_id=command.invoice_id, status=new_status.value))

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Failed to update status of invoice {command.invoice_id}")
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_STATUS_FAILED",
                    message="Failed to update invoice status",
                    reason=str(e),
                )
            )
