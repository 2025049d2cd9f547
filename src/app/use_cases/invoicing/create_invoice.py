"""CreateInvoice Use Case

Builds an invoice from raw line items and persists it with its items as
one unit.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice_aggregate import (
    BillingSnapshot,
    InvoiceValidationError,
    LineItemInput,
    build_invoice,
)
from .dtos import CreateInvoiceCommandDTO, InvoiceCreatedDTO
from .errors import validation_error

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create an invoice with its line items

    Business Rules:
    1. invoice_number and client_name are required
    2. Quantities, rates and tax rate must not be negative
    3. Derived totals are computed, never taken from the caller
    4. Invoice is created with status=unpaid
    5. Invoice and items are committed together or not at all

    Flow:
    1. Validate input and compute totals (every invalid field is reported)
    2. Persist invoice and items
    3. Commit transaction
    4. Return the new invoice id
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceCreatedDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with client snapshot, dates and items

        Returns:
            Result[InvoiceCreatedDTO]: Success with the invoice id or error
        """
        # Step 1: Validate and assemble the aggregate
        try:
            aggregate = build_invoice(
                owner_id=command.owner_id,
                invoice_number=command.invoice_number,
                client=BillingSnapshot(
                    name=command.client_name,
                    email=command.client_email,
                    address=command.client_address,
                ),
                issue_date=command.issue_date,
                due_date=command.due_date,
                items=[
                    LineItemInput(
                        description=item.description,
                        quantity=item.quantity,
                        rate=item.rate,
                    )
                    for item in command.items
                ],
                tax_rate=command.tax_rate,
                notes=command.notes,
            )
        except InvoiceValidationError as e:
            return Return.err(validation_error(e.errors, message="Invalid invoice"))

        try:
            # Step 2: Persist invoice and items
            created_invoice = await self.invoice_repo.save(aggregate.invoice, aggregate.items)
            invoice_id = created_invoice.id

            # Step 3: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Created invoice {invoice_id} ({command.invoice_number}) "
                f"for account {command.owner_id} with {len(aggregate.items)} items"
            )

            # Step 4: Build response
            return Return.ok(InvoiceCreatedDTO(invoice_id=invoice_id))

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Failed to create invoice for account {command.owner_id}")
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
