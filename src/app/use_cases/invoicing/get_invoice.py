"""GetInvoice Use Case

Retrieves one invoice with its line items.
"""

from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceDetailDTO, InvoiceItemDTO
from .errors import invoice_not_found
from .ownership import load_owned_invoice


class GetInvoice:
    """
    Use Case: View an invoice

    Only the owning account can see an invoice; for anyone else it does
    not exist.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, owner_id: int, invoice_id: int) -> Result[InvoiceDetailDTO]:
        """
        Args:
            owner_id: Requesting account
            invoice_id: Invoice ID

        Returns:
            Result[InvoiceDetailDTO]: Invoice with items, or INVOICE_NOT_FOUND
        """
        try:
            invoice = await load_owned_invoice(self.invoice_repo, owner_id, invoice_id)
            if not invoice:
                return Return.err(invoice_not_found(invoice_id))

            items = await self.invoice_repo.get_items(invoice_id)

            return Return.ok(
                InvoiceDetailDTO(
                    id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    client_name=invoice.client_name,
                    client_email=invoice.client_email,
                    client_address=invoice.client_address,
                    issue_date=invoice.issue_date,
                    due_date=invoice.due_date,
                    status=invoice.status.value,
                    subtotal=invoice.subtotal,
                    tax_rate=invoice.tax_rate,
                    tax_amount=invoice.tax_amount,
                    total=invoice.total,
                    notes=invoice.notes,
                    created_at=invoice.created_at,
                    items=[
                        InvoiceItemDTO(
                            id=item.id,
                            description=item.description,
                            quantity=item.quantity,
                            rate=item.rate,
                            amount=item.amount,
                        )
                        for item in items
                    ],
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_INVOICE_FAILED",
                    message="Failed to load invoice",
                    reason=str(e),
                )
            )
