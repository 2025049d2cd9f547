"""
List Invoices Use Case

Retrieves the invoices of an account, most recently created first.
"""
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceSummaryDTO, ListInvoicesResponseDTO


class ListInvoices:

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, owner_id: int) -> Result[ListInvoicesResponseDTO]:
        try:
            invoices = await self.invoice_repo.get_by_owner_id(owner_id)
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )

        return Return.ok(
            ListInvoicesResponseDTO(
                invoices=[
                    InvoiceSummaryDTO(
                        id=invoice.id,
                        invoice_number=invoice.invoice_number,
                        client_name=invoice.client_name,
                        issue_date=invoice.issue_date,
                        due_date=invoice.due_date,
                        total=invoice.total,
                        status=invoice.status.value,
                        created_at=invoice.created_at,
                    )
                    for invoice in invoices
                ]
            )
        )
