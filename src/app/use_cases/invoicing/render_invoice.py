"""RenderInvoice Use Case

Produces the printable PDF document of an invoice.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.issuer_profile_repository import IssuerProfileRepository
from src.app.services.invoice_renderer import InvoiceRenderer, RenderFailed
from src.domain.issuer_profile import IssuerProfile
from .dtos import RenderedInvoiceDTO
from .errors import RENDER_FAILED, invoice_not_found
from .ownership import load_owned_invoice

logger = logging.getLogger(__name__)


class RenderInvoice:
    """
    Use Case: Export an invoice document

    Business Rules:
    1. Only the owning account can render an invoice
    2. The issuer block comes from the owner's profile (empty if none)
    3. A failed render returns no document at all

    Flow:
    1. Retrieve invoice through the ownership gate
    2. Retrieve items and issuer profile
    3. Render document
    4. Return bytes with the download file name
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        profile_repo: IssuerProfileRepository,
        renderer: InvoiceRenderer,
    ):
        self.invoice_repo = invoice_repo
        self.profile_repo = profile_repo
        self.renderer = renderer

    async def execute(self, owner_id: int, invoice_id: int) -> Result[RenderedInvoiceDTO]:
        """
        Args:
            owner_id: Requesting account
            invoice_id: Invoice ID

        Returns:
            Result[RenderedInvoiceDTO]: PDF bytes or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await load_owned_invoice(self.invoice_repo, owner_id, invoice_id)
            if not invoice:
                return Return.err(invoice_not_found(invoice_id))

            # Step 2: Items and issuer profile
            items = await self.invoice_repo.get_items(invoice_id)
            profile = await self.profile_repo.get_by_owner_id(owner_id)
            if profile is None:
                profile = IssuerProfile.empty(owner_id)

            # Step 3: Render
            content = self.renderer.render(invoice, items, profile)

            # Step 4: Build response
            return Return.ok(
                RenderedInvoiceDTO(
                    invoice_id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    filename=f"invoice-{invoice.invoice_number}.pdf",
                    content=content,
                )
            )

        except RenderFailed as e:
            logger.error(f"Rendering invoice {invoice_id} failed: {e}")
            return Return.err(
                Error(
                    code=RENDER_FAILED,
                    message="Failed to generate invoice document",
                    reason=str(e),
                )
            )
        except Exception as e:
            logger.exception(f"Failed to render invoice {invoice_id}")
            return Return.err(
                Error(
                    code="RENDER_INVOICE_FAILED",
                    message="Failed to load invoice for rendering",
                    reason=str(e),
                )
            )
