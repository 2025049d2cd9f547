"""Invoice Renderer Interface

Defines the contract for turning an invoice into a printable document.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.issuer_profile import IssuerProfile


class RenderFailed(Exception):
    """The document could not be produced; no partial output exists"""


class InvoiceRenderer(ABC):
    """
    Service interface for invoice document generation

    Implementations must be deterministic: the same invoice, items and
    profile always give the same bytes.
    """

    @abstractmethod
    def render(
        self,
        invoice: Invoice,
        items: List[InvoiceItem],
        profile: IssuerProfile,
    ) -> bytes:
        """
        Render an invoice document

        Args:
            invoice: Invoice with its derived totals
            items: Line items in invoice order
            profile: Issuer identity printed in the header

        Returns:
            Document as bytes

        Raises:
            RenderFailed: Generation could not complete
        """
        pass
