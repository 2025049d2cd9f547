"""Invoice Repository Interface

Defines the contract for invoice persistence operations. The repository
does no authorization; callers check ownership before calling through.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, FrozenSet, List, Optional, Tuple
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem


class InvoiceRepository(ABC):
    """
    Repository interface for the Invoice aggregate

    An invoice and its items are written and deleted together.
    """

    @abstractmethod
    async def save(self, invoice: Invoice, items: List[InvoiceItem]) -> Invoice:
        """
        Persist a new invoice together with its items

        Nothing becomes visible until the unit of work commits.

        Args:
            invoice: Invoice entity to persist
            items: Items in invoice order

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_items(self, invoice_id: int) -> List[InvoiceItem]:
        """
        Retrieve the items of an invoice in their original order

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceItem
        """
        pass

    @abstractmethod
    async def get_by_owner_id(self, owner_id: int) -> List[Invoice]:
        """
        Retrieve all invoices of an account, most recently created first

        Args:
            owner_id: Account identifier

        Returns:
            List of invoices
        """
        pass

    @abstractmethod
    async def delete(self, invoice_id: int) -> None:
        """
        Delete an invoice and all of its items

        Args:
            invoice_id: Invoice ID
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        invoice_id: int,
        status: InvoiceStatus,
        allowed_from: FrozenSet[InvoiceStatus],
    ) -> bool:
        """
        Set the status in a single conditional statement

        Args:
            invoice_id: Invoice ID
            status: New status
            allowed_from: Statuses the invoice must currently have

        Returns:
            True if the row was updated, False otherwise
        """
        pass

    @abstractmethod
    async def get_status_summary(
        self, owner_id: int
    ) -> Dict[InvoiceStatus, Tuple[int, Decimal]]:
        """
        Count invoices and sum their totals per status

        Args:
            owner_id: Account identifier

        Returns:
            Mapping of status to (count, sum of totals); missing statuses
            have no entry
        """
        pass
