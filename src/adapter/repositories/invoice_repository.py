"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from decimal import Decimal
from typing import Dict, FrozenSet, List, Optional, Tuple
from sqlalchemy import delete, update
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem
from src.domain.invoice_totals import to_decimal


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations. Writes are flushed, the
    caller's unit of work commits them.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, invoice: Invoice, items: List[InvoiceItem]) -> Invoice:
        """
        Persist a new invoice together with its items

        Args:
            invoice: Invoice entity to persist
            items: Items in invoice order

        Returns:
            Created Invoice with generated ID
        """
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)

        for item in items:
            item.invoice_id = invoice.id
        self.session.add_all(items)
        await self.session.flush()
        return invoice

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_items(self, invoice_id: int) -> List[InvoiceItem]:
        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice_id)
            .order_by(InvoiceItem.position, InvoiceItem.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_owner_id(self, owner_id: int) -> List[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.owner_id == owner_id)
            .order_by(Invoice.created_at.desc(), Invoice.id.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def delete(self, invoice_id: int) -> None:
        """
        Delete an invoice and all of its items

        Items are removed explicitly so the result does not depend on the
        database enforcing ON DELETE CASCADE.

        Args:
            invoice_id: Invoice ID
        """
        await self.session.execute(
            delete(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice_id)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(
            delete(Invoice)
            .where(Invoice.id == invoice_id)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()

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
        statement = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.status.in_(list(allowed_from)))
            .values(status=status)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(statement)
        await self.session.flush()
        return result.rowcount > 0

    async def get_status_summary(
        self, owner_id: int
    ) -> Dict[InvoiceStatus, Tuple[int, Decimal]]:
        statement = (
            select(Invoice.status, func.count(), func.sum(Invoice.total))
            .where(Invoice.owner_id == owner_id)
            .group_by(Invoice.status)
        )
        result = await self.session.execute(statement)

        summary = {}
        for status, count, total in result.all():
            summary[InvoiceStatus(status)] = (int(count), to_decimal(total or 0))
        return summary
