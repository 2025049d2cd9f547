"""Unit tests for GetInvoice, ListInvoices and GetDashboardStats"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock

from src.app.use_cases.invoicing.get_invoice import GetInvoice
from src.app.use_cases.invoicing.list_invoices import ListInvoices
from src.app.use_cases.invoicing.get_dashboard_stats import GetDashboardStats
from src.domain.invoice import InvoiceStatus


@pytest.mark.asyncio
class TestGetInvoice:

    async def test_returns_invoice_with_items(self, mock_invoice_repo, sample_invoice, sample_items):
        # Arrange
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_invoice_repo.get_items = AsyncMock(return_value=sample_items)

        # Act
        result = await GetInvoice(mock_invoice_repo).execute(owner_id=7, invoice_id=1)

        # Assert
        assert result.is_ok()
        detail = result.value
        assert detail.invoice_number == "INV-001"
        assert detail.status == "unpaid"
        assert detail.total == Decimal("669.60")
        assert [item.description for item in detail.items] == ["Design", "Hosting"]

    async def test_missing_invoice(self, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetInvoice(mock_invoice_repo).execute(owner_id=7, invoice_id=999)

        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"
        assert result.error.message == "Invoice with ID 999 not found"

    async def test_foreign_invoice_looks_missing(self, mock_invoice_repo, sample_invoice):
        """
        Given: Invoice owned by account 7
        When: Account 8 asks for it
        Then: Same error as for a missing invoice, items are never read
        """
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_invoice_repo.get_items = AsyncMock()

        result = await GetInvoice(mock_invoice_repo).execute(owner_id=8, invoice_id=1)

        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"
        assert result.error.message == "Invoice with ID 1 not found"
        mock_invoice_repo.get_items.assert_not_called()

    async def test_storage_failure(self, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(side_effect=Exception("connection lost"))

        result = await GetInvoice(mock_invoice_repo).execute(owner_id=7, invoice_id=1)

        assert result.is_err()
        assert result.error.code == "GET_INVOICE_FAILED"


@pytest.mark.asyncio
class TestListInvoices:

    async def test_returns_summaries_in_repository_order(self, mock_invoice_repo, invoice_factory):
        older = invoice_factory()
        newer = invoice_factory(id=2, invoice_number="INV-002")
        mock_invoice_repo.get_by_owner_id = AsyncMock(return_value=[newer, older])

        result = await ListInvoices(mock_invoice_repo).execute(owner_id=7)

        assert result.is_ok()
        assert [i.invoice_number for i in result.value.invoices] == ["INV-002", "INV-001"]
        mock_invoice_repo.get_by_owner_id.assert_called_once_with(7)

    async def test_empty_list(self, mock_invoice_repo):
        mock_invoice_repo.get_by_owner_id = AsyncMock(return_value=[])

        result = await ListInvoices(mock_invoice_repo).execute(owner_id=7)

        assert result.is_ok()
        assert result.value.invoices == []

    async def test_storage_failure(self, mock_invoice_repo):
        mock_invoice_repo.get_by_owner_id = AsyncMock(side_effect=Exception("boom"))

        result = await ListInvoices(mock_invoice_repo).execute(owner_id=7)

        assert result.error.code == "LIST_INVOICES_FAILED"


@pytest.mark.asyncio
class TestGetDashboardStats:

    async def test_counts_and_revenue(self, mock_invoice_repo):
        mock_invoice_repo.get_status_summary = AsyncMock(
            return_value={
                InvoiceStatus.PAID: (1, Decimal("669.600000")),
                InvoiceStatus.UNPAID: (2, Decimal("1200.004")),
            }
        )

        result = await GetDashboardStats(mock_invoice_repo).execute(owner_id=7)

        assert result.is_ok()
        stats = result.value
        assert stats.total_invoices == 3
        assert stats.paid_invoices == 1
        assert stats.unpaid_invoices == 2
        assert stats.total_revenue == Decimal("669.60")
        assert stats.pending_revenue == Decimal("1200.00")

    async def test_account_without_invoices(self, mock_invoice_repo):
        mock_invoice_repo.get_status_summary = AsyncMock(return_value={})

        result = await GetDashboardStats(mock_invoice_repo).execute(owner_id=7)

        stats = result.value
        assert stats.total_invoices == 0
        assert stats.total_revenue == Decimal("0.00")
        assert stats.pending_revenue == Decimal("0.00")

    async def test_storage_failure(self, mock_invoice_repo):
        mock_invoice_repo.get_status_summary = AsyncMock(side_effect=Exception("boom"))

        result = await GetDashboardStats(mock_invoice_repo).execute(owner_id=7)

        assert result.error.code == "DASHBOARD_STATS_FAILED"
