"""Unit tests for SetInvoiceStatus and DeleteInvoice use cases"""

import pytest
from unittest.mock import AsyncMock

from src.app.use_cases.invoicing.set_invoice_status import SetInvoiceStatus
from src.app.use_cases.invoicing.delete_invoice import DeleteInvoice
from src.app.use_cases.invoicing.dtos import SetInvoiceStatusCommandDTO
from src.domain.invoice import InvoiceStatus


@pytest.fixture
def set_status_use_case(mock_uow, mock_invoice_repo):
    return SetInvoiceStatus(uow=mock_uow, invoice_repo=mock_invoice_repo)


def _command(status, owner_id=7, invoice_id=1):
    return SetInvoiceStatusCommandDTO(owner_id=owner_id, invoice_id=invoice_id, status=status)


@pytest.mark.asyncio
class TestSetInvoiceStatus:

    async def test_mark_paid(self, set_status_use_case, mock_invoice_repo, mock_uow, sample_invoice):
        """
        Given: Unpaid invoice of the caller
        When: status is set to paid
        Then: A conditional update allowing unpaid or paid is issued and committed
        """
        # Arrange
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_invoice_repo.update_status = AsyncMock(return_value=True)

        # Act
        result = await set_status_use_case.execute(_command("paid"))

        # Assert
        assert result.is_ok()
        assert result.value.invoice_id == 1
        assert result.value.status == "paid"
        mock_invoice_repo.update_status.assert_called_once_with(
            1,
            InvoiceStatus.PAID,
            allowed_from=frozenset({InvoiceStatus.UNPAID, InvoiceStatus.PAID}),
        )
        mock_uow.commit.assert_called_once()

    async def test_paid_to_unpaid_is_rejected(
        self, set_status_use_case, mock_invoice_repo, mock_uow, invoice_factory
    ):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=invoice_factory(status=InvoiceStatus.PAID))
        mock_invoice_repo.update_status = AsyncMock(return_value=False)

        result = await set_status_use_case.execute(_command("unpaid"))

        assert result.is_err()
        assert result.error.code == "INVALID_STATUS_TRANSITION"
        mock_invoice_repo.update_status.assert_called_once_with(
            1,
            InvoiceStatus.UNPAID,
            allowed_from=frozenset({InvoiceStatus.UNPAID}),
        )
        mock_uow.commit.assert_not_called()
        mock_uow.rollback.assert_called_once()

    @pytest.mark.parametrize("status", ["overdue", "PAID", ""])
    async def test_unknown_status_does_not_touch_storage(
        self, set_status_use_case, mock_invoice_repo, mock_uow, status
    ):
        mock_invoice_repo.get_by_id = AsyncMock()
        mock_invoice_repo.update_status = AsyncMock()

        result = await set_status_use_case.execute(_command(status))

        assert result.is_err()
        assert result.error.code == "INVALID_STATUS"
        assert result.error.details[0]["field"] == "status"
        mock_invoice_repo.get_by_id.assert_not_called()
        mock_invoice_repo.update_status.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_foreign_invoice(self, set_status_use_case, mock_invoice_repo, sample_invoice):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_invoice_repo.update_status = AsyncMock()

        result = await set_status_use_case.execute(_command("paid", owner_id=8))

        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_invoice_repo.update_status.assert_not_called()

    async def test_storage_failure(self, set_status_use_case, mock_invoice_repo, mock_uow, sample_invoice):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_invoice_repo.update_status = AsyncMock(side_effect=Exception("locked"))

        result = await set_status_use_case.execute(_command("paid"))

        assert result.error.code == "UPDATE_INVOICE_STATUS_FAILED"
        mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
class TestDeleteInvoice:

    async def test_delete_owned_invoice(self, mock_uow, mock_invoice_repo, sample_invoice):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_invoice_repo.delete = AsyncMock()

        result = await DeleteInvoice(mock_uow, mock_invoice_repo).execute(owner_id=7, invoice_id=1)

        assert result.is_ok()
        mock_invoice_repo.delete.assert_called_once_with(1)
        mock_uow.commit.assert_called_once()

    async def test_delete_foreign_invoice(self, mock_uow, mock_invoice_repo, sample_invoice):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_invoice_repo.delete = AsyncMock()

        result = await DeleteInvoice(mock_uow, mock_invoice_repo).execute(owner_id=8, invoice_id=1)

        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_invoice_repo.delete.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_delete_failure_rolls_back(self, mock_uow, mock_invoice_repo, sample_invoice):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
        mock_invoice_repo.delete = AsyncMock(side_effect=Exception("fk violation"))

        result = await DeleteInvoice(mock_uow, mock_invoice_repo).execute(owner_id=7, invoice_id=1)

        assert result.error.code == "DELETE_INVOICE_FAILED"
        mock_uow.rollback.assert_called_once()
