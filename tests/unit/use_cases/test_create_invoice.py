"""Unit tests for CreateInvoice use case

Tests cover:
- Totals derived from items, status unpaid
- Field validation listing every invalid field
- Nothing persisted on validation failure
- Rollback when storage fails
"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.dtos import CreateInvoiceCommandDTO, LineItemDTO
from src.domain.invoice import InvoiceStatus


@pytest.fixture
def create_invoice_use_case(mock_uow, mock_invoice_repo):
    return CreateInvoice(uow=mock_uow, invoice_repo=mock_invoice_repo)


@pytest.fixture
def sample_command():
    return CreateInvoiceCommandDTO(
        owner_id=7,
        invoice_number="INV-001",
        client_name="Acme Corp",
        client_email="billing@acme.test",
        issue_date=date(2024, 1, 15),
        due_date=date(2024, 2, 15),
        items=[
            LineItemDTO(description="Design", quantity=Decimal("10"), rate=Decimal("50.00")),
            LineItemDTO(description="Hosting", quantity=Decimal("1"), rate=Decimal("120.00")),
        ],
        tax_rate=Decimal("8"),
    )


def _assign_id(invoice, items):
    invoice.id = 42
    return invoice


@pytest.mark.asyncio
class TestCreateInvoiceSuccess:

    async def test_create_invoice_success(
        self, create_invoice_use_case, mock_invoice_repo, mock_uow, sample_command
    ):
        """
        Given: Valid invoice input
        When: execute is called
        Then: Invoice and items are saved together and the new id is returned
        """
        # Arrange
        mock_invoice_repo.save = AsyncMock(side_effect=_assign_id)

        # Act
        result = await create_invoice_use_case.execute(sample_command)

        # Assert
        assert result.is_ok()
        assert result.value.invoice_id == 42

        mock_invoice_repo.save.assert_called_once()
        invoice, items = mock_invoice_repo.save.call_args.args
        assert invoice.owner_id == 7
        assert invoice.status == InvoiceStatus.UNPAID
        assert invoice.subtotal == Decimal("620.00")
        assert invoice.tax_amount == Decimal("49.60")
        assert invoice.total == Decimal("669.60")
        assert [item.amount for item in items] == [Decimal("500.00"), Decimal("120.00")]

        mock_uow.commit.assert_called_once()
        mock_uow.rollback.assert_not_called()

    async def test_response_serializes_invoice_id_in_camel_case(
        self, create_invoice_use_case, mock_invoice_repo, sample_command
    ):
        mock_invoice_repo.save = AsyncMock(side_effect=_assign_id)

        result = await create_invoice_use_case.execute(sample_command)

        assert result.value.model_dump(by_alias=True) == {"invoiceId": 42}

    async def test_create_invoice_without_tax_rate(
        self, create_invoice_use_case, mock_invoice_repo, sample_command
    ):
        mock_invoice_repo.save = AsyncMock(side_effect=_assign_id)
        command = sample_command.model_copy(update={"tax_rate": None})

        result = await create_invoice_use_case.execute(command)

        assert result.is_ok()
        invoice, _ = mock_invoice_repo.save.call_args.args
        assert invoice.tax_rate == Decimal("0")
        assert invoice.total == Decimal("620.00")


@pytest.mark.asyncio
class TestCreateInvoiceValidation:

    async def test_blank_required_fields_are_all_reported(
        self, create_invoice_use_case, mock_invoice_repo, mock_uow, sample_command
    ):
        """
        Given: Blank invoice number, blank client name and a negative rate
        When: execute is called
        Then: VALIDATION_ERROR lists every field and nothing is persisted
        """
        # Arrange
        mock_invoice_repo.save = AsyncMock()
        command = sample_command.model_copy(
            update={
                "invoice_number": " ",
                "client_name": "",
                "items": [LineItemDTO(description="Design", quantity=Decimal("1"), rate=Decimal("-1"))],
            }
        )

        # Act
        result = await create_invoice_use_case.execute(command)

        # Assert
        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert [d["field"] for d in result.error.details] == [
            "invoice_number",
            "client_name",
            "items[0].rate",
        ]
        mock_invoice_repo.save.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_negative_tax_rate(
        self, create_invoice_use_case, mock_invoice_repo, sample_command
    ):
        mock_invoice_repo.save = AsyncMock()
        command = sample_command.model_copy(update={"tax_rate": Decimal("-5")})

        result = await create_invoice_use_case.execute(command)

        assert result.is_err()
        assert result.error.details == [
            {"field": "tax_rate", "code": "INVALID_TAX_RATE", "message": "Tax rate must not be negative"}
        ]
        mock_invoice_repo.save.assert_not_called()


@pytest.mark.asyncio
class TestCreateInvoiceFailure:

    async def test_storage_failure_rolls_back(
        self, create_invoice_use_case, mock_invoice_repo, mock_uow, sample_command
    ):
        mock_invoice_repo.save = AsyncMock(side_effect=Exception("disk full"))

        result = await create_invoice_use_case.execute(sample_command)

        assert result.is_err()
        assert result.error.code == "CREATE_INVOICE_FAILED"
        assert result.error.reason == "disk full"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
