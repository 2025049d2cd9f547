import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_invoice_repo():
    """Mock invoice repository"""
    return MagicMock()


@pytest.fixture
def invoice_factory():
    """Builds invoices of account 7 matching the Design + Hosting example"""
    def make(**overrides):
        fields = dict(
            id=1,
            owner_id=7,
            invoice_number="INV-001",
            client_name="Acme Corp",
            client_email="billing@acme.test",
            client_address="1 Main St",
            issue_date=date(2024, 1, 15),
            due_date=date(2024, 2, 15),
            status=InvoiceStatus.UNPAID,
            subtotal=Decimal("620.00"),
            tax_rate=Decimal("8"),
            tax_amount=Decimal("49.60"),
            total=Decimal("669.60"),
            notes="Net 30",
            created_at=datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc),
        )
        fields.update(overrides)
        return Invoice(**fields)

    return make


@pytest.fixture
def sample_invoice(invoice_factory):
    return invoice_factory()


@pytest.fixture
def sample_items():
    return [
        InvoiceItem(
            id=10, invoice_id=1, position=0, description="Design",
            quantity=Decimal("10"), rate=Decimal("50.00"), amount=Decimal("500.00"),
        ),
        InvoiceItem(
            id=11, invoice_id=1, position=1, description="Hosting",
            quantity=Decimal("1"), rate=Decimal("120.00"), amount=Decimal("120.00"),
        ),
    ]
