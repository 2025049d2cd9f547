"""Unit tests for the invoice payment lifecycle"""

import pytest

from src.domain.invoice import InvoiceStatus


class TestInvoiceStatus:

    @pytest.mark.parametrize("raw,expected", [("unpaid", InvoiceStatus.UNPAID), ("paid", InvoiceStatus.PAID)])
    def test_parse_known_values(self, raw, expected):
        assert InvoiceStatus.parse(raw) == expected

    @pytest.mark.parametrize("raw", ["PAID", "overdue", "", "draft"])
    def test_parse_unknown_values(self, raw):
        assert InvoiceStatus.parse(raw) is None

    def test_unpaid_can_become_paid(self):
        assert InvoiceStatus.UNPAID in InvoiceStatus.PAID.allowed_predecessors()

    def test_paid_never_becomes_unpaid(self):
        assert InvoiceStatus.PAID not in InvoiceStatus.UNPAID.allowed_predecessors()

    def test_setting_same_status_is_allowed(self):
        for status in InvoiceStatus:
            assert status in status.allowed_predecessors()
