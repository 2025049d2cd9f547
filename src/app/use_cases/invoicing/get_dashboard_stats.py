"""Get Dashboard Stats Use Case

Summarises an account's invoices by payment status.
"""

from decimal import Decimal, ROUND_HALF_UP
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import InvoiceStatus
from src.domain.invoice_totals import CENT
from .dtos import DashboardStatsDTO


class GetDashboardStats:
    """
    Read-only operation returning invoice counts and the sum of totals for
    paid (revenue) and unpaid (pending) invoices.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, owner_id: int) -> Result[DashboardStatsDTO]:
        try:
            summary = await self.invoice_repo.get_status_summary(owner_id)
        except Exception as e:
            return Return.err(
                Error(
                    code="DASHBOARD_STATS_FAILED",
                    message="Failed to load dashboard statistics",
                    reason=str(e),
                )
            )

        paid_count, paid_total = summary.get(InvoiceStatus.PAID, (0, Decimal("0")))
        unpaid_count, unpaid_total = summary.get(InvoiceStatus.UNPAID, (0, Decimal("0")))

        return Return.ok(
            DashboardStatsDTO(
                total_invoices=sum(count for count, _ in summary.values()),
                paid_invoices=paid_count,
                unpaid_invoices=unpaid_count,
                total_revenue=paid_total.quantize(CENT, rounding=ROUND_HALF_UP),
                pending_revenue=unpaid_total.quantize(CENT, rounding=ROUND_HALF_UP),
            )
        )
