"""Dashboard API Routes"""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.invoicing import GetDashboardStats, DashboardStatsDTO
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.depends import get_session, get_current_owner
from src.api.error import ClientError

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard/stats", response_model=DashboardStatsDTO)
async def get_dashboard_stats(
    owner_id: int = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
):
    """Invoice counts and revenue (paid) / pending (unpaid) totals."""
    use_case = GetDashboardStats(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(owner_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
