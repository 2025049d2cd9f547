"""Issuer Profile API Routes"""

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.account_request import UpdateProfileRequestSchema
from src.app.use_cases.accounts import (
    GetIssuerProfile,
    UpdateIssuerProfile,
    IssuerProfileDTO,
    UpdateIssuerProfileCommandDTO,
)
from src.adapter.repositories.issuer_profile_repository import SqlAlchemyIssuerProfileRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_current_owner
from src.api.error import ClientError

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=IssuerProfileDTO)
async def get_profile(
    owner_id: int = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
):
    """Business identity shown on the caller's invoices."""
    use_case = GetIssuerProfile(SqlAlchemyIssuerProfileRepository(session))
    result = await use_case.execute(owner_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.patch("", response_model=IssuerProfileDTO)
async def update_profile(
    request: UpdateProfileRequestSchema,
    owner_id: int = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
):
    """Replace the business name, address, phone and email."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdateIssuerProfile(uow, SqlAlchemyIssuerProfileRepository(session))
    result = await use_case.execute(
        UpdateIssuerProfileCommandDTO(
            owner_id=owner_id,
            business_name=request.business_name,
            business_address=request.business_address,
            business_phone=request.business_phone,
            business_email=request.business_email,
        )
    )

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value
