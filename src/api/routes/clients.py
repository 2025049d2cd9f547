"""Client API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.account_request import CreateClientRequestSchema
from src.app.use_cases.accounts import (
    CreateClient,
    ListClients,
    ClientDTO,
    CreateClientCommandDTO,
    ListClientsResponseDTO,
)
from src.adapter.repositories.client_repository import SqlAlchemyClientRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_current_owner
from src.api.error import ClientError

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.post("", response_model=ClientDTO, status_code=status.HTTP_201_CREATED)
async def create_client(
    request: CreateClientRequestSchema,
    owner_id: int = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateClient(uow, SqlAlchemyClientRepository(session))
    result = await use_case.execute(
        CreateClientCommandDTO(
            owner_id=owner_id,
            name=request.name,
            email=request.email,
            address=request.address,
            phone=request.phone,
        )
    )

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get("", response_model=ListClientsResponseDTO)
async def list_clients(
    owner_id: int = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
):
    """Saved clients ordered by name."""
    use_case = ListClients(SqlAlchemyClientRepository(session))
    result = await use_case.execute(owner_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value
