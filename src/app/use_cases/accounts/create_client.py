"""CreateClient Use Case

Saves a billing contact for later use on invoices.
"""

from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import Client
from src.domain.invoice_aggregate import FieldError
from src.app.use_cases.invoicing.errors import validation_error
from .dtos import ClientDTO, CreateClientCommandDTO


class CreateClient:

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
    ):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(self, command: CreateClientCommandDTO) -> Result[ClientDTO]:
        if not command.name or not command.name.strip():
            return Return.err(
                validation_error(
                    [FieldError("name", "EMPTY_CLIENT_NAME", "Client name is required")],
                    message="Invalid client",
                )
            )

        try:
            client = await self.client_repo.create(
                Client(
                    owner_id=command.owner_id,
                    name=command.name.strip(),
                    email=command.email or None,
                    address=command.address or None,
                    phone=command.phone or None,
                )
            )
            response = ClientDTO(
                id=client.id,
                name=client.name,
                email=client.email,
                address=client.address,
                phone=client.phone,
                created_at=client.created_at,
            )
            await self.uow.commit()
            return Return.ok(response)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_CLIENT_FAILED",
                    message="Failed to create client",
                    reason=str(e),
                )
            )
