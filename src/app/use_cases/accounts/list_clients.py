"""List Clients Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.client_repository import ClientRepository
from .dtos import ClientDTO, ListClientsResponseDTO


class ListClients:

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, owner_id: int) -> Result[ListClientsResponseDTO]:
        try:
            clients = await self.client_repo.get_by_owner_id(owner_id)
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_CLIENTS_FAILED",
                    message="Failed to list clients",
                    reason=str(e),
                )
            )

        return Return.ok(
            ListClientsResponseDTO(
                clients=[
                    ClientDTO(
                        id=client.id,
                        name=client.name,
                        email=client.email,
                        address=client.address,
                        phone=client.phone,
                        created_at=client.created_at,
                    )
                    for client in clients
                ]
            )
        )
