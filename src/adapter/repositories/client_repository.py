"""SQLAlchemy Client Repository Implementation"""

from typing import List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import Client


class SqlAlchemyClientRepository(ClientRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, client: Client) -> Client:
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def get_by_owner_id(self, owner_id: int) -> List[Client]:
        statement = (
            select(Client)
            .where(Client.owner_id == owner_id)
            .order_by(Client.name, Client.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
