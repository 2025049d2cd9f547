"""Client Repository Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.client import Client


class ClientRepository(ABC):

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """
        Create a new client

        Args:
            client: Client entity to persist

        Returns:
            Created Client with generated ID
        """
        pass

    @abstractmethod
    async def get_by_owner_id(self, owner_id: int) -> List[Client]:
        """
        Retrieve the clients of an account ordered by name

        Args:
            owner_id: Account identifier

        Returns:
            List of clients
        """
        pass
