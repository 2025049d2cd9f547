"""Issuer Profile Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.issuer_profile import IssuerProfile


class IssuerProfileRepository(ABC):

    @abstractmethod
    async def get_by_owner_id(self, owner_id: int) -> Optional[IssuerProfile]:
        """
        Retrieve the profile of an account

        Args:
            owner_id: Account identifier

        Returns:
            IssuerProfile if one was saved, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, profile: IssuerProfile) -> IssuerProfile:
        """
        Create the account's profile or replace its fields

        Args:
            profile: Profile carrying owner_id and the new field values

        Returns:
            Stored IssuerProfile
        """
        pass
