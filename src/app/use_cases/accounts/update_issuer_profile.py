"""Update Issuer Profile Use Case"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.issuer_profile_repository import IssuerProfileRepository
from src.domain.issuer_profile import IssuerProfile
from .dtos import IssuerProfileDTO, UpdateIssuerProfileCommandDTO
from .get_issuer_profile import to_profile_dto

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class UpdateIssuerProfile:
    """
    Use Case: Replace the issuer profile of an account

    The profile is created on first update. Blank fields are stored as
    empty and left off rendered invoices.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        profile_repo: IssuerProfileRepository,
    ):
        self.uow = uow
        self.profile_repo = profile_repo

    async def execute(self, command: UpdateIssuerProfileCommandDTO) -> Result[IssuerProfileDTO]:
        try:
            profile = await self.profile_repo.upsert(
                IssuerProfile(
                    owner_id=command.owner_id,
                    business_name=_clean(command.business_name),
                    business_address=_clean(command.business_address),
                    business_phone=_clean(command.business_phone),
                    business_email=_clean(command.business_email),
                )
            )
            response = to_profile_dto(profile)
            await self.uow.commit()

            logger.info(f"Updated issuer profile of account {command.owner_id}")
            return Return.ok(response)

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Failed to update issuer profile of account {command.owner_id}")
            return Return.err(
                Error(
                    code="UPDATE_PROFILE_FAILED",
                    message="Failed to update profile",
                    reason=str(e),
                )
            )
