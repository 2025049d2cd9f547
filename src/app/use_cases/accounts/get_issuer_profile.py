"""Get Issuer Profile Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.issuer_profile_repository import IssuerProfileRepository
from src.domain.issuer_profile import IssuerProfile
from .dtos import IssuerProfileDTO


def to_profile_dto(profile: IssuerProfile) -> IssuerProfileDTO:
    return IssuerProfileDTO(
        owner_id=profile.owner_id,
        business_name=profile.business_name,
        business_address=profile.business_address,
        business_phone=profile.business_phone,
        business_email=profile.business_email,
    )


class GetIssuerProfile:
    """
    Returns the account's issuer profile, or an empty one if the account
    never saved it.
    """

    def __init__(self, profile_repo: IssuerProfileRepository):
        self.profile_repo = profile_repo

    async def execute(self, owner_id: int) -> Result[IssuerProfileDTO]:
        try:
            profile = await self.profile_repo.get_by_owner_id(owner_id)
        except Exception as e:
            return Return.err(
                Error(
                    code="GET_PROFILE_FAILED",
                    message="Failed to load profile",
                    reason=str(e),
                )
            )

        if profile is None:
            profile = IssuerProfile.empty(owner_id)
        return Return.ok(to_profile_dto(profile))
