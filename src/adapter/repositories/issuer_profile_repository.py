"""SQLAlchemy Issuer Profile Repository Implementation"""

from datetime import datetime, timezone
from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.issuer_profile_repository import IssuerProfileRepository
from src.domain.issuer_profile import IssuerProfile


class SqlAlchemyIssuerProfileRepository(IssuerProfileRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_owner_id(self, owner_id: int) -> Optional[IssuerProfile]:
        statement = select(IssuerProfile).where(IssuerProfile.owner_id == owner_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def upsert(self, profile: IssuerProfile) -> IssuerProfile:
        existing = await self.get_by_owner_id(profile.owner_id)

        if existing is None:
            target = profile
        else:
            target = existing
            target.business_name = profile.business_name
            target.business_address = profile.business_address
            target.business_phone = profile.business_phone
            target.business_email = profile.business_email

        target.updated_at = datetime.now(timezone.utc)
        self.session.add(target)
        await self.session.flush()
        await self.session.refresh(target)
        return target
