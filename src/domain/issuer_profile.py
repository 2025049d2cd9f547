"""Issuer Profile Domain Entity

Business identity printed on an account's invoices.
"""

from datetime import datetime, timezone
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String, Text
from src.domain.base import BaseModel, IdType


class IssuerProfile(BaseModel, table=True):
    """
    Issuer Profile - One per account, edited only by that account

    Every field is optional; empty fields are left off rendered documents.
    """

    __tablename__ = "issuer_profiles"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
    )

    owner_id: int = Field(
        index=True,
        unique=True,
        description="Account the profile belongs to"
    )

    business_name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    business_address: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    business_phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
    )

    business_email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    @classmethod
    def empty(cls, owner_id: int) -> "IssuerProfile":
        """Profile used when the account has not saved one yet"""
        return cls(owner_id=owner_id)
