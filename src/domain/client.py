"""Client Domain Entity

Saved billing contact. Invoices copy its fields, they never link to it.
"""

from datetime import datetime, timezone
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import String, Text
from src.domain.base import BaseModel, IdType


class Client(BaseModel, table=True):
    __tablename__ = "clients"
    __table_args__ = (
        Index('ix_clients_owner_id', 'owner_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
    )

    owner_id: int = Field(
        description="Account that saved the client"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
    )

    email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    address: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
