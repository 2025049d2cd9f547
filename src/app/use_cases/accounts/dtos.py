"""Data Transfer Objects for Account Use Cases

Issuer profile and saved clients.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class IssuerProfileDTO(BaseModel):
    """Business identity printed on the account's invoices"""

    owner_id: int
    business_name: Optional[str] = None
    business_address: Optional[str] = None
    business_phone: Optional[str] = None
    business_email: Optional[str] = None


class UpdateIssuerProfileCommandDTO(BaseModel):
    """
    Command DTO for replacing the issuer profile

    Every field is replaced; a missing field clears the stored value.
    """

    owner_id: int
    business_name: Optional[str] = None
    business_address: Optional[str] = None
    business_phone: Optional[str] = None
    business_email: Optional[str] = None


class CreateClientCommandDTO(BaseModel):
    owner_id: int
    name: str = Field(..., description="Client name (required)")
    email: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None


class ClientDTO(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime


class ListClientsResponseDTO(BaseModel):
    clients: List[ClientDTO] = Field(default_factory=list)
