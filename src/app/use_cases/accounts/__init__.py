"""Account use cases: issuer profile and saved clients"""
from .get_issuer_profile import GetIssuerProfile
from .update_issuer_profile import UpdateIssuerProfile
from .create_client import CreateClient
from .list_clients import ListClients
from .dtos import (
    IssuerProfileDTO,
    UpdateIssuerProfileCommandDTO,
    CreateClientCommandDTO,
    ClientDTO,
    ListClientsResponseDTO,
)

__all__ = [
    "GetIssuerProfile",
    "UpdateIssuerProfile",
    "CreateClient",
    "ListClients",
    "IssuerProfileDTO",
    "UpdateIssuerProfileCommandDTO",
    "CreateClientCommandDTO",
    "ClientDTO",
    "ListClientsResponseDTO",
]
