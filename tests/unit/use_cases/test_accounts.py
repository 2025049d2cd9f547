"""Unit tests for issuer profile and client use cases"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.accounts import (
    CreateClient,
    CreateClientCommandDTO,
    GetIssuerProfile,
    ListClients,
    UpdateIssuerProfile,
    UpdateIssuerProfileCommandDTO,
)
from src.domain.client import Client
from src.domain.issuer_profile import IssuerProfile


@pytest.fixture
def mock_profile_repo():
    return MagicMock()


@pytest.fixture
def mock_client_repo():
    return MagicMock()


@pytest.mark.asyncio
class TestIssuerProfile:

    async def test_get_missing_profile_is_empty(self, mock_profile_repo):
        mock_profile_repo.get_by_owner_id = AsyncMock(return_value=None)

        result = await GetIssuerProfile(mock_profile_repo).execute(owner_id=7)

        assert result.is_ok()
        assert result.value.owner_id == 7
        assert result.value.business_name is None

    async def test_get_existing_profile(self, mock_profile_repo):
        mock_profile_repo.get_by_owner_id = AsyncMock(
            return_value=IssuerProfile(owner_id=7, business_name="Studio Nine", business_phone="555")
        )

        result = await GetIssuerProfile(mock_profile_repo).execute(owner_id=7)

        assert result.value.business_name == "Studio Nine"
        assert result.value.business_phone == "555"

    async def test_update_trims_and_clears_blank_fields(self, mock_uow, mock_profile_repo):
        # Arrange
        mock_profile_repo.upsert = AsyncMock(side_effect=lambda profile: profile)
        command = UpdateIssuerProfileCommandDTO(
            owner_id=7,
            business_name="  Studio Nine ",
            business_address="   ",
            business_email="hello@studionine.test",
        )

        # Act
        result = await UpdateIssuerProfile(mock_uow, mock_profile_repo).execute(command)

        # Assert
        assert result.is_ok()
        saved = mock_profile_repo.upsert.call_args.args[0]
        assert saved.owner_id == 7
        assert saved.business_name == "Studio Nine"
        assert saved.business_address is None
        assert saved.business_phone is None
        assert saved.business_email == "hello@studionine.test"
        mock_uow.commit.assert_called_once()

    async def test_update_failure_rolls_back(self, mock_uow, mock_profile_repo):
        mock_profile_repo.upsert = AsyncMock(side_effect=Exception("unique violation"))

        result = await UpdateIssuerProfile(mock_uow, mock_profile_repo).execute(
            UpdateIssuerProfileCommandDTO(owner_id=7, business_name="X")
        )

        assert result.error.code == "UPDATE_PROFILE_FAILED"
        mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
class TestClients:

    async def test_create_client(self, mock_uow, mock_client_repo):
        def assign_id(client):
            client.id = 3
            return client

        mock_client_repo.create = AsyncMock(side_effect=assign_id)

        result = await CreateClient(mock_uow, mock_client_repo).execute(
            CreateClientCommandDTO(owner_id=7, name=" Acme Corp ", email="billing@acme.test")
        )

        assert result.is_ok()
        assert result.value.id == 3
        assert result.value.name == "Acme Corp"
        assert result.value.phone is None
        mock_uow.commit.assert_called_once()

    async def test_blank_client_name(self, mock_uow, mock_client_repo):
        mock_client_repo.create = AsyncMock()

        result = await CreateClient(mock_uow, mock_client_repo).execute(
            CreateClientCommandDTO(owner_id=7, name="  ")
        )

        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.details == [
            {"field": "name", "code": "EMPTY_CLIENT_NAME", "message": "Client name is required"}
        ]
        mock_client_repo.create.assert_not_called()

    async def test_list_clients(self, mock_client_repo):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        mock_client_repo.get_by_owner_id = AsyncMock(
            return_value=[
                Client(id=1, owner_id=7, name="Acme", created_at=created),
                Client(id=2, owner_id=7, name="Globex", created_at=created),
            ]
        )

        result = await ListClients(mock_client_repo).execute(owner_id=7)

        assert [c.name for c in result.value.clients] == ["Acme", "Globex"]

    async def test_list_clients_failure(self, mock_client_repo):
        mock_client_repo.get_by_owner_id = AsyncMock(side_effect=Exception("boom"))

        result = await ListClients(mock_client_repo).execute(owner_id=7)

        assert result.error.code == "LIST_CLIENTS_FAILED"
