"""Unit tests for KeycloakProvider token resolution."""

from unittest.mock import MagicMock, patch

import pytest

from pageaccess.application.ports import Identity
from pageaccess.infrastructure.auth.keycloak_provider import KeycloakProvider


@pytest.fixture
def keycloak_client():
    with patch("pageaccess.infrastructure.auth.keycloak_provider.KeycloakOpenID") as cls:
        client = MagicMock()
        cls.return_value = client
        yield client


@pytest.fixture
def provider(keycloak_client) -> KeycloakProvider:
    return KeycloakProvider(
        server_url="http://keycloak:8080",
        realm="affiliates",
        client_id="pageaccess-api",
        client_secret="secret",
    )


def test_active_token_resolves(provider, keycloak_client) -> None:
    keycloak_client.introspect.return_value = {
        "active": True,
        "sub": "0b5ad7a4-5c0e-4d55-9d0b-0f8c0a1e2f3a",
        "email": "admin@example.com",
        "preferred_username": "admin",
        "realm_access": {"roles": ["admin"]},
    }
    identity = provider.resolve("token")
    assert identity == Identity(
        user_id="0b5ad7a4-5c0e-4d55-9d0b-0f8c0a1e2f3a",
        email="admin@example.com",
        username="admin",
    )
    keycloak_client.introspect.assert_called_once_with("token")


def test_decode_token_keeps_realm_roles(provider, keycloak_client) -> None:
    keycloak_client.introspect.return_value = {
        "active": True,
        "sub": "abc",
        "realm_access": {"roles": ["admin", "offline_access"]},
    }
    user = provider.decode_token("token")
    assert user.realm_roles == ["admin", "offline_access"]


@pytest.mark.parametrize(
    "token_info",
    [{"active": False}, {"active": True}, {"active": True, "sub": ""}],
)
def test_inactive_or_subjectless_token(provider, keycloak_client, token_info) -> None:
    keycloak_client.introspect.return_value = token_info
    assert provider.resolve("token") is None


def test_introspection_failure(provider, keycloak_client) -> None:
    keycloak_client.introspect.side_effect = RuntimeError("keycloak down")
    assert provider.resolve("token") is None
