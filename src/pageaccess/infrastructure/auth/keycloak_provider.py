"""Keycloak OIDC provider - resolves bearer tokens by introspection."""

from dataclasses import dataclass

import structlog
from keycloak import KeycloakOpenID

from pageaccess.application.ports import Identity

logger = structlog.get_logger()


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token."""

    user_id: str
    email: str | None
    username: str | None
    realm_roles: list[str]


class KeycloakProvider:
    """Keycloak OIDC - validates tokens and extracts user info."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None if inactive or unverifiable."""
        try:
            token_info = self._keycloak.introspect(token)
        except Exception as e:
            logger.warning("token_introspection_failed", error=str(e))
            return None
        if not token_info.get("active") or not token_info.get("sub"):
            return None
        return OIDCUser(
            user_id=token_info["sub"],
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
            realm_roles=token_info.get("realm_access", {}).get("roles", []),
        )

    def resolve(self, token: str) -> Identity | None:
        """IdentityProvider port."""
        user = self.decode_token(token)
        if not user:
            return None
        return Identity(user_id=user.user_id, email=user.email, username=user.username)
