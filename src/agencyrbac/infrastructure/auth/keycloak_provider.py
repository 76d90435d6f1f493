"""Keycloak OIDC provider - turns bearer tokens into authenticated users."""

from dataclasses import dataclass
from uuid import UUID

import structlog
from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    """User identity from an active token. ``user_id`` is the token subject."""

    user_id: UUID
    email: str | None


class KeycloakProvider:
    """Validates access tokens by introspection against Keycloak."""

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

    async def authenticate(self, token: str) -> AuthenticatedUser | None:
        """Introspect token; None when inactive, malformed or Keycloak is unreachable."""
        try:
            token_info = await self._keycloak.a_introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed", error=str(e))
            return None
        return user_from_claims(token_info)


def user_from_claims(claims: dict) -> AuthenticatedUser | None:
    """Build user from introspection claims; subjects must be UUIDs."""
    if not claims.get("active"):
        return None
    try:
        user_id = UUID(str(claims.get("sub", "")))
    except ValueError:
        logger.warning("Token subject is not a UUID", sub=claims.get("sub"))
        return None
    email = claims.get("email")
    return AuthenticatedUser(user_id=user_id, email=email.strip().lower() if email else None)
