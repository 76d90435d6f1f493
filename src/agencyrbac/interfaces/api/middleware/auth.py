"""Auth middleware - resolves the bearer token into req.context.user."""

import falcon.asgi

from agencyrbac.infrastructure.auth.keycloak_provider import KeycloakProvider


class AuthMiddleware:
    """Sets req.context.user to an AuthenticatedUser, or None when unauthenticated.

    Without a configured provider every request is unauthenticated, so
    resources answer 401 rather than resolving permissions for nobody.
    """

    def __init__(self, keycloak_provider: KeycloakProvider | None = None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._keycloak:
            return
        req.context.user = await self._keycloak.authenticate(auth[7:])
