"""Fixtures for API tests."""

import falcon.asgi
import pytest
from falcon.testing import TestClient

from agencyrbac.infrastructure.auth.keycloak_provider import AuthenticatedUser
from agencyrbac.interfaces.api.middleware.cors import CORSMiddleware
from agencyrbac.interfaces.api.resources.health import HealthResource
from agencyrbac.main import add_routes

ALLOWED_ORIGIN = "http://localhost:5173"


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing. Set ``user`` to None for 401s."""

    def __init__(self) -> None:
        self.user: AuthenticatedUser | None = None

    async def process_request(self, req, resp):
        req.context.user = self.user


@pytest.fixture
def auth() -> AuthBypassMiddleware:
    return AuthBypassMiddleware()


@pytest.fixture
def app(resolver, auth):
    """Falcon ASGI app over the in-memory store."""
    app = falcon.asgi.App(middleware=[CORSMiddleware([ALLOWED_ORIGIN]), auth])
    return add_routes(app, resolver, HealthResource())


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
