"""Application entry point and composition root."""

import falcon
import falcon.asgi
import structlog

from agencyrbac import __version__
from agencyrbac.application.use_cases.permission.check_manage_member import (
    CheckManageMemberUseCase,
)
from agencyrbac.application.use_cases.permission.get_member_permissions import (
    GetMemberPermissionsUseCase,
)
from agencyrbac.application.use_cases.permission.get_my_permissions import (
    GetMyPermissionsUseCase,
)
from agencyrbac.config import Settings, get_settings
from agencyrbac.infrastructure.auth.keycloak_provider import KeycloakProvider
from agencyrbac.infrastructure.permission.permission_resolver import AgencyPermissionResolver
from agencyrbac.infrastructure.persistence.postgres.connection import create_pool
from agencyrbac.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from agencyrbac.interfaces.api.middleware.auth import AuthMiddleware
from agencyrbac.interfaces.api.middleware.cors import CORSMiddleware
from agencyrbac.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from agencyrbac.interfaces.api.resources.health import HealthResource
from agencyrbac.interfaces.api.resources.permissions import (
    MemberManageableResource,
    MemberPermissionsResource,
    MyPermissionsResource,
    PermissionCatalogResource,
)
from agencyrbac.logging_setup import configure_logging

logger = structlog.get_logger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"agency-rbac v{__version__}")


async def _log_exception(req, resp, ex, params) -> None:
    logger.exception("Unhandled error", path=req.path, method=req.method)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def add_routes(
    app: falcon.asgi.App,
    resolver: AgencyPermissionResolver,
    health_resource: HealthResource,
) -> falcon.asgi.App:
    """Wire use cases and resources onto app."""
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/permissions/catalog", PermissionCatalogResource())
    app.add_route(
        "/v1/agencies/{agency_id}/my-permissions",
        MyPermissionsResource(GetMyPermissionsUseCase(resolver)),
    )
    app.add_route(
        "/v1/agencies/{agency_id}/members/{member_id}/permissions",
        MemberPermissionsResource(GetMemberPermissionsUseCase(resolver)),
    )
    app.add_route(
        "/v1/agencies/{agency_id}/members/{member_id}/manageable",
        MemberManageableResource(CheckManageMemberUseCase(resolver)),
    )
    return app


def create_agencyrbac_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)
    resolver = AgencyPermissionResolver(
        uow_factory,
        god_mode=settings.god_mode_policy(),
        strict_permission_keys=settings.strict_permission_keys,
    )

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set; all requests are unauthenticated")

    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(settings.cors_origin_list()),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )
    app.add_error_handler(Exception, _log_exception)
    add_routes(app, resolver, HealthResource(pool))
    logger.info("Application created", version=__version__, environment=settings.environment)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_agencyrbac_app(), host="0.0.0.0", port=8000)
