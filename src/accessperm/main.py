"""Application entry point and composition root."""

import falcon.asgi

from accessperm import __version__
from accessperm.application.services.access_permission_service import AccessPermissionService
from accessperm.config import Settings, get_settings
from accessperm.infrastructure.auth.keycloak_provider import KeycloakProvider
from accessperm.infrastructure.authorization.authorization_service import (
    AccessPermissionAuthorizationService,
)
from accessperm.infrastructure.persistence.postgres.connection import create_pool
from accessperm.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from accessperm.interfaces.api.errors import register_error_handlers
from accessperm.interfaces.api.middleware.auth import AuthMiddleware
from accessperm.interfaces.api.middleware.cors import CORSMiddleware
from accessperm.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from accessperm.interfaces.api.resources.access_permissions import (
    AccessInfoPermissionsResource,
    AccessPermissionResource,
    AccessPermissionsResource,
)
from accessperm.interfaces.api.resources.health import HealthResource
from accessperm.logging import configure_logging, get_logger

logger = get_logger(__name__)


def add_routes(app: falcon.asgi.App, service: AccessPermissionService, health: HealthResource) -> None:
    """Mount API routes on app."""
    access_permissions = AccessPermissionsResource(service)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/scopes/{scope_id}/access-permissions", access_permissions)
    app.add_route(
        "/v1/scopes/{scope_id}/access-permissions/_count",
        access_permissions,
        suffix="count",
    )
    app.add_route(
        "/v1/scopes/{scope_id}/access-permissions/{access_permission_id}",
        AccessPermissionResource(service),
    )
    app.add_route(
        "/v1/scopes/{scope_id}/access-infos/{access_info_id}/permissions",
        AccessInfoPermissionsResource(service),
    )


def create_accessperm_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_renderer, settings.environment)

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

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
        logger.warning("keycloak.disabled", reason="no client secret configured")

    authorization_service = AccessPermissionAuthorizationService(uow_factory)
    service = AccessPermissionService(
        unit_of_work_factory=uow_factory,
        authorization_service=authorization_service,
    )

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )
    register_error_handlers(app)
    add_routes(app, service, HealthResource(pool))

    logger.info("app.created", version=__version__, environment=settings.environment)
    return app


def main() -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_accessperm_app(), host="0.0.0.0", port=8000, log_config=None)
