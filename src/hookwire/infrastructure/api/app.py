"""FastAPI application factory.

The server is a consumer of the runtime's hooks:
- ``Server.Middleware`` fills the middleware registry before the app starts
- ``Server.Init`` runs on startup, ``Server.Shutdown`` on shutdown
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from hookwire.core.enums import Priority, RegistryMode
from hookwire.core.hooks.hook_events import HookName, group_by_category
from hookwire.core.logging import get_logger
from hookwire.domain.entities.middleware_spec import MiddlewareSpec
from hookwire.infrastructure.api.middleware import ContextMiddleware, MiddlewareRegistry
from hookwire.runtime import Runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control is yielded to the application during its lifetime.
    """
    runtime: Runtime = app.state.runtime
    settings = runtime.settings

    logger.info(
        "Starting Hookwire server",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    await runtime.hook.run(HookName.SERVER_INIT, app)
    logger.info("Server.Init hooks run")

    yield

    logger.info("Shutting down Hookwire server")
    await runtime.hook.run(HookName.SERVER_SHUTDOWN, app)
    logger.info("Server.Shutdown hooks run")


async def create_app(runtime: Runtime) -> FastAPI:
    """Create the FastAPI application for a runtime.

    Middleware is collected through the ``Server.Middleware`` hook, so this
    factory is a coroutine.

    Args:
        runtime: The process runtime. Stored as ``app.state.runtime``.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = runtime.settings

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.runtime = runtime

    middleware = MiddlewareRegistry(RegistryMode(settings.registry_mode))
    middleware.register(
        MiddlewareSpec(
            id="context",
            middleware=ContextMiddleware,
            options={"header_name": settings.request_id_header},
            order=Priority.CORE,
        )
    )
    await runtime.hook.run(HookName.SERVER_MIDDLEWARE, middleware, app)
    install_middleware(app, middleware)
    app.state.middleware = middleware

    register_health_check(app)

    return app


def install_middleware(app: FastAPI, middleware: MiddlewareRegistry) -> None:
    """Add middleware so the lowest order wraps everything else.

    Starlette makes the last added middleware the outermost, so specs are
    added from highest order to lowest.
    """
    for spec in reversed(middleware.list()):
        app.add_middleware(spec.middleware, **spec.options)
        logger.debug("Middleware installed", middleware_id=spec.id, order=spec.order)


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint with the loaded plugins and hooks."""
        runtime: Runtime = app.state.runtime
        hooks = runtime.hook.list()
        return {
            "status": "healthy" if runtime.bootstrapped else "starting",
            "service": runtime.settings.app_name,
            "version": runtime.settings.app_version,
            "plugins": [plugin.id for plugin in runtime.plugins.list()],
            "hooks": hooks,
            "hook_categories": group_by_category(hooks),
        }
