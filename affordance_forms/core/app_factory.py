"""Application factory for creating and configuring the FastAPI app."""

from collections.abc import Iterable

from fastapi import APIRouter, FastAPI

from affordance_forms import __version__
from affordance_forms.core.lifespan import lifespan
from affordance_forms.middleware.error_handlers import register_error_handlers
from affordance_forms.routers import health_router


def create_app(routers: Iterable[APIRouter] = ()) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        routers: Host routers serving resources; they can return
            AffordanceFormResponse using the get_form_converter dependency

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Affordance Forms",
        description="Renders the affordances of hypermedia resources as HTML forms.",
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    register_error_handlers(app)

    app.include_router(health_router.router, tags=["health"])

    for router in routers:
        app.include_router(router)

    return app
