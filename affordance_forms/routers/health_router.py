"""Health endpoints."""

from fastapi import APIRouter, Request

from affordance_forms import __version__
from affordance_forms.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Basic health check endpoint.

    Reports whether the form template was compiled during startup.
    """
    template_loaded = getattr(request.app.state, "form_converter", None) is not None
    return HealthResponse(
        status="ok" if template_loaded else "degraded",
        version=__version__,
        template_loaded=template_loaded,
    )
