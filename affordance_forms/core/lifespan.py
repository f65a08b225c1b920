"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from affordance_forms import __version__
from affordance_forms.config import get_settings
from affordance_forms.logging_config import get_logger, log_with_context
from affordance_forms.views.form_renderer import HtmlFormConverter
from affordance_forms.views.template_loader import TemplateLoader, directory_loader

logger = get_logger(__name__)


def build_template_loader() -> TemplateLoader:
    """Use the configured template directory, or the bundled template."""
    settings = get_settings()
    if settings.template_dir is not None:
        log_with_context(
            logger,
            "info",
            "Loading form template from configured directory",
            template_dir=str(settings.template_dir),
            event_type="template_override",
        )
        return TemplateLoader(directory_loader(settings.template_dir))
    return TemplateLoader()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Compile the form template at startup and release the converter at shutdown.

    A template that cannot be loaded aborts startup.
    """
    app.state.startup_time = time.time()

    log_with_context(
        logger,
        "info",
        "Starting Affordance Forms application",
        version=__version__,
        event_type="app_startup",
    )

    converter = HtmlFormConverter.from_loader(build_template_loader())
    app.state.form_converter = converter
    log_with_context(
        logger,
        "info",
        "HTML form converter initialized",
        event_type="form_converter_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Affordance Forms application",
            event_type="app_shutdown",
        )
        converter.close()
        app.state.form_converter = None
