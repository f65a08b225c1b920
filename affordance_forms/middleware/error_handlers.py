"""Error responses for form rendering failures."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from affordance_forms.exceptions import AffordanceFormException, ErrorCode
from affordance_forms.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def error_body(code: str, message: str, details: dict | None = None) -> dict:
    body: dict = {"code": code, "message": message}
    if details is not None:
        body["details"] = details
    return {"error": body}


async def affordance_form_exception_handler(request: Request, exc: AffordanceFormException) -> JSONResponse:
    """Turn a missing link, affordance or template failure into its status code and error body."""
    log_with_context(
        logger,
        "warning",
        "Affordance form request failed",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        path=request.url.path,
        event_type="affordance_form_error",
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code.value, exc.message, exc.details),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log anything unexpected and answer with an opaque 500."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=True)

    return JSONResponse(
        status_code=500,
        content=error_body(ErrorCode.INTERNAL_ERROR.value, "Internal server error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AffordanceFormException, affordance_form_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
