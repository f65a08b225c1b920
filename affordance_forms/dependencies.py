"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from affordance_forms.views.form_renderer import HtmlFormConverter


async def get_form_converter(request: Request) -> HtmlFormConverter:
    """
    Get the shared HTML form converter from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The converter compiled during application startup.

    Raises:
        RuntimeError: If the converter is not initialized.
    """
    converter: HtmlFormConverter | None = getattr(request.app.state, "form_converter", None)

    if converter is None:
        raise RuntimeError("HTML form converter not initialized.")

    return converter
