"""HTML form rendering for resource affordances."""

import threading
from typing import Any, BinaryIO

from jinja2 import Template, TemplateError

from affordance_forms.exceptions import FormWriteException, UnsupportedOperationException
from affordance_forms.logging_config import get_logger, log_with_context
from affordance_forms.models.hypermedia import TEXT_HTML, RepresentationModel
from affordance_forms.services.affordance_service import build_form_view, extract_html_model
from affordance_forms.views.template_loader import TemplateLoader

logger = get_logger(__name__)


def _is_html(media_type: str | None) -> bool:
    """Exact text/html match; parameters such as charset do not match."""
    if media_type is None:
        return False
    return media_type.strip().lower() == TEXT_HTML


class HtmlFormConverter:
    """Renders the primary affordance of a resource as an HTML form.

    Write-only: HTML is never parsed back into a resource. The compiled
    template is shared by all calls; every call builds its own view and
    buffer, so concurrent use needs no locking.
    """

    supported_media_types: tuple[str, ...] = (TEXT_HTML,)

    def __init__(self, template: Template):
        self.template = template

    @classmethod
    def from_loader(cls, loader: TemplateLoader | None = None) -> "HtmlFormConverter":
        """Compile the form template and wrap it in a converter.

        Raises:
            TemplateLoadException: If the template cannot be loaded
        """
        return cls((loader or TemplateLoader()).load())

    def can_read(self, cls: type, media_type: str | None) -> bool:
        return False

    def can_write(self, cls: Any, media_type: str | None) -> bool:
        """Whether instances of cls can be rendered for media_type."""
        return isinstance(cls, type) and issubclass(cls, RepresentationModel) and _is_html(media_type)

    def render(self, resource: RepresentationModel) -> bytes:
        """Render the resource's primary affordance as UTF-8 HTML.

        Raises:
            FormWriteException: If the resource has no self link, no affordance
                or no HTML affordance model, or the template fails to render
        """
        try:
            view = build_form_view(extract_html_model(resource))
        except FormWriteException as e:
            log_with_context(
                logger,
                "warning",
                "Cannot render affordance form",
                error=e.message,
                error_code=e.code.value,
                event_type="form_write_error",
            )
            raise

        try:
            html = self.template.render(
                target=view.target,
                properties=view.properties,
                method=view.method,
                name=view.name,
            )
        except TemplateError as e:
            log_with_context(
                logger,
                "warning",
                "Form template failed to render",
                affordance=view.name,
                error=str(e),
                error_type=type(e).__name__,
                event_type="form_write_error",
            )
            raise FormWriteException(
                f"Cannot render form for affordance '{view.name}': {e}",
                details={"affordance": view.name},
            ) from e

        log_with_context(
            logger,
            "debug",
            "Rendered affordance form",
            affordance=view.name,
            target=view.target,
            fields=len(view.properties),
            event_type="form_rendered",
        )
        return html.encode("utf-8")

    def write(self, resource: RepresentationModel, media_type: str | None, output: BinaryIO) -> None:
        """Render the resource and write the bytes to output.

        The form is rendered fully before writing, so a failure leaves output untouched.
        """
        output.write(self.render(resource))

    def read(self, cls: type, stream: BinaryIO | None = None) -> RepresentationModel:
        """Reading HTML is not supported; always raises without touching stream."""
        raise UnsupportedOperationException()

    def close(self) -> None:
        """Release the converter at shutdown.

        The template source is closed right after loading, so there is nothing
        left to release here.
        """
        log_with_context(logger, "info", "HTML form converter closed", event_type="converter_closed")


_default_converter: HtmlFormConverter | None = None
_default_converter_lock = threading.Lock()


def get_default_converter() -> HtmlFormConverter:
    """Lazily build a converter from the bundled template."""
    global _default_converter
    with _default_converter_lock:
        if _default_converter is None:
            _default_converter = HtmlFormConverter.from_loader()
    return _default_converter


def render_affordance_form(resource: RepresentationModel, converter: HtmlFormConverter | None = None) -> bytes:
    """Render the resource's primary affordance as UTF-8 HTML form bytes.

    Args:
        resource: Resource with a self link carrying at least one affordance
        converter: Converter to use (defaults to one built from the bundled template)

    Returns:
        Rendered HTML encoded as UTF-8

    Raises:
        FormWriteException: If no affordance can be selected
    """
    return (converter or get_default_converter()).render(resource)
