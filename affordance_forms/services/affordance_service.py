"""Affordance selection and form view extraction."""

from dataclasses import dataclass

from affordance_forms.exceptions import AffordanceNotFoundException
from affordance_forms.logging_config import get_logger, log_with_context
from affordance_forms.models.hypermedia import SELF, TEXT_HTML, AffordanceModel, PropertyMetadata, RepresentationModel

logger = get_logger(__name__)


@dataclass(frozen=True)
class FormView:
    """Per-call view handed to the form template.

    properties is a materialized tuple in rendering order so the template
    never iterates a lazy sequence.
    """

    target: str
    properties: tuple[PropertyMetadata, ...]
    method: str = "POST"
    name: str = ""


def extract_html_model(resource: RepresentationModel) -> AffordanceModel:
    """Return the HTML model of the resource's primary affordance.

    The primary affordance is the first one declared on the self link. Any
    further affordances on that link are ignored.

    Args:
        resource: Resource carrying a self link with at least one affordance

    Returns:
        The text/html AffordanceModel of the first affordance

    Raises:
        LinkNotFoundException: If the resource has no self link
        AffordanceNotFoundException: If the self link carries no affordance
        AffordanceModelNotFoundException: If the affordance has no HTML model
    """
    link = resource.get_required_link(SELF)

    if not link.affordances:
        raise AffordanceNotFoundException(SELF, details={"href": link.href})

    affordance = link.affordances[0]
    if len(link.affordances) > 1:
        log_with_context(
            logger,
            "debug",
            "Self link has several affordances, rendering the first",
            affordance=affordance.name,
            ignored=[a.name for a in link.affordances[1:]],
            event_type="affordance_selected",
        )

    return affordance.get_affordance_model(TEXT_HTML)


def build_form_view(model: AffordanceModel) -> FormView:
    """Build the template view for an HTML affordance model."""
    return FormView(
        target=model.target,
        properties=tuple(model.input),
        method=model.http_method.upper(),
        name=model.name,
    )
