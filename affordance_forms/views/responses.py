"""FastAPI response types for rendered affordance forms."""

from fastapi.responses import HTMLResponse

from affordance_forms.models.hypermedia import RepresentationModel
from affordance_forms.views.form_renderer import HtmlFormConverter


class AffordanceFormResponse(HTMLResponse):
    """HTML response whose body is the rendered form of a resource's primary affordance.

    Rendering happens in the constructor, so a resource that cannot be
    rendered raises before any response is started.

    Example:
        @router.get("/orders/new")
        async def new_order(converter: HtmlFormConverter = Depends(get_form_converter)):
            return AffordanceFormResponse(build_order_resource(), converter)
    """

    def __init__(
        self,
        resource: RepresentationModel,
        converter: HtmlFormConverter,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(
            content=converter.render(resource),
            status_code=status_code,
            headers=headers,
        )
