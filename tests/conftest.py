"""Pytest configuration and shared fixtures."""

import pytest
from fastapi import APIRouter, Depends
from fastapi.testclient import TestClient

from affordance_forms.core.app_factory import create_app
from affordance_forms.dependencies import get_form_converter
from affordance_forms.models import Link, PropertyMetadata, RepresentationModel
from affordance_forms.views.form_renderer import HtmlFormConverter
from affordance_forms.views.responses import AffordanceFormResponse


@pytest.fixture(scope="session")
def converter():
    """Converter compiled once from the bundled template."""
    return HtmlFormConverter.from_loader()


@pytest.fixture
def employee_properties():
    """Input fields of a create-employee affordance."""
    return [
        PropertyMetadata(name="firstName", input_type="text", required=True),
        PropertyMetadata(name="lastName", input_type="text", required=True),
        PropertyMetadata(name="role", input_type="text"),
        PropertyMetadata(name="email", input_type="email", placeholder="name@example.com"),
    ]


@pytest.fixture
def employee_resource(employee_properties):
    """Resource whose self link carries a create affordance."""
    self_link = Link(rel="self", href="http://localhost/employees").and_affordance(
        "createEmployee",
        http_method="POST",
        properties=employee_properties,
    )
    return RepresentationModel(
        content={"count": 0},
        links=(self_link, Link(rel="profile", href="http://localhost/profile/employees")),
    )


@pytest.fixture
def resource_without_self_link():
    """Resource carrying only a non-self link."""
    link = Link(rel="employees", href="http://localhost/employees").and_affordance("createEmployee")
    return RepresentationModel(links=(link,))


@pytest.fixture
def form_router(employee_resource, resource_without_self_link):
    """Host router serving rendered forms for the sample resources."""
    router = APIRouter()

    @router.get("/employees/form")
    async def employee_form(converter: HtmlFormConverter = Depends(get_form_converter)):
        return AffordanceFormResponse(employee_resource, converter)

    @router.get("/broken/form")
    async def broken_form(converter: HtmlFormConverter = Depends(get_form_converter)):
        return AffordanceFormResponse(resource_without_self_link, converter)

    return router


@pytest.fixture
def test_client(form_router):
    """FastAPI test client with lifespan context."""
    app = create_app(routers=[form_router])
    with TestClient(app) as client:
        yield client
