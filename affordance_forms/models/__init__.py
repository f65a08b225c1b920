"""Affordance Forms models"""

from affordance_forms.models.base_models import HealthResponse
from affordance_forms.models.hypermedia import (
    SELF,
    TEXT_HTML,
    Affordance,
    AffordanceModel,
    Link,
    PropertyMetadata,
    RepresentationModel,
)

__all__ = [
    "SELF",
    "TEXT_HTML",
    "Affordance",
    "AffordanceModel",
    "HealthResponse",
    "Link",
    "PropertyMetadata",
    "RepresentationModel",
]
