"""Pydantic models for hypermedia resources, links and affordances.

Instances are frozen: rendering reads them and never mutates them. The
"with"-style helpers return new instances instead of changing the receiver.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from affordance_forms.exceptions import AffordanceModelNotFoundException, LinkNotFoundException

SELF = "self"
TEXT_HTML = "text/html"


class PropertyMetadata(BaseModel):
    """Input field of an affordance."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    input_type: str = Field(default="text", description="HTML input type (text, number, email, ...)")
    required: bool = False
    read_only: bool = False
    pattern: str | None = None
    min: int | float | None = None
    max: int | float | None = None
    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)
    placeholder: str | None = None


class AffordanceModel(BaseModel):
    """Media-type specific view of an affordance: target URL plus ordered inputs."""

    model_config = ConfigDict(frozen=True)

    name: str
    media_type: str = TEXT_HTML
    target: str
    http_method: str = "POST"
    input: tuple[PropertyMetadata, ...] = ()


class Affordance(BaseModel):
    """Named interaction exposing one rendering model per media type."""

    model_config = ConfigDict(frozen=True)

    name: str
    models: tuple[AffordanceModel, ...] = ()

    def get_affordance_model(self, media_type: str) -> AffordanceModel:
        """Return the model registered for media_type.

        Raises:
            AffordanceModelNotFoundException: If no model matches the media type
        """
        wanted = media_type.lower()
        for model in self.models:
            if model.media_type.lower() == wanted:
                return model
        raise AffordanceModelNotFoundException(self.name, media_type)


class Link(BaseModel):
    """Typed link with the affordances attached to it, in declaration order."""

    model_config = ConfigDict(frozen=True)

    rel: str
    href: str
    affordances: tuple[Affordance, ...] = ()

    def and_affordance(
        self,
        name: str,
        http_method: str = "POST",
        properties: list[PropertyMetadata] | tuple[PropertyMetadata, ...] = (),
        media_types: tuple[str, ...] = (TEXT_HTML,),
        target: str | None = None,
    ) -> "Link":
        """Return a copy of this link with one more affordance appended.

        One AffordanceModel is built per media type, all pointing at target
        (defaults to this link's href).
        """
        models = tuple(
            AffordanceModel(
                name=name,
                media_type=media_type,
                target=target or self.href,
                http_method=http_method.upper(),
                input=tuple(properties),
            )
            for media_type in media_types
        )
        affordance = Affordance(name=name, models=models)
        return self.model_copy(update={"affordances": (*self.affordances, affordance)})


class RepresentationModel(BaseModel):
    """Resource representation: output content plus an ordered set of links."""

    model_config = ConfigDict(frozen=True)

    content: dict[str, Any] = Field(default_factory=dict)
    links: tuple[Link, ...] = ()

    def get_link(self, rel: str) -> Link | None:
        """Return the first link with the given relation, or None."""
        for link in self.links:
            if link.rel == rel:
                return link
        return None

    def get_required_link(self, rel: str) -> Link:
        """Return the first link with the given relation.

        Raises:
            LinkNotFoundException: If the resource has no such link
        """
        link = self.get_link(rel)
        if link is None:
            raise LinkNotFoundException(rel)
        return link

    def has_link(self, rel: str) -> bool:
        return self.get_link(rel) is not None

    def add_link(self, link: Link) -> "RepresentationModel":
        """Return a copy of this resource with link appended."""
        return self.model_copy(update={"links": (*self.links, link)})
