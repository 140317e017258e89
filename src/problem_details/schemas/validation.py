"""Validation error extension.

Describes *where* in a request each validation failure was found. Serialized
shape (one entry per failure, in the order they were found)::

    {"errors": [
        {"detail": "must be positive", "source": "body", "pointer": "/age"},
        {"detail": "missing", "source": "header", "name": "Authorization"}
    ]}
"""

from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

from problem_details.schemas.base import flatten_field


class BodySource(BaseModel):
    """Problem located in the request payload."""

    model_config = {"frozen": True}

    source: Literal["body"] = "body"
    # RFC 6901 pointer into the payload; None means the whole payload.
    pointer: str | None = None

    @model_serializer(mode="wrap")
    def _omit_missing_pointer(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        if data.get("pointer") is None:
            data.pop("pointer", None)
        return data


class HeaderSource(BaseModel):
    """Problem located in a named request header."""

    model_config = {"frozen": True}

    source: Literal["header"] = "header"
    name: str


Source = Annotated[BodySource | HeaderSource, Field(discriminator="source")]


class ValidationError(BaseModel):
    """One validation failure and the request part it came from."""

    model_config = {"frozen": True}

    detail: str
    source: Source

    @classmethod
    def body(cls, detail: str, pointer: str | None = None) -> Self:
        return cls(detail=detail, source=BodySource(pointer=pointer))

    @classmethod
    def header(cls, detail: str, name: str) -> Self:
        return cls(detail=detail, source=HeaderSource(name=name))

    @model_serializer(mode="wrap")
    def _flatten_source(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return flatten_field(handler(self), "source")


class ValidationErrors(BaseModel):
    """Problem extension listing every validation failure of a request."""

    model_config = {"frozen": True}

    errors: list[ValidationError] = Field(default_factory=list)
