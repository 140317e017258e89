"""Problem details envelope (RFC 9457).

Every error response body has the same four fields, optionally followed by
the fields of an extension model merged in at the top level::

    {"type": "validation_error", "status": 400, "title": "Bad Request",
     "detail": "invalid input", "errors": [...]}

``ProblemDetails[T]`` is generic over the extension, the same way
``PaginatedResponse[T]`` is generic over its items::

    ValidationProblem = ProblemDetails[ValidationErrors]
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

from problem_details.schemas.base import flatten_field

Extension = TypeVar("Extension")


class ProblemDetails(BaseModel, Generic[Extension]):
    """Error envelope with an optional, flattened extension payload.

    ``type_`` is a stable identifier for the kind of problem (a URI or a
    short token such as ``validation_error``). ``title`` stays the same for a
    given type; ``detail`` explains this particular occurrence. ``status``
    repeats the HTTP status code of the response.

    The extension must serialize to an object whose keys are not ``type``,
    ``status``, ``title`` or ``detail``. Breaking that rule makes
    serialization fail rather than silently overwrite envelope fields.
    """

    model_config = {"frozen": True, "validate_by_name": True, "serialize_by_alias": True}

    type_: str = Field(alias="type")
    status: int
    title: str
    detail: str
    extensions: Extension | None = None

    @model_serializer(mode="wrap")
    def _flatten_extensions(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return flatten_field(handler(self), "extensions")
