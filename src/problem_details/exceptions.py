"""Problem exceptions raised by application code.

Routes and services raise these instead of building responses themselves.
The handlers installed by ``install_problem_handlers`` turn them into
problem+json responses via ``ProblemError.to_problem()``.
"""

from typing import Any, ClassVar

from problem_details.schemas.problem import ProblemDetails
from problem_details.schemas.validation import ValidationError, ValidationErrors


class ProblemError(Exception):
    """Base class for all problem exceptions.

    Subclasses fix ``type_``, ``status`` and ``title``; each raise supplies the
    occurrence-specific ``detail`` and, optionally, an extension model.
    """

    type_: ClassVar[str] = "internal_server_error"
    status: ClassVar[int] = 500
    title: ClassVar[str] = "Internal Server Error"

    def __init__(self, detail: str, extensions: Any = None) -> None:
        self.detail = detail
        self.extensions = extensions
        super().__init__(detail)

    def to_problem(self, type_base: str = "") -> ProblemDetails[Any]:
        return ProblemDetails(
            type_=f"{type_base}{self.type_}",
            status=self.status,
            title=self.title,
            detail=self.detail,
            extensions=self.extensions,
        )


class BadRequestError(ProblemError):
    """Raised when a request is well-formed but cannot be acted on."""

    type_ = "bad_request"
    status = 400
    title = "Bad Request"


class NotFoundError(ProblemError):
    """Raised when a requested entity does not exist."""

    type_ = "not_found"
    status = 404
    title = "Not Found"

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")


class ConflictError(ProblemError):
    """Raised when an operation conflicts with existing state (e.g. duplicate)."""

    type_ = "conflict"
    status = 409
    title = "Conflict"


class RequestValidationFailed(ProblemError):
    """Raised by application-level checks that found invalid input.

    Carries every failure as a ``ValidationErrors`` extension, in the order
    the checks ran.
    """

    type_ = "validation_error"
    status = 422
    title = "Unprocessable Content"

    def __init__(
        self,
        errors: list[ValidationError],
        detail: str = "The request contains invalid input.",
    ) -> None:
        super().__init__(detail, ValidationErrors(errors=errors))
