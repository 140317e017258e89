"""Problem details (RFC 9457) error responses for FastAPI services."""

from problem_details.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    ProblemError,
    RequestValidationFailed,
)
from problem_details.handlers import install_problem_handlers
from problem_details.response import (
    APPLICATION_PROBLEM_JSON,
    INTERNAL_SERVER_ERROR_HEADERS,
    INTERNAL_SERVER_ERROR_PROBLEM,
    ProblemResponse,
    encode,
    internal_server_error_response,
)
from problem_details.schemas import (
    BodySource,
    HeaderSource,
    ProblemDetails,
    Source,
    ValidationError,
    ValidationErrors,
)

__all__ = [
    "APPLICATION_PROBLEM_JSON",
    "INTERNAL_SERVER_ERROR_HEADERS",
    "INTERNAL_SERVER_ERROR_PROBLEM",
    "BadRequestError",
    "BodySource",
    "ConflictError",
    "HeaderSource",
    "NotFoundError",
    "ProblemDetails",
    "ProblemError",
    "ProblemResponse",
    "RequestValidationFailed",
    "Source",
    "ValidationError",
    "ValidationErrors",
    "encode",
    "install_problem_handlers",
    "internal_server_error_response",
]
