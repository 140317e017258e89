from problem_details.schemas.problem import ProblemDetails
from problem_details.schemas.validation import (
    BodySource,
    HeaderSource,
    Source,
    ValidationError,
    ValidationErrors,
)

__all__ = [
    "BodySource",
    "HeaderSource",
    "ProblemDetails",
    "Source",
    "ValidationError",
    "ValidationErrors",
]
