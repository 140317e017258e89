"""Turn a ProblemDetails value into an HTTP response.

``encode`` never fails: if the problem (in practice, its extension) cannot be
serialized, the caller gets a pre-rendered 500 problem instead. That body is a
module constant, so the error path has no serialization step of its own that
could fail again.
"""

from typing import Any, Final

from fastapi.responses import JSONResponse, Response

from problem_details.logging import get_logger
from problem_details.schemas.problem import ProblemDetails

logger = get_logger(__name__)

APPLICATION_PROBLEM_JSON: Final = "application/problem+json"

INTERNAL_SERVER_ERROR_PROBLEM: Final = b"""{
    "type": "internal_server_error",
    "title": "Internal Server Error",
    "detail": "Something went wrong when processing your request. Please try again later.",
    "status": 500
}"""

INTERNAL_SERVER_ERROR_HEADERS: Final = (("content-type", APPLICATION_PROBLEM_JSON),)


class ProblemResponse(JSONResponse):
    """JSON response sent as ``application/problem+json``.

    Rendering goes through JSONResponse, so NaN and infinity are rejected
    instead of producing invalid JSON.
    """

    media_type = APPLICATION_PROBLEM_JSON


def internal_server_error_response() -> Response:
    """Build the fallback 500 response from the pre-rendered constants.

    A new Response is returned on every call because middleware mutates
    response headers; the body bytes are shared as-is.
    """
    return Response(
        content=INTERNAL_SERVER_ERROR_PROBLEM,
        status_code=500,
        headers=dict(INTERNAL_SERVER_ERROR_HEADERS),
    )


def encode(problem: ProblemDetails[Any]) -> Response:
    """Serialize ``problem`` into a problem+json response.

    The response status is ``problem.status``. Any serialization error is
    logged and replaced by ``internal_server_error_response()``; callers can
    only tell the two apart by the status code.
    """
    try:
        content = problem.model_dump(mode="json", by_alias=True)
        return ProblemResponse(content=content, status_code=problem.status)
    except Exception:
        logger.exception(
            "problem_serialization_failed",
            problem_type=problem.type_,
            status=problem.status,
        )
        return internal_server_error_response()
