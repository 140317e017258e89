"""FastAPI exception handlers that answer with problem+json.

Usage:
    app = FastAPI()
    install_problem_handlers(app)

    @app.get("/users/{user_id}")
    async def get_user(user_id: int) -> User:
        raise NotFoundError("User", user_id)  # -> 404 problem+json
"""

import re
from collections.abc import Sequence
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from problem_details.config import ProblemSettings, settings
from problem_details.exceptions import ProblemError, RequestValidationFailed
from problem_details.logging import get_logger
from problem_details.pointer import document_path, to_json_pointer
from problem_details.response import encode, internal_server_error_response
from problem_details.schemas.problem import ProblemDetails
from problem_details.schemas.validation import ValidationError

logger = get_logger(__name__)


def _settings(request: Request) -> ProblemSettings:
    return getattr(request.app.state, "problem_settings", settings)


def _type_token(title: str) -> str:
    """'Not Found' -> 'not_found'."""
    return re.sub(r"[^a-z0-9]+", "_", title.lower()).strip("_")


def _to_validation_error(error: dict[str, Any], body: Any = None) -> ValidationError | None:
    """Map one FastAPI error to a located ValidationError.

    Returns None for locations that have no Source variant (query, path, cookie).
    """
    loc: Sequence[str | int] = error.get("loc", ())
    if not loc:
        return None
    location, *path = loc
    if location == "body":
        # Undecodable JSON reports a character offset, not a document path.
        whole_body = not path or error.get("type") == "json_invalid"
        if whole_body:
            return ValidationError.body(error["msg"])
        resolved = document_path(body, path)
        return ValidationError.body(error["msg"], to_json_pointer(resolved) if resolved else None)
    if location == "header" and path:
        return ValidationError.header(error["msg"], str(path[0]))
    return None


async def problem_error_handler(request: Request, exc: ProblemError) -> Response:
    """Return the problem carried by the exception."""
    problem = exc.to_problem(_settings(request).type_base)
    logger.warning(
        "problem_raised",
        problem_type=problem.type_,
        status=problem.status,
        path=request.url.path,
    )
    return encode(problem)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    """Return 422 with one located entry per body/header validation failure."""
    errors: list[ValidationError] = []
    unlocated: list[str] = []
    for error in exc.errors():
        validation_error = _to_validation_error(error, exc.body)
        if validation_error is not None:
            errors.append(validation_error)
        else:
            where = ".".join(str(part) for part in error.get("loc", ()))
            unlocated.append(f"{where}: {error['msg']}")

    failed = (
        RequestValidationFailed(errors, detail="; ".join(unlocated))
        if unlocated
        else RequestValidationFailed(errors)
    )
    logger.info(
        "request_validation_failed",
        path=request.url.path,
        errors=len(errors) + len(unlocated),
    )
    return encode(failed.to_problem(_settings(request).type_base))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Return a problem for framework-raised HTTP errors (404 routes, 405, ...)."""
    try:
        title = HTTPStatus(exc.status_code).phrase
    except ValueError:
        title = "HTTP Error"
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)

    response = encode(
        ProblemDetails(
            type_=_settings(request).type_base + _type_token(title),
            status=exc.status_code,
            title=title,
            detail=detail,
        )
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Log unhandled exceptions and return the static 500 problem.

    - Logs full exception with traceback (includes bound context)
    - Returns the generic problem to the client (no stack traces leaked)
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return internal_server_error_response()


def install_problem_handlers(app: FastAPI, problem_settings: ProblemSettings | None = None) -> None:
    """Register every problem handler on ``app``."""
    app.state.problem_settings = problem_settings or settings
    app.add_exception_handler(ProblemError, problem_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
