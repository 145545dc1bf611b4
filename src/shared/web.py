"""HTTP plumbing shared by every router: dependencies, request context and error envelopes.

Expected failures become ``{success: false, message, errors}`` bodies with a
status matching the error type. Anything else is logged with its traceback
and answered with a generic 500 that reveals no internals.
"""

from urllib.parse import parse_qsl, urlencode, urlsplit
from uuid import uuid4

from fastapi import Depends, FastAPI, Header, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError

from shared.access import Actor, PermissionDenied, actor_from_token, require_admin
from shared.config import get_settings
from shared.domain import inventory
from shared.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)

GENERIC_FAILURE_MESSAGE = "An unexpected error occurred. Please try again later."

STATUS_BY_ERROR = {
    ValidationError: 400,
    PermissionDenied: 403,
    ObjectNotFoundError: 404,
    ExpectedVersionError: 409,
}


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------
def get_actor(x_admin_token: str | None = Header(default=None)) -> Actor:
    return actor_from_token(x_admin_token, get_settings().admin_token)


def admin_actor(actor: Actor = Depends(get_actor)) -> Actor:
    require_admin(actor)
    return actor


def is_programmatic(request: Request) -> bool:
    """True for AJAX/API callers that expect a JSON envelope rather than a redirect."""
    if request.headers.get("x-requested-with", "").lower() == "xmlhttprequest":
        return True
    return "application/json" in request.headers.get("accept", "")


def envelope(success: bool, message: str, **extra) -> dict:
    return {"success": success, "message": message, **extra}


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
def error_messages(exc: Exception) -> dict[str, list[str]]:
    """Field-keyed messages of a domain error, whatever shape it was raised with."""
    messages = getattr(exc, "messages", None)
    if isinstance(messages, dict):
        return {
            field: [str(message) for message in value] if isinstance(value, list | tuple) else [str(value)]
            for field, value in messages.items()
        }
    return {"_entity": [str(messages or exc)]}


def summarize(messages: dict[str, list[str]]) -> str:
    return ", ".join(message for field_messages in messages.values() for message in field_messages)


def status_for(exc: Exception) -> int:
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return 400


def rejection_redirect(request: Request, exc: Exception) -> RedirectResponse:
    """Send a browser back to the page it came from with the error messages in the query string."""
    referer = urlsplit(request.headers.get("referer", ""))
    path = referer.path or "/products"
    query = [(key, value) for key, value in parse_qsl(referer.query, keep_blank_values=True) if key != "error"]
    query += [("error", message) for messages in error_messages(exc).values() for message in messages]
    return RedirectResponse(url=f"{path}?{urlencode(query)}", status_code=303)


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = status_for(exc)
    messages = error_messages(exc)
    logger.info(
        "request_rejected",
        error_type=type(exc).__name__,
        status_code=status_code,
        messages=messages,
    )
    return JSONResponse(
        status_code=status_code,
        content=envelope(False, summarize(messages), error_type=type(exc).__name__, errors=messages),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = jsonable_encoder(exc.errors())
    errors: dict[str, list[str]] = {}
    for detail in details:
        location = ".".join(str(part) for part in detail.get("loc", ()) if part not in ("body", "query", "path"))
        errors.setdefault(location or "_entity", []).append(detail.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=422,
        content=envelope(False, "Validation failed.", error_type="ValidationError", errors=errors),
    )


def install_error_handling(app: FastAPI) -> None:
    """Register error envelopes, the domain context and the per-request logging context on ``app``."""
    for error_type in STATUS_BY_ERROR:
        app.add_exception_handler(error_type, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        clear_context()
        add_context(request_id=request.headers.get("x-request-id") or uuid4().hex, path=request.url.path)
        try:
            with inventory.domain_context():
                return await call_next(request)
        except Exception:
            logger.exception("unhandled_error", method=request.method)
            return JSONResponse(status_code=500, content=envelope(False, GENERIC_FAILURE_MESSAGE))
        finally:
            clear_context()
