"""Shared error responses for API resources."""

import falcon
import falcon.asgi

from descregistry.domain.exceptions import (
    AccessRestricted,
    AddressZeroNotAllowed,
    DescRegistryError,
    DescriptionAlreadyExists,
    DescriptionNotFound,
    EmptyStringNotAllowed,
)
from descregistry.domain.value_objects import Address

_STATUS_BY_ERROR: dict[type[DescRegistryError], str] = {
    AccessRestricted: falcon.HTTP_403,
    AddressZeroNotAllowed: falcon.HTTP_400,
    EmptyStringNotAllowed: falcon.HTTP_400,
    DescriptionAlreadyExists: falcon.HTTP_409,
    DescriptionNotFound: falcon.HTTP_404,
}


def set_domain_error(resp: falcon.asgi.Response, exc: DescRegistryError) -> None:
    """Translate a registry rejection into status + {"error", "message"}."""
    resp.status = _STATUS_BY_ERROR.get(type(exc), falcon.HTTP_400)
    resp.media = {"error": type(exc).__name__, "message": str(exc)}


def set_bad_request(resp: falcon.asgi.Response, message: str) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": "BadRequest", "message": message}


def require_caller(req: falcon.asgi.Request, resp: falcon.asgi.Response) -> Address | None:
    """Return the caller, or set 401 and return None."""
    caller = getattr(req.context, "caller", None)
    if caller is None:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized", "message": "Missing or invalid caller address"}
    return caller
