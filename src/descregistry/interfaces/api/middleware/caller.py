"""Caller middleware - resolves the acting account from the request."""

import falcon.asgi

from descregistry.domain.value_objects import Address

CALLER_HEADER = "X-Caller-Address"


class CallerMiddleware:
    """Sets req.context.caller to the Address in X-Caller-Address, or None."""

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        raw = req.get_header(CALLER_HEADER)
        req.context.caller = None
        if not raw:
            return
        try:
            req.context.caller = Address.from_hex(raw)
        except ValueError:
            req.context.caller = None
