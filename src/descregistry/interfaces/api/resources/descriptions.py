"""Descriptions API resources.

Mutations answer malformed or invalid input (400) before a missing caller
(401), keeping the validation -> authorization -> existence order of the
registry.
"""

import falcon.asgi

from descregistry.application.registry import DescriptionRegistry
from descregistry.application.validation import validate_description_input
from descregistry.domain.exceptions import DescRegistryError
from descregistry.domain.value_objects import Address
from descregistry.interfaces.api.responses import (
    require_caller,
    set_bad_request,
    set_domain_error,
)


class DescriptionsResource:
    """POST /v1/descriptions - add a description for an account."""

    def __init__(self, registry: DescriptionRegistry) -> None:
        self._registry = registry

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media()
            account = Address.from_hex(body["account"])
            text = body["text"]
        except KeyError as e:
            set_bad_request(resp, f"Missing required field: {e}")
            return
        except (TypeError, ValueError) as e:
            set_bad_request(resp, str(e))
            return
        if not isinstance(text, str):
            set_bad_request(resp, "Field 'text' must be a string")
            return

        try:
            validate_description_input(account, text)
        except DescRegistryError as e:
            set_domain_error(resp, e)
            return

        caller = require_caller(req, resp)
        if caller is None:
            return

        try:
            fingerprint = await self._registry.add_description(caller, text, account)
        except DescRegistryError as e:
            set_domain_error(resp, e)
            return

        resp.media = {"account": account.to_hex(), "fingerprint": fingerprint.to_hex()}
        resp.status = falcon.HTTP_201


class DescriptionResource:
    """GET/PUT/DELETE /v1/descriptions/{account}."""

    def __init__(self, registry: DescriptionRegistry) -> None:
        self._registry = registry

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        account: str,
    ) -> None:
        """Read is unrestricted; absent descriptions read as the zero fingerprint."""
        try:
            address = Address.from_hex(account)
        except ValueError as e:
            set_bad_request(resp, str(e))
            return

        fingerprint = await self._registry.get_description(address)
        resp.media = {
            "account": address.to_hex(),
            "fingerprint": fingerprint.to_hex(),
            "exists": not fingerprint.is_zero,
        }
        resp.status = falcon.HTTP_200

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        account: str,
    ) -> None:
        try:
            address = Address.from_hex(account)
            body = await req.get_media()
            text = body["text"]
        except KeyError as e:
            set_bad_request(resp, f"Missing required field: {e}")
            return
        except (TypeError, ValueError) as e:
            set_bad_request(resp, str(e))
            return
        if not isinstance(text, str):
            set_bad_request(resp, "Field 'text' must be a string")
            return

        try:
            validate_description_input(address, text)
        except DescRegistryError as e:
            set_domain_error(resp, e)
            return

        caller = require_caller(req, resp)
        if caller is None:
            return

        try:
            fingerprint = await self._registry.update_description(caller, address, text)
        except DescRegistryError as e:
            set_domain_error(resp, e)
            return

        resp.media = {"account": address.to_hex(), "fingerprint": fingerprint.to_hex()}
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        account: str,
    ) -> None:
        try:
            address = Address.from_hex(account)
        except ValueError as e:
            set_bad_request(resp, str(e))
            return

        try:
            validate_description_input(address)
        except DescRegistryError as e:
            set_domain_error(resp, e)
            return

        caller = require_caller(req, resp)
        if caller is None:
            return

        try:
            await self._registry.remove_description(caller, address)
        except DescRegistryError as e:
            set_domain_error(resp, e)
            return
        resp.status = falcon.HTTP_204
