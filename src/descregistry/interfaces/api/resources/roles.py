"""Roles API resources."""

import falcon.asgi

from descregistry.application.registry import DescriptionRegistry
from descregistry.domain.exceptions import DescRegistryError
from descregistry.domain.value_objects import Address, Role
from descregistry.interfaces.api.responses import (
    require_caller,
    set_bad_request,
    set_domain_error,
)


class RolesResource:
    """GET /v1/roles - list roles and their identifiers."""

    def __init__(self, registry: DescriptionRegistry) -> None:
        self._registry = registry

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {
            "items": [
                {
                    "name": role.name,
                    "role": role.value,
                    "id": self._registry.role_identifier(role).to_hex(),
                }
                for role in Role
            ]
        }
        resp.status = falcon.HTTP_200


class RoleMemberResource:
    """GET/PUT/DELETE /v1/roles/{role}/members/{account} - query, grant, revoke."""

    def __init__(self, registry: DescriptionRegistry) -> None:
        self._registry = registry

    def _parse(
        self, resp: falcon.asgi.Response, role: str, account: str
    ) -> tuple[Role, Address] | None:
        try:
            return self._registry.resolve_role(role), Address.from_hex(account)
        except ValueError as e:
            set_bad_request(resp, str(e))
            return None

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: str,
        account: str,
    ) -> None:
        parsed = self._parse(resp, role, account)
        if parsed is None:
            return
        role_obj, address = parsed
        has_role = await self._registry.has_role(role_obj, address)
        resp.media = {"role": role_obj.value, "account": address.to_hex(), "has_role": has_role}
        resp.status = falcon.HTTP_200

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: str,
        account: str,
    ) -> None:
        """Grant role to account. Caller must hold ADMIN."""
        caller = require_caller(req, resp)
        if caller is None:
            return
        parsed = self._parse(resp, role, account)
        if parsed is None:
            return

        try:
            await self._registry.grant_role(caller, *parsed)
        except DescRegistryError as e:
            set_domain_error(resp, e)
            return
        resp.status = falcon.HTTP_204

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: str,
        account: str,
    ) -> None:
        """Revoke role from account. Caller must hold ADMIN."""
        caller = require_caller(req, resp)
        if caller is None:
            return
        parsed = self._parse(resp, role, account)
        if parsed is None:
            return

        try:
            await self._registry.revoke_role(caller, *parsed)
        except DescRegistryError as e:
            set_domain_error(resp, e)
            return
        resp.status = falcon.HTTP_204


class RoleRenounceResource:
    """POST /v1/roles/{role}/renounce - caller drops one of its own roles."""

    def __init__(self, registry: DescriptionRegistry) -> None:
        self._registry = registry

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: str,
    ) -> None:
        caller = require_caller(req, resp)
        if caller is None:
            return

        try:
            role_obj = self._registry.resolve_role(role)
            body = await req.get_media(default_when_empty={})
            account = Address.from_hex(body["account"]) if "account" in body else caller
        except (TypeError, ValueError) as e:
            set_bad_request(resp, str(e))
            return

        try:
            await self._registry.renounce_role(caller, role_obj, account)
        except DescRegistryError as e:
            set_domain_error(resp, e)
            return
        resp.status = falcon.HTTP_204


class AccountRolesResource:
    """GET /v1/accounts/{account}/roles - roles held by an account."""

    def __init__(self, registry: DescriptionRegistry) -> None:
        self._registry = registry

    async def on_get(
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

        roles = await self._registry.roles_of(address)
        resp.media = {"account": address.to_hex(), "roles": [r.value for r in roles]}
        resp.status = falcon.HTTP_200
