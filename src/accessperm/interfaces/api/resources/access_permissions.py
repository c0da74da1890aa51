"""Access permissions API resources."""

from uuid import UUID

import falcon.asgi

from accessperm.application.dto import AccessPermissionCreator, AccessPermissionQuery
from accessperm.application.services.access_permission_service import AccessPermissionService
from accessperm.domain.entities import AccessPermission
from accessperm.domain.exceptions import ValidationError
from accessperm.domain.value_objects import Action, Permission


def _parse_uuid(value: object, argument: str) -> UUID | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{argument} must be a string", argument=argument)
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {argument}: {value}", argument=argument) from None


def _parse_action(value: object, argument: str) -> Action | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{argument} must be a string", argument=argument)
    try:
        return Action(value)
    except ValueError:
        raise ValidationError(f"Invalid {argument}: {value}", argument=argument) from None


def _parse_permission(body: object) -> Permission | None:
    if body is None:
        return None
    if not isinstance(body, dict):
        raise ValidationError("permission must be an object", argument="permission")
    domain = body.get("domain")
    if domain is not None and not isinstance(domain, str):
        raise ValidationError("permission.domain must be a string", argument="permission.domain")
    return Permission(
        domain=domain,
        action=_parse_action(body.get("action"), "permission.action"),
        target_scope_id=_parse_uuid(body.get("target_scope_id"), "permission.target_scope_id"),
        group_id=_parse_uuid(body.get("group_id"), "permission.group_id"),
    )


def _serialize(ap: AccessPermission) -> dict:
    p = ap.permission
    return {
        "id": str(ap.id),
        "scope_id": str(ap.scope_id),
        "access_info_id": str(ap.access_info_id),
        "permission": {
            "domain": p.domain,
            "action": str(p.action) if p.action is not None else None,
            "target_scope_id": str(p.target_scope_id) if p.target_scope_id else None,
            "group_id": str(p.group_id) if p.group_id else None,
        },
        "created_on": ap.created_on.isoformat(),
        "created_by": ap.created_by,
    }


def _require_user(req: falcon.asgi.Request, resp: falcon.asgi.Response) -> bool:
    if getattr(req.context, "user", None):
        return True
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}
    return False


def _query_from_params(req: falcon.asgi.Request, scope_id: UUID) -> AccessPermissionQuery:
    return AccessPermissionQuery(
        scope_id=scope_id,
        access_info_id=_parse_uuid(req.get_param("access_info_id"), "access_info_id"),
        domain=req.get_param("domain"),
        action=_parse_action(req.get_param("action"), "action"),
        offset=req.get_param_as_int("offset", min_value=0, default=0),
        limit=req.get_param_as_int("limit", min_value=1),
    )


class AccessPermissionsResource:
    """GET/POST /v1/scopes/{scope_id}/access-permissions - query and create."""

    def __init__(self, service: AccessPermissionService) -> None:
        self._service = service

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        scope_id: str,
    ) -> None:
        """Query access permissions of scope."""
        if not _require_user(req, resp):
            return
        query = _query_from_params(req, _parse_uuid(scope_id, "scope_id"))
        result = await self._service.query(query)
        resp.media = {
            "items": [_serialize(ap) for ap in result.items],
            "limit_exceeded": result.limit_exceeded,
        }
        resp.status = falcon.HTTP_200

    async def on_get_count(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        scope_id: str,
    ) -> None:
        """Count access permissions of scope."""
        if not _require_user(req, resp):
            return
        query = _query_from_params(req, _parse_uuid(scope_id, "scope_id"))
        resp.media = {"count": await self._service.count(query)}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        scope_id: str,
    ) -> None:
        """Grant permission through an access info."""
        if not _require_user(req, resp):
            return

        body = await req.get_media()
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")

        creator = AccessPermissionCreator(
            scope_id=_parse_uuid(scope_id, "scope_id"),
            access_info_id=_parse_uuid(body.get("access_info_id"), "access_info_id"),
            permission=_parse_permission(body.get("permission")),
        )
        access_permission = await self._service.create(creator)
        resp.media = _serialize(access_permission)
        resp.status = falcon.HTTP_201


class AccessPermissionResource:
    """GET/DELETE /v1/scopes/{scope_id}/access-permissions/{access_permission_id}."""

    def __init__(self, service: AccessPermissionService) -> None:
        self._service = service

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        scope_id: str,
        access_permission_id: str,
    ) -> None:
        if not _require_user(req, resp):
            return
        access_permission = await self._service.find(
            _parse_uuid(scope_id, "scope_id"),
            _parse_uuid(access_permission_id, "access_permission_id"),
        )
        if access_permission is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Access permission not found"}
            return
        resp.media = _serialize(access_permission)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        scope_id: str,
        access_permission_id: str,
    ) -> None:
        """Revoke access permission."""
        if not _require_user(req, resp):
            return
        await self._service.delete(
            _parse_uuid(scope_id, "scope_id"),
            _parse_uuid(access_permission_id, "access_permission_id"),
        )
        resp.status = falcon.HTTP_204


class AccessInfoPermissionsResource:
    """GET /v1/scopes/{scope_id}/access-infos/{access_info_id}/permissions."""

    def __init__(self, service: AccessPermissionService) -> None:
        self._service = service

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        scope_id: str,
        access_info_id: str,
    ) -> None:
        """List permissions of one access info."""
        if not _require_user(req, resp):
            return
        result = await self._service.find_by_access_info_id(
            _parse_uuid(scope_id, "scope_id"),
            _parse_uuid(access_info_id, "access_info_id"),
        )
        resp.media = {
            "items": [_serialize(ap) for ap in result.items],
            "limit_exceeded": result.limit_exceeded,
        }
        resp.status = falcon.HTTP_200
