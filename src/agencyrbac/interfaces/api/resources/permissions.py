"""Permission API resources."""

from uuid import UUID

import falcon.asgi

from agencyrbac.application.use_cases.permission.check_manage_member import (
    CheckManageMemberUseCase,
)
from agencyrbac.application.use_cases.permission.get_member_permissions import (
    GetMemberPermissionsUseCase,
)
from agencyrbac.application.use_cases.permission.get_my_permissions import (
    GetMyPermissionsUseCase,
)
from agencyrbac.domain.catalog import ALL_PERMISSIONS, ALL_SECTIONS, PERMISSION_CATEGORIES
from agencyrbac.domain.exceptions import NotFound, PermissionDenied


def _parse_uuid(value: str, label: str, resp: falcon.asgi.Response) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        resp.status = falcon.HTTP_400
        resp.media = {"error": f"Invalid {label} ID"}
        return None


def _require_user(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    user = getattr(req.context, "user", None)
    if not user:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    return user


class PermissionCatalogResource:
    """GET /v1/permissions/catalog - every permission, grouped, plus sections."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if not _require_user(req, resp):
            return
        resp.media = {
            "permissions": {
                key: {"description": d.description, "category": d.category}
                for key, d in ALL_PERMISSIONS.items()
            },
            "categories": {name: list(keys) for name, keys in PERMISSION_CATEGORIES.items()},
            "sections": list(ALL_SECTIONS),
        }
        resp.status = falcon.HTTP_200


class MyPermissionsResource:
    """GET /v1/agencies/{agency_id}/my-permissions - caller's resolved access."""

    def __init__(self, get_my_permissions: GetMyPermissionsUseCase) -> None:
        self._get_my_permissions = get_my_permissions

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, agency_id: str
    ) -> None:
        user = _require_user(req, resp)
        if not user:
            return
        agency_uuid = _parse_uuid(agency_id, "agency", resp)
        if agency_uuid is None:
            return

        try:
            result = await self._get_my_permissions.execute(
                user.user_id, agency_uuid, user.email
            )
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "member_id": str(result.member_id),
            "member_type": result.member_type.value if result.member_type else "unknown",
            "permissions": result.permissions.to_dict(),
            "section_access": result.section_access.to_dict(),
        }
        resp.status = falcon.HTTP_200


class MemberPermissionsResource:
    """GET /v1/agencies/{agency_id}/members/{member_id}/permissions."""

    def __init__(self, get_member_permissions: GetMemberPermissionsUseCase) -> None:
        self._get_member_permissions = get_member_permissions

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        agency_id: str,
        member_id: str,
    ) -> None:
        user = _require_user(req, resp)
        if not user:
            return
        agency_uuid = _parse_uuid(agency_id, "agency", resp)
        if agency_uuid is None:
            return
        member_uuid = _parse_uuid(member_id, "member", resp)
        if member_uuid is None:
            return

        try:
            result = await self._get_member_permissions.execute(
                user.user_id, agency_uuid, member_uuid
            )
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "member_id": str(result.member_id),
            "permissions": result.permissions.to_dict(),
        }
        resp.status = falcon.HTTP_200


class MemberManageableResource:
    """GET /v1/agencies/{agency_id}/members/{member_id}/manageable."""

    def __init__(self, check_manage_member: CheckManageMemberUseCase) -> None:
        self._check_manage_member = check_manage_member

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        agency_id: str,
        member_id: str,
    ) -> None:
        user = _require_user(req, resp)
        if not user:
            return
        agency_uuid = _parse_uuid(agency_id, "agency", resp)
        if agency_uuid is None:
            return
        member_uuid = _parse_uuid(member_id, "member", resp)
        if member_uuid is None:
            return

        try:
            allowed = await self._check_manage_member.execute(
                user.user_id, agency_uuid, member_uuid
            )
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return

        resp.media = {"member_id": str(member_uuid), "can_manage": allowed}
        resp.status = falcon.HTTP_200
