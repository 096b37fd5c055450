"""Organization membership and role guards."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends

from src.pitchdesk.api.dependencies.auth import CurrentUser
from src.pitchdesk.api.dependencies.repositories import MemberRepo
from src.pitchdesk.core.errors import ForbiddenError
from src.pitchdesk.core.logging import bind_organization_context
from src.pitchdesk.models import OrganizationMember, OrganizationRole


async def require_org_member(
    organization_id: UUID,
    current_user: CurrentUser,
    member_repo: MemberRepo,
) -> OrganizationMember:
    """Require the current user to be a member of the path's organization."""
    membership = await member_repo.get_membership(organization_id, current_user.id)
    if membership is None:
        raise ForbiddenError("User is not a member of this organization")

    bind_organization_context(organization_id)
    return membership


OrgMembership = Annotated[OrganizationMember, Depends(require_org_member)]


async def require_org_manager(membership: OrgMembership) -> OrganizationMember:
    """Require the current user to be a MANAGER of the path's organization."""
    if membership.role_enum is not OrganizationRole.MANAGER:
        raise ForbiddenError("Manager role required for this operation")
    return membership


OrgManager = Annotated[OrganizationMember, Depends(require_org_manager)]
