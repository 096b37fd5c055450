"""Organization and membership endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from src.pitchdesk.api.dependencies import (
    CurrentUser,
    OrganizationServiceDep,
    OrgManager,
    Pagination,
)
from src.pitchdesk.schemas.organization import (
    MemberAdd,
    MemberListItem,
    MemberRead,
    OrganizationCreate,
    OrganizationListItem,
    OrganizationRead,
)
from src.pitchdesk.schemas.pagination import PaginatedResponse

router = APIRouter(prefix="/organizations", tags=["organizations"])


@router.post(
    "",
    response_model=OrganizationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create organization",
    description="Create an organization. The caller becomes its first MANAGER.",
    responses={
        201: {"description": "Organization created"},
        401: {"description": "Not authenticated"},
    },
)
async def create_organization(
    data: OrganizationCreate,
    current_user: CurrentUser,
    service: OrganizationServiceDep,
) -> OrganizationRead:
    organization = await service.create_organization(
        name=data.name,
        creator_id=current_user.id,
        description=data.description,
    )
    return OrganizationRead.model_validate(organization)


@router.get(
    "",
    response_model=PaginatedResponse[OrganizationListItem],
    summary="List my organizations",
    description="List organizations the current user belongs to, newest first.",
    responses={
        200: {"description": "Paginated list of organizations"},
        400: {"description": "Invalid cursor or limit"},
    },
)
async def list_organizations(
    current_user: CurrentUser,
    service: OrganizationServiceDep,
    pagination: Pagination,
) -> PaginatedResponse[OrganizationListItem]:
    page = await service.list_for_user(current_user.id, pagination)
    return PaginatedResponse.from_page(page)


@router.get(
    "/{organization_id}/members",
    response_model=PaginatedResponse[MemberListItem],
    summary="List members",
    description="List members of an organization, most recently joined first. "
    "Requires MANAGER role.",
    responses={
        200: {"description": "Paginated list of members"},
        400: {"description": "Invalid cursor or limit"},
        403: {"description": "Not a manager of this organization"},
    },
)
async def list_members(
    organization_id: UUID,
    _manager: OrgManager,
    service: OrganizationServiceDep,
    pagination: Pagination,
) -> PaginatedResponse[MemberListItem]:
    page = await service.list_members(organization_id, pagination)
    return PaginatedResponse.from_page(page)


@router.post(
    "/{organization_id}/members",
    response_model=MemberRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add member",
    description="Add an existing user to the organization by email. Requires MANAGER role.",
    responses={
        201: {"description": "Member added"},
        403: {"description": "Not a manager of this organization"},
        404: {"description": "No user with this email"},
        409: {"description": "User is already a member"},
    },
)
async def add_member(
    organization_id: UUID,
    data: MemberAdd,
    _manager: OrgManager,
    service: OrganizationServiceDep,
) -> MemberRead:
    membership = await service.add_member(organization_id, data.email, data.role)
    return MemberRead.model_validate(membership)
