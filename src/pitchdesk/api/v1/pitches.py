"""Pitch endpoints.

Pitches hang off a song; the organization-wide listing joins through songs.
"""

from uuid import UUID

from fastapi import APIRouter, status

from src.pitchdesk.api.dependencies import (
    OrgManager,
    OrgMembership,
    Pagination,
    PitchServiceDep,
)
from src.pitchdesk.schemas.pagination import PaginatedResponse
from src.pitchdesk.schemas.song import PitchCreate, PitchRead

router = APIRouter(prefix="/organizations/{organization_id}", tags=["pitches"])


@router.post(
    "/songs/{song_id}/pitches",
    response_model=PitchRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create pitch",
    description="Create a DRAFT pitch for a song. Requires MANAGER role.",
    responses={
        201: {"description": "Pitch created"},
        400: {"description": "Song belongs to another organization"},
        403: {"description": "Not a manager of this organization"},
        404: {"description": "Song not found"},
    },
)
async def create_pitch(
    organization_id: UUID,
    song_id: UUID,
    data: PitchCreate,
    manager: OrgManager,
    service: PitchServiceDep,
) -> PitchRead:
    pitch = await service.create_pitch(organization_id, song_id, manager.user_id, data)
    return PitchRead.model_validate(pitch)


@router.get(
    "/songs/{song_id}/pitches",
    response_model=PaginatedResponse[PitchRead],
    summary="List song pitches",
    description="List pitches created for one song, newest first.",
    responses={
        200: {"description": "Paginated list of pitches"},
        400: {"description": "Invalid cursor or limit"},
        403: {"description": "Not a member of this organization"},
        404: {"description": "Song not found"},
    },
)
async def list_song_pitches(
    organization_id: UUID,
    song_id: UUID,
    _membership: OrgMembership,
    service: PitchServiceDep,
    pagination: Pagination,
) -> PaginatedResponse[PitchRead]:
    page = await service.list_song_pitches(organization_id, song_id, pagination)
    return PaginatedResponse.from_page(page)


@router.get(
    "/pitches",
    response_model=PaginatedResponse[PitchRead],
    summary="List organization pitches",
    description="List pitches across all songs of the organization, newest first.",
    responses={
        200: {"description": "Paginated list of pitches"},
        400: {"description": "Invalid cursor or limit"},
        403: {"description": "Not a member of this organization"},
    },
)
async def list_organization_pitches(
    organization_id: UUID,
    _membership: OrgMembership,
    service: PitchServiceDep,
    pagination: Pagination,
) -> PaginatedResponse[PitchRead]:
    page = await service.list_organization_pitches(organization_id, pagination)
    return PaginatedResponse.from_page(page)
