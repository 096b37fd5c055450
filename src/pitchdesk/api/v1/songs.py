"""Song catalog endpoints, scoped to an organization."""

from uuid import UUID

from fastapi import APIRouter, status

from src.pitchdesk.api.dependencies import OrgMembership, Pagination, SongServiceDep
from src.pitchdesk.schemas.pagination import PaginatedResponse
from src.pitchdesk.schemas.song import SongCreate, SongListItem, SongRead

router = APIRouter(prefix="/organizations/{organization_id}/songs", tags=["songs"])


@router.post(
    "",
    response_model=SongRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register song",
    description="Record the metadata of a song file already placed in storage.",
    responses={
        201: {"description": "Song registered"},
        403: {"description": "Not a member of this organization"},
    },
)
async def register_song(
    organization_id: UUID,
    data: SongCreate,
    membership: OrgMembership,
    service: SongServiceDep,
) -> SongRead:
    song = await service.register_song(organization_id, membership.user_id, data)
    return SongRead.model_validate(song)


@router.get(
    "",
    response_model=PaginatedResponse[SongListItem],
    summary="List songs",
    description="List songs of the organization with their uploader, newest first.",
    responses={
        200: {"description": "Paginated list of songs"},
        400: {"description": "Invalid cursor or limit"},
        403: {"description": "Not a member of this organization"},
    },
)
async def list_songs(
    organization_id: UUID,
    _membership: OrgMembership,
    service: SongServiceDep,
    pagination: Pagination,
) -> PaginatedResponse[SongListItem]:
    page = await service.list_songs(organization_id, pagination)
    return PaginatedResponse.from_page(page)


@router.get(
    "/{song_id}",
    response_model=SongRead,
    summary="Get song",
    responses={
        200: {"description": "Song details"},
        403: {"description": "Not a member of this organization"},
        404: {"description": "Song not found"},
    },
)
async def get_song(
    organization_id: UUID,
    song_id: UUID,
    _membership: OrgMembership,
    service: SongServiceDep,
) -> SongRead:
    song = await service.get_song(organization_id, song_id)
    return SongRead.model_validate(song)
