"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.pitchdesk.api.dependencies.db import DBSession
from src.pitchdesk.api.dependencies.repositories import (
    MemberRepo,
    OrganizationRepo,
    PitchRepo,
    SongRepo,
    UserRepo,
)
from src.pitchdesk.services import OrganizationService, PitchService, SongService


def get_organization_service(
    organization_repo: OrganizationRepo,
    member_repo: MemberRepo,
    user_repo: UserRepo,
    session: DBSession,
) -> OrganizationService:
    """Get organization service."""
    return OrganizationService(organization_repo, member_repo, user_repo, session)


def get_song_service(song_repo: SongRepo, session: DBSession) -> SongService:
    """Get song service."""
    return SongService(song_repo, session)


def get_pitch_service(
    pitch_repo: PitchRepo,
    song_repo: SongRepo,
    session: DBSession,
) -> PitchService:
    """Get pitch service."""
    return PitchService(pitch_repo, song_repo, session)


OrganizationServiceDep = Annotated[OrganizationService, Depends(get_organization_service)]
SongServiceDep = Annotated[SongService, Depends(get_song_service)]
PitchServiceDep = Annotated[PitchService, Depends(get_pitch_service)]
