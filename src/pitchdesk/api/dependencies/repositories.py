"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.pitchdesk.api.dependencies.db import DBSession
from src.pitchdesk.repositories import (
    MemberRepository,
    OrganizationRepository,
    PitchRepository,
    SongRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_organization_repository(session: DBSession) -> OrganizationRepository:
    return OrganizationRepository(session)


def get_member_repository(session: DBSession) -> MemberRepository:
    return MemberRepository(session)


def get_song_repository(session: DBSession) -> SongRepository:
    return SongRepository(session)


def get_pitch_repository(session: DBSession) -> PitchRepository:
    return PitchRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
OrganizationRepo = Annotated[OrganizationRepository, Depends(get_organization_repository)]
MemberRepo = Annotated[MemberRepository, Depends(get_member_repository)]
SongRepo = Annotated[SongRepository, Depends(get_song_repository)]
PitchRepo = Annotated[PitchRepository, Depends(get_pitch_repository)]
