"""Repository layer - data access abstraction."""

from src.pitchdesk.repositories.base import BaseRepository
from src.pitchdesk.repositories.organization import MemberRepository, OrganizationRepository
from src.pitchdesk.repositories.song import PitchRepository, SongRepository
from src.pitchdesk.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "MemberRepository",
    "OrganizationRepository",
    "PitchRepository",
    "SongRepository",
    "UserRepository",
]
