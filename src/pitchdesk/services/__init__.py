"""Service layer - business logic and transaction control."""

from src.pitchdesk.services.organization_service import OrganizationService
from src.pitchdesk.services.pitch_service import PitchService
from src.pitchdesk.services.song_service import SongService

__all__ = [
    "OrganizationService",
    "PitchService",
    "SongService",
]
