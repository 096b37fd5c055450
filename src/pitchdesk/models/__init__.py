"""Model exports.

Import from here: `from src.pitchdesk.models import Organization, Song`
"""

from src.pitchdesk.models.enums import OrganizationRole, PitchStatus
from src.pitchdesk.models.organization import Organization, OrganizationMember
from src.pitchdesk.models.song import Pitch, Song
from src.pitchdesk.models.user import User

__all__ = [
    # Enums
    "OrganizationRole",
    "PitchStatus",
    # Models
    "Organization",
    "OrganizationMember",
    "Pitch",
    "Song",
    "User",
]
