from src.pitchdesk.schemas.organization import (
    MemberAdd,
    MemberListItem,
    MemberRead,
    OrganizationCreate,
    OrganizationListItem,
    OrganizationRead,
)
from src.pitchdesk.schemas.pagination import ApiModel, PaginatedResponse, PaginationMeta
from src.pitchdesk.schemas.song import (
    PitchCreate,
    PitchRead,
    SongCreate,
    SongListItem,
    SongRead,
)

__all__ = [
    # Base
    "ApiModel",
    # Organization
    "MemberAdd",
    "MemberListItem",
    "MemberRead",
    "OrganizationCreate",
    "OrganizationListItem",
    "OrganizationRead",
    # Pagination
    "PaginatedResponse",
    "PaginationMeta",
    # Song
    "PitchCreate",
    "PitchRead",
    "SongCreate",
    "SongListItem",
    "SongRead",
]
