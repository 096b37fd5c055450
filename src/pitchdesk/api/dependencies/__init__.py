"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Auth
from src.pitchdesk.api.dependencies.auth import CurrentUser, get_current_user

# Database
from src.pitchdesk.api.dependencies.db import DBSession, get_db_session

# Organization guards
from src.pitchdesk.api.dependencies.organization import (
    OrgManager,
    OrgMembership,
    require_org_manager,
    require_org_member,
)

# Pagination
from src.pitchdesk.api.dependencies.pagination import Pagination, get_pagination_query

# Repositories
from src.pitchdesk.api.dependencies.repositories import (
    MemberRepo,
    OrganizationRepo,
    PitchRepo,
    SongRepo,
    UserRepo,
    get_member_repository,
    get_organization_repository,
    get_pitch_repository,
    get_song_repository,
    get_user_repository,
)

# Services
from src.pitchdesk.api.dependencies.services import (
    OrganizationServiceDep,
    PitchServiceDep,
    SongServiceDep,
    get_organization_service,
    get_pitch_service,
    get_song_service,
)

__all__ = [
    # Auth
    "CurrentUser",
    "get_current_user",
    # Database
    "DBSession",
    "get_db_session",
    # Organization guards
    "OrgManager",
    "OrgMembership",
    "require_org_manager",
    "require_org_member",
    # Pagination
    "Pagination",
    "get_pagination_query",
    # Repositories
    "MemberRepo",
    "OrganizationRepo",
    "PitchRepo",
    "SongRepo",
    "UserRepo",
    "get_member_repository",
    "get_organization_repository",
    "get_pitch_repository",
    "get_song_repository",
    "get_user_repository",
    # Services
    "OrganizationServiceDep",
    "PitchServiceDep",
    "SongServiceDep",
    "get_organization_service",
    "get_pitch_service",
    "get_song_service",
]
