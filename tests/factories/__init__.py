"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, SongFactory, ...
"""

from tests.factories.base import BaseFactory, utc_now
from tests.factories.organization import OrganizationFactory, PitchFactory, SongFactory
from tests.factories.user import OrganizationMemberFactory, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "utc_now",
    # Organization
    "OrganizationFactory",
    "PitchFactory",
    "SongFactory",
    # User
    "OrganizationMemberFactory",
    "UserFactory",
]
