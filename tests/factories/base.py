"""Base factory configuration for polyfactory."""

from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from src.pitchdesk.models.base import utc_now

__all__ = ["BaseFactory", "utc_now"]


class BaseFactory(SQLAlchemyFactory):
    """Base factory with common configuration for all models.

    Relationships and foreign keys are never generated; tests set FK
    values explicitly so every row belongs to a known parent.
    """

    __is_base_factory__ = True
    __set_relationships__ = False
    __set_foreign_keys__ = False
