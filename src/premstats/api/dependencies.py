"""
Dependency injection for API endpoints.

Routes receive a MatchFactProvider rather than a database handle; the
analytics engine only ever sees facts. Tests swap the provider through
``app.dependency_overrides[get_provider]``.
"""

from typing import Annotated

from fastapi import Depends

from ..pg_connection import PostgresDB, close_postgres_db, get_postgres_db
from ..repositories.base import MatchFactProvider
from ..repositories.postgres import PostgresMatchProvider


def get_db() -> PostgresDB:
    """
    Dependency that provides the pooled database connection.

    Returns:
        PostgresDB instance with connection pooling
    """
    return get_postgres_db()


def close_db() -> None:
    """Close the global database connection. Called at app shutdown."""
    close_postgres_db()


def get_provider() -> MatchFactProvider:
    """Dependency that provides the read-only match fact provider."""
    return PostgresMatchProvider(get_db())


# Type alias for dependency injection
ProviderDependency = Annotated[MatchFactProvider, Depends(get_provider)]
