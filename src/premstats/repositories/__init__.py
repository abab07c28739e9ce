"""
Data access layer.

Provides the read-only MatchFactProvider contract and its implementations:

- PostgresMatchProvider: production provider over PostgreSQL
- InMemoryMatchProvider: fixed snapshot (tests, JSON fixtures)

Usage:
    from premstats.repositories import PostgresMatchProvider
    from premstats.pg_connection import get_postgres_db

    provider = PostgresMatchProvider(get_postgres_db())
    matches = provider.list_matches(season_id=30)
"""

from .base import MatchFactProvider
from .memory import InMemoryMatchProvider
from .postgres import PostgresMatchProvider

__all__ = [
    "MatchFactProvider",
    "InMemoryMatchProvider",
    "PostgresMatchProvider",
]
