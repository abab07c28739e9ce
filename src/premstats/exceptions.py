"""
Domain exceptions raised by the service layer.

The analytics engine itself never raises for empty inputs; these exceptions
signal lookups of reference data that does not exist.
"""

from typing import Any


class PremStatsError(Exception):
    """Base exception for PremStats errors."""

    def __init__(self, message: str, code: str = "PREMSTATS_ERROR"):
        super().__init__(message)
        self.message = message
        self.code = code


class NotFoundError(PremStatsError):
    """A referenced season, team or other entity does not exist."""

    def __init__(self, resource: str, identifier: Any, context: str | None = None):
        self.resource = resource
        self.identifier = identifier
        self.context = context
        message = f"{resource} {identifier} not found"
        if context:
            message = f"{message} in {context}"
        super().__init__(message, code="NOT_FOUND")


class SeasonNotFoundError(NotFoundError):
    """Raised when a season identifier (or year) is unknown."""

    def __init__(self, identifier: Any):
        super().__init__("Season", identifier)


class TeamNotFoundError(NotFoundError):
    """Raised when a team identifier is unknown."""

    def __init__(self, identifier: Any, context: str | None = None):
        super().__init__("Team", identifier, context)


class MatchNotFoundError(NotFoundError):
    """Raised when a match identifier is unknown."""

    def __init__(self, identifier: Any):
        super().__init__("Match", identifier)


class PlayerNotFoundError(NotFoundError):
    """Raised when a player identifier is unknown."""

    def __init__(self, identifier: Any):
        super().__init__("Player", identifier)
