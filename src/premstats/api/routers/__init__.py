"""API routers."""

from . import matches, players, reports, search, seasons, standings, teams

__all__ = ["matches", "players", "reports", "search", "seasons", "standings", "teams"]
