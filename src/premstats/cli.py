#!/usr/bin/env python3
"""
Command-line interface for PremStats analytics.

Usage:
    premstats standings --season 32
    premstats summary --season 32
    premstats team-stats --team 7 --season 32
    premstats top-scorers --season 32 --limit 10
    premstats completeness
    premstats completeness --year 2015

Every command reads from PostgreSQL (DATABASE_URL) unless --fixture points
at a JSON snapshot, and prints JSON to stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

from .core.config import get_settings
from .exceptions import NotFoundError
from .repositories.base import MatchFactProvider

logger = logging.getLogger("premstats.cli")


def get_provider(args: argparse.Namespace) -> MatchFactProvider:
    """Provider for a command: a JSON fixture if given, else PostgreSQL."""
    if args.fixture:
        from .repositories.memory import InMemoryMatchProvider

        return InMemoryMatchProvider.from_json_file(args.fixture)

    from .pg_connection import get_postgres_db
    from .repositories.postgres import PostgresMatchProvider

    return PostgresMatchProvider(get_postgres_db())


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_standings(args: argparse.Namespace) -> int:
    """Print the league table for a season."""
    from .services.standings import get_standings

    standings = get_standings(get_provider(args), args.season)
    _print_json(standings.model_dump(mode="json"))
    return 0


def cmd_summary(args: argparse.Namespace) -> int:
    """Print a season summary."""
    from .services.seasons import get_season_summary

    summary = get_season_summary(get_provider(args), args.season)
    _print_json(summary.model_dump(mode="json", exclude_none=True))
    return 0


def cmd_team_stats(args: argparse.Namespace) -> int:
    """Print one team's record for a season."""
    from .services.teams import get_team_season_stats

    stats = get_team_season_stats(get_provider(args), args.team, args.season)
    _print_json(stats.model_dump(mode="json"))
    return 0


def cmd_top_scorers(args: argparse.Namespace) -> int:
    """Print the top scorers for a season."""
    from .services.players import get_top_scorers

    limit = args.limit or get_settings().top_scorers_limit
    scorers = get_top_scorers(get_provider(args), args.season, limit)
    _print_json([s.model_dump(mode="json") for s in scorers])
    return 0


def cmd_completeness(args: argparse.Namespace) -> int:
    """Print the completeness report, or one season's record with --year."""
    from .services.reports import get_completeness_report, get_season_completeness

    provider = get_provider(args)
    if args.year is not None:
        result = get_season_completeness(provider, args.year)
    else:
        result = get_completeness_report(provider)
        if result.unavailable_sections:
            logger.warning(
                "Report generated without: %s", ", ".join(result.unavailable_sections)
            )

    _print_json(result.model_dump(mode="json"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="premstats",
        description="Premier League statistics computed from match results",
    )
    parser.add_argument(
        "--fixture",
        help="Read facts from a JSON fixture instead of PostgreSQL",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # standings
    standings_parser = subparsers.add_parser("standings", help="League table for a season")
    standings_parser.add_argument("--season", type=int, required=True, help="Season ID")
    standings_parser.set_defaults(func=cmd_standings)

    # summary
    summary_parser = subparsers.add_parser("summary", help="Season summary")
    summary_parser.add_argument("--season", type=int, required=True, help="Season ID")
    summary_parser.set_defaults(func=cmd_summary)

    # team-stats
    team_parser = subparsers.add_parser("team-stats", help="A team's season record")
    team_parser.add_argument("--team", type=int, required=True, help="Team ID")
    team_parser.add_argument("--season", type=int, required=True, help="Season ID")
    team_parser.set_defaults(func=cmd_team_stats)

    # top-scorers
    scorers_parser = subparsers.add_parser("top-scorers", help="Top scorers for a season")
    scorers_parser.add_argument("--season", type=int, required=True, help="Season ID")
    scorers_parser.add_argument("--limit", type=int, help="Number of players (default from settings)")
    scorers_parser.set_defaults(func=cmd_top_scorers)

    # completeness
    completeness_parser = subparsers.add_parser("completeness", help="Data completeness report")
    completeness_parser.add_argument("--year", type=int, help="Only the season starting in this year")
    completeness_parser.set_defaults(func=cmd_completeness)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except NotFoundError as e:
        logger.error("%s", e.message)
        return 1


if __name__ == "__main__":
    sys.exit(main())
