"""Cached FotMob team data and normalized stat views for Nea Salamina."""

import logging
import os

if not logging.getLogger().handlers:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

logging.getLogger("urllib3").setLevel(logging.WARNING)
logging.getLogger("requests").setLevel(logging.WARNING)

from .fotmob_client import get_team_data  # noqa: E402
from .parsers import (  # noqa: E402
    build_team_overview,
    parse_last_match,
    parse_league_rankings,
    parse_league_table,
    parse_next_match,
    parse_team_colors,
    parse_team_form,
    parse_top_assisters,
    parse_top_rated,
    parse_top_scorers,
    parse_venue_info,
)

__version__ = "0.1.0"

__all__ = [
    "get_team_data",
    "build_team_overview",
    "parse_league_table",
    "parse_top_scorers",
    "parse_top_assisters",
    "parse_top_rated",
    "parse_league_rankings",
    "parse_venue_info",
    "parse_next_match",
    "parse_last_match",
    "parse_team_form",
    "parse_team_colors",
]
