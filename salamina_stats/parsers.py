"""
Parsers that turn the raw FotMob team payload into small UI-ready records.

Each parser is total: missing sections give None or an empty list, and
missing or mistyped fields fall back to safe defaults.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .constants import TEAM_ID, TOP_PLAYERS_LIMIT
from .domain.contracts import TeamData
from .domain.models import (
    FormEntry,
    LastMatchInfo,
    LeagueRanking,
    LeagueTable,
    LeagueTableRow,
    NextMatchInfo,
    TableLegendEntry,
    TeamColors,
    TopAssister,
    TopRatedPlayer,
    TopScorer,
    VenueInfo,
)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, (list, tuple)) else []


def _int(value: Any, default: Optional[int] = 0) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def _opt_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return _str(value)


def _overview(data: TeamData) -> Dict[str, Any]:
    return _as_dict(_as_dict(data).get("overview"))


def _is_tracked(team: Any) -> bool:
    return _int(_as_dict(team).get("id"), None) == TEAM_ID


def _opponent_name(match: Dict[str, Any], is_home: bool) -> str:
    other = _as_dict(match.get("away" if is_home else "home"))
    return (
        _str(other.get("name"))
        or _str(_as_dict(match.get("opponent")).get("name"))
        or ""
    )


def _top_players(data: TeamData, category: str) -> List[Dict[str, Any]]:
    top = _as_dict(_overview(data).get("topPlayers"))
    players = _as_list(_as_dict(top.get(category)).get("players"))
    return [_as_dict(p) for p in players[:TOP_PLAYERS_LIMIT]]


def parse_league_table(data: TeamData) -> Optional[LeagueTable]:
    """
    Standings from the first table in the payload.

    FotMob sends one table per group for split competitions; only index 0
    is used. Rows keep source order and ``position`` is FotMob's ``idx``.
    """
    tables = _as_list(_overview(data).get("table"))
    if not tables:
        return None

    table = _as_dict(tables[0])
    rows = tuple(
        LeagueTableRow(
            id=_int(row.get("id")),
            name=_str(row.get("name")),
            short_name=_str(row.get("shortName")),
            played=_int(row.get("played")),
            wins=_int(row.get("wins")),
            draws=_int(row.get("draws")),
            losses=_int(row.get("losses")),
            goal_difference=_int(row.get("goalDifference")),
            pts=_int(row.get("pts")),
            position=_int(row.get("idx")),
            qual_color=_opt_str(row.get("qualColor")),
        )
        for row in map(_as_dict, _as_list(table.get("all")))
    )
    legend = tuple(
        TableLegendEntry(color=_str(item.get("color")), title=_str(item.get("title")))
        for item in map(_as_dict, _as_list(table.get("legend")))
    )
    return LeagueTable(rows=rows, legend=legend)


def parse_top_scorers(data: TeamData) -> List[TopScorer]:
    """Top three goalscorers, in FotMob's order."""
    return [
        TopScorer(name=_str(p.get("name")), goals=_int(p.get("goals")))
        for p in _top_players(data, "byGoals")
    ]


def parse_top_assisters(data: TeamData) -> List[TopAssister]:
    return [
        TopAssister(name=_str(p.get("name")), assists=_int(p.get("assists")))
        for p in _top_players(data, "byAssists")
    ]


def parse_top_rated(data: TeamData) -> List[TopRatedPlayer]:
    return [
        TopRatedPlayer(name=_str(p.get("name")), rating=_opt_str(p.get("rating")))
        for p in _top_players(data, "byRating")
    ]


def parse_league_rankings(data: TeamData) -> List[LeagueRanking]:
    """
    One ranking per league stat category that lists the tracked team.

    Categories without the team are skipped. ``value`` prefers the team's
    own entry and falls back to the category-level ``teamValue``.
    """
    categories = _as_list(_as_dict(_as_dict(data).get("stats")).get("teams"))

    rankings: List[LeagueRanking] = []
    for cat in map(_as_dict, categories):
        team_data = [_as_dict(t) for t in _as_list(cat.get("teamData"))]
        entry = next((t for t in team_data if _int(t.get("teamId"), None) == TEAM_ID), None)
        if entry is None:
            continue

        header = _str(cat.get("header"))
        value = entry.get("value")
        if value is None or value == "":
            value = cat.get("teamValue")
        rankings.append(
            LeagueRanking(
                label=header,
                translation_key=_str(cat.get("localizedTitleId")) or header,
                value=value,
                rank=_int(entry.get("rank")),
                total_teams=len(team_data),
            )
        )
    return rankings


_VENUE_KEYWORDS = (
    ("capacity", ("capacity",)),
    ("surface", ("surface",)),
    ("year_opened", ("year", "opened")),
)


def parse_venue_info(data: TeamData) -> Optional[VenueInfo]:
    venue = _overview(data).get("venue")
    if not isinstance(venue, dict):
        return None

    widget = _as_dict(venue.get("widget"))
    found: Dict[str, Optional[str]] = {}
    for pair in _as_list(venue.get("statPairs")):
        for stat in map(_as_dict, _as_list(pair)):
            title = _str(stat.get("title")).lower()
            for field_name, keywords in _VENUE_KEYWORDS:
                # first match wins
                if field_name in found:
                    continue
                if any(k in title for k in keywords):
                    value = _opt_str(stat.get("value"))
                    # a blank value does not claim the field
                    if value is not None:
                        found[field_name] = value

    return VenueInfo(
        name=_str(widget.get("name")),
        city=_str(widget.get("city")),
        **found,
    )


def parse_next_match(data: TeamData) -> Optional[NextMatchInfo]:
    match = _overview(data).get("nextMatch")
    if not isinstance(match, dict):
        return None

    is_home = _is_tracked(match.get("home"))
    return NextMatchInfo(
        opponent_name=_opponent_name(match, is_home),
        is_home=is_home,
        utc_time=_as_dict(match.get("status")).get("utcTime"),
    )


def parse_last_match(data: TeamData) -> Optional[LastMatchInfo]:
    match = _overview(data).get("lastMatch")
    if not isinstance(match, dict):
        return None

    is_home = _is_tracked(match.get("home"))
    return LastMatchInfo(
        opponent_name=_opponent_name(match, is_home),
        is_home=is_home,
        home_score=_int(_as_dict(match.get("home")).get("score"), None),
        away_score=_int(_as_dict(match.get("away")).get("score"), None),
    )


def parse_team_form(data: TeamData) -> List[FormEntry]:
    return [
        FormEntry(
            result_string=_str(entry.get("resultString")),
            result=_int(entry.get("result")),
            score=_str(entry.get("score")),
            opponent_name=_str(_as_dict(entry.get("opponent")).get("name")),
        )
        for entry in map(_as_dict, _as_list(_overview(data).get("teamForm")))
    ]


def parse_team_colors(data: TeamData) -> Optional[TeamColors]:
    colors = _overview(data).get("teamColors")
    if not isinstance(colors, dict):
        return None
    return TeamColors(
        dark_mode=_opt_str(colors.get("darkMode")),
        light_mode=_opt_str(colors.get("lightMode")),
        font_dark_mode=_opt_str(colors.get("fontDarkMode")),
        font_light_mode=_opt_str(colors.get("fontLightMode")),
    )


def _dump(record: Any) -> Any:
    if record is None:
        return None
    if isinstance(record, list):
        return [item.to_dict() for item in record]
    return record.to_dict()


VIEW_PARSERS = {
    "table": parse_league_table,
    "top-scorers": parse_top_scorers,
    "top-assists": parse_top_assisters,
    "top-rated": parse_top_rated,
    "rankings": parse_league_rankings,
    "venue": parse_venue_info,
    "next-match": parse_next_match,
    "last-match": parse_last_match,
    "form": parse_team_form,
    "colors": parse_team_colors,
}


def build_view(data: TeamData, view: str) -> Any:
    """JSON-ready payload for a single named view (KeyError if unknown)."""
    return _dump(VIEW_PARSERS[view](data))


def build_team_overview(data: TeamData) -> Dict[str, Any]:
    return {
        "table": build_view(data, "table"),
        "topScorers": build_view(data, "top-scorers"),
        "topAssists": build_view(data, "top-assists"),
        "topRated": build_view(data, "top-rated"),
        "rankings": build_view(data, "rankings"),
        "venue": build_view(data, "venue"),
        "nextMatch": build_view(data, "next-match"),
        "lastMatch": build_view(data, "last-match"),
        "form": build_view(data, "form"),
        "colors": build_view(data, "colors"),
    }
