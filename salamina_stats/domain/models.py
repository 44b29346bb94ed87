"""Normalized, UI-ready records derived from the FotMob team payload."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..constants import TEAM_ID


def _compact(payload: Dict[str, Any]) -> Dict[str, Any]:
    # Optional fields are omitted from JSON rather than sent as null
    return {k: v for k, v in payload.items() if v is not None}


@dataclass(frozen=True)
class LeagueTableRow:
    id: int
    name: str
    short_name: str
    played: int
    wins: int
    draws: int
    losses: int
    goal_difference: int
    pts: int
    position: int
    qual_color: Optional[str] = None

    @property
    def is_tracked_team(self) -> bool:
        return self.id == TEAM_ID

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "id": self.id,
                "name": self.name,
                "shortName": self.short_name,
                "played": self.played,
                "wins": self.wins,
                "draws": self.draws,
                "losses": self.losses,
                "goalDifference": self.goal_difference,
                "pts": self.pts,
                "position": self.position,
                "qualColor": self.qual_color,
                "isTrackedTeam": self.is_tracked_team,
            }
        )


@dataclass(frozen=True)
class TableLegendEntry:
    color: str
    title: str

    def to_dict(self) -> Dict[str, Any]:
        return {"color": self.color, "title": self.title}


@dataclass(frozen=True)
class LeagueTable:
    """Standings of the first table FotMob returns, in source order."""

    rows: Tuple[LeagueTableRow, ...] = field(default_factory=tuple)
    legend: Tuple[TableLegendEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": [row.to_dict() for row in self.rows],
            "legend": [entry.to_dict() for entry in self.legend],
        }


@dataclass(frozen=True)
class TopScorer:
    name: str
    goals: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "goals": self.goals}


@dataclass(frozen=True)
class TopAssister:
    name: str
    assists: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "assists": self.assists}


@dataclass(frozen=True)
class TopRatedPlayer:
    name: str
    rating: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"name": self.name, "rating": self.rating})


@dataclass(frozen=True)
class LeagueRanking:
    """Where the tracked team sits in one league-wide stat category."""

    label: str
    translation_key: str
    value: Any
    rank: int
    total_teams: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "translationKey": self.translation_key,
            "value": self.value,
            "rank": self.rank,
            "totalTeams": self.total_teams,
        }


@dataclass(frozen=True)
class VenueInfo:
    name: str
    city: str
    capacity: Optional[str] = None
    surface: Optional[str] = None
    year_opened: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "name": self.name,
                "city": self.city,
                "capacity": self.capacity,
                "surface": self.surface,
                "yearOpened": self.year_opened,
            }
        )


@dataclass(frozen=True)
class NextMatchInfo:
    opponent_name: str
    is_home: bool
    utc_time: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "opponentName": self.opponent_name,
                "utcTime": self.utc_time,
                "isHome": self.is_home,
            }
        )


@dataclass(frozen=True)
class LastMatchInfo:
    opponent_name: str
    is_home: bool
    home_score: Optional[int] = None
    away_score: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "opponentName": self.opponent_name,
                "isHome": self.is_home,
                "homeScore": self.home_score,
                "awayScore": self.away_score,
            }
        )


@dataclass(frozen=True)
class FormEntry:
    result_string: str
    result: int
    score: str
    opponent_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "resultString": self.result_string,
            "result": self.result,
            "score": self.score,
            "opponentName": self.opponent_name,
        }


@dataclass(frozen=True)
class TeamColors:
    dark_mode: Optional[str] = None
    light_mode: Optional[str] = None
    font_dark_mode: Optional[str] = None
    font_light_mode: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "darkMode": self.dark_mode,
                "lightMode": self.light_mode,
                "fontDarkMode": self.font_dark_mode,
                "fontLightMode": self.font_light_mode,
            }
        )
