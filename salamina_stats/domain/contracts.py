"""Shape of the FotMob team payload (only the fields we read).

Every key is optional: FotMob omits whole sections for small leagues and
off-season periods, so parsers must treat each level as possibly missing.
"""

from typing import List, Tuple, TypedDict


class TeamRef(TypedDict, total=False):
    id: int
    name: str


class ScoredTeamRef(TypedDict, total=False):
    id: int
    name: str
    score: int


class TableRow(TypedDict, total=False):
    id: int
    name: str
    shortName: str
    played: int
    wins: int
    draws: int
    losses: int
    goalDifference: int
    pts: int
    idx: int
    qualColor: str


class TableLegend(TypedDict, total=False):
    color: str
    title: str


class Table(TypedDict, total=False):
    all: List[TableRow]
    legend: List[TableLegend]


class TopPlayer(TypedDict, total=False):
    id: int
    name: str
    goals: int
    assists: int
    rating: str
    teamId: int


class TopPlayersCategory(TypedDict, total=False):
    header: str
    players: List[TopPlayer]


class TopPlayers(TypedDict, total=False):
    byGoals: TopPlayersCategory
    byAssists: TopPlayersCategory
    byRating: TopPlayersCategory


class TeamFormEntry(TypedDict, total=False):
    result: int  # 0 = loss, 1 = draw, 3 = win
    resultString: str
    score: str
    opponent: TeamRef


class MatchStatus(TypedDict, total=False):
    utcTime: str


class NextMatch(TypedDict, total=False):
    id: str
    opponent: TeamRef
    home: TeamRef
    away: TeamRef
    notStarted: bool
    status: MatchStatus


class LastMatch(TypedDict, total=False):
    id: str
    opponent: TeamRef
    home: ScoredTeamRef
    away: ScoredTeamRef


class VenueWidget(TypedDict, total=False):
    name: str
    city: str
    country: str
    lat: float
    long: float


class VenueStat(TypedDict, total=False):
    value: str
    title: str


class Venue(TypedDict, total=False):
    widget: VenueWidget
    statPairs: List[Tuple[VenueStat, VenueStat]]


class TeamColors(TypedDict, total=False):
    darkMode: str
    lightMode: str
    fontDarkMode: str
    fontLightMode: str


class Overview(TypedDict, total=False):
    table: List[Table]
    topPlayers: TopPlayers
    teamForm: List[TeamFormEntry]
    nextMatch: NextMatch
    lastMatch: LastMatch
    venue: Venue
    teamColors: TeamColors


class TeamStatEntry(TypedDict, total=False):
    teamName: str
    teamId: int
    value: str
    rank: int


class TeamStatCategory(TypedDict, total=False):
    header: str
    localizedTitleId: str
    teamValue: str
    teamData: List[TeamStatEntry]


class Stats(TypedDict, total=False):
    teams: List[TeamStatCategory]
    players: list


class TeamData(TypedDict, total=False):
    overview: Overview
    stats: Stats
