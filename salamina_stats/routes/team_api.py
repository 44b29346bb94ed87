from __future__ import annotations

from flask import Blueprint

from ..app_utils import make_error, make_ok
from ..errors import APIError
from ..fotmob_client import SOURCE, get_fetcher, get_team_data
from ..parsers import VIEW_PARSERS, build_team_overview, build_view

bp = Blueprint("team_api", __name__, url_prefix="/api/team")


def _unavailable():
    fetcher = get_fetcher()
    error = APIError(
        SOURCE,
        "UNAVAILABLE",
        "Team data is currently unavailable.",
        fetcher.last_error.code if fetcher.last_error else None,
    )
    return make_error(error, "FotMob data unavailable", status_code=503)


@bp.get("/overview")
def overview():
    data = get_team_data()
    if data is None:
        return _unavailable()
    return make_ok(build_team_overview(data), "OK")


@bp.get("/<view>")
def single_view(view: str):
    if view not in VIEW_PARSERS:
        return make_error(
            {"view": view, "available": sorted(VIEW_PARSERS)},
            "Unknown view",
            status_code=404,
        )
    data = get_team_data()
    if data is None:
        return _unavailable()
    return make_ok(build_view(data, view), "OK")
