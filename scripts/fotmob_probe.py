"""Developer-only FotMob probe.

Fetches the tracked team's payload once and prints which normalized views
came back populated. Useful after FotMob changes its response shape.

Usage::

    python -m scripts.fotmob_probe
"""
from __future__ import annotations

import sys

from salamina_stats.fotmob_client import get_fetcher
from salamina_stats.parsers import build_team_overview


def _describe(value) -> str:
    if value is None:
        return "missing ✗"
    if isinstance(value, list):
        return f"{len(value)} item(s) ✓" if value else "empty ✗"
    if isinstance(value, dict) and "rows" in value:
        return f"{len(value['rows'])} row(s) ✓"
    return "ok ✓"


def main() -> int:
    fetcher = get_fetcher()
    data = fetcher.get_team_data()
    if data is None:
        error = fetcher.last_error
        print(f"team data unavailable ✗ ({error.code if error else 'unknown'})")
        return 1

    for view, value in build_team_overview(data).items():
        print(f"{view:<12} {_describe(value)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
