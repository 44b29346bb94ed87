"""
Fixed identifiers for the tracked club and the FotMob team endpoint.
These never vary at runtime; tunables live in settings.py.
"""

# FotMob identifiers for Nea Salamina Famagusta
TEAM_ID = 8590
COUNTRY_CODE = "CYP"

FOTMOB_TEAM_URL = f"https://www.fotmob.com/api/data/teams?id={TEAM_ID}&ccode3={COUNTRY_CODE}"

# FotMob rejects requests that do not look like a browser
FOTMOB_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

FOTMOB_REQUEST_HEADERS = {
    "User-Agent": FOTMOB_USER_AGENT,
    "Accept": "application/json",
}

CACHE_TTL_SECONDS = 5 * 60

# Leaderboards shown on the stats page are capped at a podium
TOP_PLAYERS_LIMIT = 3
