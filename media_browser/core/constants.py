"""
Core constants used across the application. Keep these simple and documented.
"""

# Presentation parameters sent with every embed-redirector request. Not user-configurable.
PLAYER_SETTINGS: dict[str, str] = {
    "player_font": "Poppins",
    "player_bg_color": "000000",
    "player_font_color": "ffffff",
    "player_primary_color": "34cfeb",
    "player_secondary_color": "6900e0",
    "player_loader": "1",
    "preferred_server": "0",
    "player_sources_toggle_type": "2",
}

EMBED_USER_AGENT: str = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

STREAM_URL_PREFIX: str = "https://"
STREAM_FETCH_FAILED: str = "Failed to fetch stream"

DEFAULT_SORT: str = "popularity.desc"
SORT_OPTIONS: list[tuple[str, str]] = [
    ("popularity.desc", "Most Popular"),
    ("vote_average.desc", "Highest Rated"),
    ("primary_release_date.desc", "Newest"),
    ("primary_release_date.asc", "Oldest"),
    ("revenue.desc", "Highest Revenue"),
]

QUALITY_OPTIONS: list[tuple[str, str]] = [
    ("HD", "HD"),
    ("FHD", "Full HD"),
    ("4K", "4K"),
]

EARLIEST_YEAR: int = 1900
MAIN_CAST_LIMIT: int = 6
DIRECTOR_JOB: str = "Director"
