"""
Player API and stream path constants.
"""

API_PATH: str = "/player_api.php"

DEFAULT_STREAM_FORMAT: str = "ts"

# Actions that need the user's allowed output formats before their stream URLs can be built
PROFILE_PREFETCH_ACTIONS: frozenset[str] = frozenset(
    {"get_live_streams", "get_vod_streams", "get_vod_info", "get_series_info"}
)

# Stream path prefixes per content kind
LIVE_PATH: str = "live"
SERIES_PATH: str = "series"
MOVIE_PATH: str = "movie"
TIMESHIFT_PATH: str = "timeshift"

# Timeshift start times are sent as YYYY-MM-DD:HH-MM
TIMESHIFT_START_FORMAT: str = "%Y-%m-%d:%H-%M"
