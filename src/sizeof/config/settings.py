"""Where: src/sizeof/config/settings.py
What: Tuning constants for search, rendering and catalog fetching.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Search constants mirror the thresholds catalog users are used to.
Trade-offs: - Validation is limited to simple boundary checks for speed.
"""

from __future__ import annotations

from typing import Final

from sizeof.config.config import Config

# Fuzzy search -----------------------------------------------------------------

# Field score at or below which a field counts as a hit (0 = perfect match).
SEARCH_THRESHOLD: Final[float] = 0.4

# Characters of offset that cost a full point of score; a match found
# 10 characters into a field is penalised by 0.1.
SEARCH_LOCATION_DISTANCE: Final[int] = 100

# Relative weight of each leaf field in the combined score.
SEARCH_FIELD_WEIGHTS: Final[dict[str, float]] = {
    "display_name": 0.7,
    "component_path": 0.3,
}

SEARCH_CACHE_SIZE_DEFAULT: Final[int] = 128


# Catalog layout ---------------------------------------------------------------

CONFIG_FILE_NAME: Final[str] = "config.yaml"
DIAGRAM_FILE_NAME: Final[str] = "diagram.svg"


# Network ----------------------------------------------------------------------

HTTP_TIMEOUT_DEFAULT: Final[float] = 15.0
HTTP_CONNECT_TIMEOUT: Final[float] = 5.0
HTTP_MAX_ATTEMPTS: Final[int] = 2
HTTP_USER_AGENT: Final[str] = "sizeof/0.1.0"

GITHUB_API_BASE: Final[str] = "https://api.github.com"
GITHUB_RAW_BASE: Final[str] = "https://raw.githubusercontent.com"


def search_cache_size(config: Config | None) -> int:
    """Return the configured search cache size, falling back on bad values."""

    size = getattr(config, "search_cache_size", SEARCH_CACHE_SIZE_DEFAULT)
    return size if isinstance(size, int) and size >= 0 else SEARCH_CACHE_SIZE_DEFAULT


def http_timeout(config: Config | None) -> float:
    """Return the configured read timeout, falling back on bad values."""

    timeout = getattr(config, "http_timeout_seconds", HTTP_TIMEOUT_DEFAULT)
    if isinstance(timeout, (int, float)) and timeout > 0:
        return float(timeout)
    return HTTP_TIMEOUT_DEFAULT


__all__ = [
    "CONFIG_FILE_NAME",
    "DIAGRAM_FILE_NAME",
    "GITHUB_API_BASE",
    "GITHUB_RAW_BASE",
    "HTTP_CONNECT_TIMEOUT",
    "HTTP_MAX_ATTEMPTS",
    "HTTP_TIMEOUT_DEFAULT",
    "HTTP_USER_AGENT",
    "SEARCH_CACHE_SIZE_DEFAULT",
    "SEARCH_FIELD_WEIGHTS",
    "SEARCH_LOCATION_DISTANCE",
    "SEARCH_THRESHOLD",
    "http_timeout",
    "search_cache_size",
]
