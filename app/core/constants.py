"""
Application-wide constants and configuration limits.

Grouped into static classes for namespace management and discoverability.
"""


class YouTubeConfig:
    """Limits imposed by the YouTube Data API v3."""
    PAGE_SIZE = 50  # maxResults ceiling for playlistItems.list
    BATCH_SIZE = 50  # Max ids per videos.list call


class RateLimitConfig:
    """Rate limiting thresholds (requests per minute)."""
    DURATION = "20/minute"


class SearchMessages:
    """User-facing messages for failed searches."""
    INVALID_INPUT = "Could not extract playlist ID. Please check the URL or ID."
    FETCH_FAILED = "Failed to fetch playlist data. Make sure the playlist is public."


class SamplePlaylists:
    """Public playlists used by the random playlist endpoint."""
    IDS = (
        "PL9bw4S5ePsEHfkR5aLXTU4Yf_1Rtw98lH",
        "PL9bw4S5ePsEGj_qcEj7SQcGFgDViWSZUF",
        "PLFs4vir_WsTxontcYm5ctqp89cNBJKNrs",
        "PLFs4vir_WsTySi9F8v5pvCi6zQj7Cwneu",
        "PLFs4vir_WsTwEd-nJgVJCZPNL3HALHHpF",
        "PLINj2JJM1jxOxE-4mVaEJCEzO1CiR0Cwm",
        "PLINj2JJM1jxObDqF8VXonjQhrBnnMrtGH",
    )


class SpeedConfig:
    """Accepted range of playback speed multipliers."""
    MIN_MULTIPLIER = 0.1
    MAX_MULTIPLIER = 16.0
