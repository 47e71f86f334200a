"""
Playlist identifier extraction from free-form user input.
"""
import re
from typing import Optional
from urllib.parse import parse_qs, urlsplit

_PLAYLIST_ID_RE = re.compile(r"[A-Za-z0-9_-]+")
_LIST_PARAM_RE = re.compile(r"[?&]list=([A-Za-z0-9_-]+)")


def _list_param_from_url(raw: str) -> Optional[str]:
    """
    Read the ``list`` query parameter of ``raw`` parsed as a URL.

    A ``list`` value outside the ID charset is rejected rather than trimmed.

    Raises:
        ValueError: If ``raw`` cannot be parsed as a URL.
    """
    url = raw if raw.lower().startswith(("http://", "https://")) else f"https://{raw}"
    query = urlsplit(url).query

    values = parse_qs(query, keep_blank_values=True).get("list")
    if not values:
        return None
    return values[0] if _PLAYLIST_ID_RE.fullmatch(values[0]) else None


def extract_playlist_id(raw: str) -> Optional[str]:
    """
    Normalize user input into a playlist ID.

    Accepts a bare ID (``PLabc_123``), a full playlist or watch URL, or a URL
    without a scheme (``youtube.com/playlist?list=PLabc``). A bare ID is
    recognised before any URL parsing is attempted; the regex scan is only
    used for input that is not a parseable URL.

    Args:
        raw: Untrusted text typed by the user.

    Returns:
        The playlist ID, or None when nothing usable was found.
    """
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None

    if _PLAYLIST_ID_RE.fullmatch(raw):
        return raw

    try:
        return _list_param_from_url(raw)
    except ValueError:
        # Malformed URL (e.g. unbalanced IPv6 brackets)
        match = _LIST_PARAM_RE.search(raw)
        return match.group(1) if match else None
