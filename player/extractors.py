"""Id and extension extraction helpers for provider URLs.

Each helper returns None when the expected delimiter or a well-formed id
is missing, so callers never build an embed URL from a partial match.
"""
import re
from typing import Iterable, Optional
from urllib.parse import parse_qs, urlsplit

VIDEO_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def _valid_id(candidate: Optional[str]) -> Optional[str]:
    if candidate and VIDEO_ID_PATTERN.fullmatch(candidate):
        return candidate
    return None


def _segment_after(url: str, marker: str, stops: Iterable[str]) -> Optional[str]:
    """Text following the first ``marker``, cut at the earliest stop char"""
    index = url.find(marker)
    if index == -1:
        return None

    rest = url[index + len(marker):]
    for stop in stops:
        rest = rest.split(stop, 1)[0]
    return rest


def youtube_watch_id(url: str) -> Optional[str]:
    """``v`` query parameter of a youtube.com/watch URL"""
    values = parse_qs(urlsplit(url).query).get("v")
    if not values:
        return None
    return _valid_id(values[0])


def youtube_short_id(url: str) -> Optional[str]:
    """Path segment after ``youtu.be/``"""
    return _valid_id(_segment_after(url, "youtu.be/", ("?", "#", "/")))


def vimeo_id(url: str) -> Optional[str]:
    """Final path segment of a vimeo.com URL"""
    path = urlsplit(url).path.rstrip("/")
    if not path:
        return None
    return _valid_id(path.rsplit("/", 1)[-1])


def dailymotion_id(url: str) -> Optional[str]:
    """Segment after ``video/``, without the ``_slug`` suffix"""
    return _valid_id(_segment_after(url, "video/", ("_", "?", "#", "/")))


def file_extension(url: str) -> Optional[str]:
    """Lowercased extension of the URL path, ignoring query and fragment"""
    name = urlsplit(url).path.rsplit("/", 1)[-1]
    if "." not in name:
        return None
    extension = name.rsplit(".", 1)[-1].lower()
    return extension or None
