"""Map a user-supplied video URL to an embeddable player descriptor.

Rules are tried in a fixed priority order and the first one that returns a
descriptor wins. Several heuristics overlap (a Vimeo URL may also contain
"player"), so the order in ``PLAYER_RULES`` is part of the behavior.
"""
import logging
from typing import Callable, Optional, Sequence, Tuple

from player.extractors import (
    dailymotion_id,
    file_extension,
    vimeo_id,
    youtube_short_id,
    youtube_watch_id,
)
from player.schemas import (
    IframePlayer,
    NativeVideoPlayer,
    PlayerDescriptor,
    UnsupportedPlayer,
)

logger = logging.getLogger(__name__)

YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/{id}"
VIMEO_EMBED_URL = "https://player.vimeo.com/video/{id}"
DAILYMOTION_EMBED_URL = "https://www.dailymotion.com/embed/video/{id}"

HLS_MIME_TYPE = "application/x-mpegURL"
VIDEO_MIME_TYPES = {
    "mp4": "video/mp4",
    "webm": "video/webm",
    "ogg": "video/ogg",
    "mov": "video/mp4",
    "avi": "video/avi",
    "mkv": "video/x-matroska",
}

UNSUPPORTED_REASON = "Video format not supported"
URL_PREVIEW_LENGTH = 50

Rule = Callable[[str], Optional[PlayerDescriptor]]


def _unsupported(url: str, reason: str = UNSUPPORTED_REASON) -> UnsupportedPlayer:
    return UnsupportedPlayer(reason=reason, url_preview=url[:URL_PREVIEW_LENGTH])


def _provider_embed(
    url: str,
    provider: str,
    video_id: Optional[str],
    template: str,
) -> PlayerDescriptor:
    if video_id is None:
        return _unsupported(url, f"Could not extract {provider} video id")
    return IframePlayer(src=template.format(id=video_id), provider=provider)


def youtube_watch_rule(url: str) -> Optional[PlayerDescriptor]:
    if "youtube.com/watch" not in url:
        return None
    return _provider_embed(url, "YouTube", youtube_watch_id(url), YOUTUBE_EMBED_URL)


def youtube_short_rule(url: str) -> Optional[PlayerDescriptor]:
    if "youtu.be/" not in url:
        return None
    return _provider_embed(url, "YouTube", youtube_short_id(url), YOUTUBE_EMBED_URL)


def youtube_embed_rule(url: str) -> Optional[PlayerDescriptor]:
    if "youtube.com/embed" not in url:
        return None
    return IframePlayer(src=url, provider="YouTube")


def vimeo_rule(url: str) -> Optional[PlayerDescriptor]:
    if "vimeo.com" not in url:
        return None
    return _provider_embed(url, "Vimeo", vimeo_id(url), VIMEO_EMBED_URL)


def embed_hint_rule(url: str) -> Optional[PlayerDescriptor]:
    if "iframe" in url or "player" in url:
        return IframePlayer(src=url)
    return None


def hls_rule(url: str) -> Optional[PlayerDescriptor]:
    if file_extension(url) != "m3u8":
        return None
    return NativeVideoPlayer(src=url, mime_type=HLS_MIME_TYPE, hls=True)


def video_file_rule(url: str) -> Optional[PlayerDescriptor]:
    mime_type = VIDEO_MIME_TYPES.get(file_extension(url) or "")
    if mime_type is None:
        return None
    return NativeVideoPlayer(src=url, mime_type=mime_type)


def dailymotion_rule(url: str) -> Optional[PlayerDescriptor]:
    if "dailymotion.com" not in url:
        return None
    return _provider_embed(url, "Dailymotion", dailymotion_id(url), DAILYMOTION_EMBED_URL)


def http_fallback_rule(url: str) -> Optional[PlayerDescriptor]:
    if not url.lower().startswith("http"):
        return None
    if "/embed" in url or "/player" in url or "iframe" in url:
        return IframePlayer(src=url)
    # unknown direct link, the browser sniffs the content type
    return NativeVideoPlayer(src=url)


PLAYER_RULES: Sequence[Tuple[str, Rule]] = (
    ("youtube_watch", youtube_watch_rule),
    ("youtube_short", youtube_short_rule),
    ("youtube_embed", youtube_embed_rule),
    ("vimeo", vimeo_rule),
    ("embed_hint", embed_hint_rule),
    ("hls", hls_rule),
    ("video_file", video_file_rule),
    ("dailymotion", dailymotion_rule),
    ("http_fallback", http_fallback_rule),
)


def classify(raw_url: Optional[str]) -> PlayerDescriptor:
    """Return the player descriptor for ``raw_url``.

    Never raises: URLs that match no rule, or whose provider id cannot be
    extracted, yield an ``UnsupportedPlayer``.
    """
    url = (raw_url or "").strip()

    for name, rule in PLAYER_RULES:
        descriptor = rule(url)
        if descriptor is not None:
            logger.debug(f"URL matched player rule {name}", extra={"rule": name, "kind": descriptor.kind})
            return descriptor

    logger.info("Video URL not recognized", extra={"url_preview": url[:URL_PREVIEW_LENGTH]})
    return _unsupported(url)
