"""HTML markup for player descriptors"""
from functools import singledispatch
from html import escape

from player.schemas import IframePlayer, NativeVideoPlayer, UnsupportedPlayer

PLAYER_HEIGHT = 400

IFRAME_ALLOW = {
    "Vimeo": "autoplay",
    "Dailymotion": "autoplay",
}
DEFAULT_IFRAME_ALLOW = "autoplay; encrypted-media"


@singledispatch
def render_player(descriptor) -> str:
    """Render a player descriptor as embeddable HTML"""
    raise TypeError(f"Unsupported descriptor type: {type(descriptor).__name__}")


@render_player.register
def _(descriptor: IframePlayer) -> str:
    allow = IFRAME_ALLOW.get(descriptor.provider or "", DEFAULT_IFRAME_ALLOW)
    return (
        f'<iframe id="video-iframe" width="100%" height="{PLAYER_HEIGHT}" '
        f'src="{escape(descriptor.src)}" frameborder="0" allow="{allow}" '
        f'allowfullscreen style="border-radius: 8px;"></iframe>'
    )


@render_player.register
def _(descriptor: NativeVideoPlayer) -> str:
    type_attr = f' type="{escape(descriptor.mime_type)}"' if descriptor.mime_type else ""
    if descriptor.hls:
        fallback = "Your browser does not support HLS streaming."
    elif descriptor.mime_type:
        fallback = "Your browser does not support this video format."
    else:
        fallback = "Your browser does not support this video URL."

    return (
        '<div style="border-radius: 8px; overflow: hidden;">'
        f'<video width="100%" height="{PLAYER_HEIGHT}" controls style="background: #000;">'
        f'<source src="{escape(descriptor.src)}"{type_attr}>{fallback}</video></div>'
    )


@render_player.register
def _(descriptor: UnsupportedPlayer) -> str:
    return (
        f'<div class="video-unsupported" style="width: 100%; height: {PLAYER_HEIGHT}px; '
        'background: #f0f0f0; border-radius: 8px; display: flex; align-items: center; '
        'justify-content: center; text-align: center;"><div>'
        f'<p style="font-size: 18px; color: #666;">{escape(descriptor.reason)}</p>'
        f'<p style="font-size: 12px; color: #999;">URL: {escape(descriptor.url_preview)}...</p>'
        '</div></div>'
    )
