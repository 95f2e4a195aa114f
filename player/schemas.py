"""Player descriptors produced by the URL classifier"""
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class IframePlayer(BaseModel):
    """Embed the URL in an iframe"""
    kind: Literal["iframe"] = "iframe"
    src: str
    provider: Optional[str] = None


class NativeVideoPlayer(BaseModel):
    """Play the URL with a native video element"""
    kind: Literal["video"] = "video"
    src: str
    mime_type: Optional[str] = None
    hls: bool = False


class UnsupportedPlayer(BaseModel):
    """No player could be derived from the URL"""
    kind: Literal["unsupported"] = "unsupported"
    reason: str
    url_preview: str = ""


PlayerDescriptor = Annotated[
    Union[IframePlayer, NativeVideoPlayer, UnsupportedPlayer],
    Field(discriminator="kind"),
]
