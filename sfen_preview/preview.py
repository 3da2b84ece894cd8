"""
Preview Pipeline
================

text -> locate -> decode -> layout -> backend -> bytes

Failing to find or decode an SFEN is an expected outcome for most
hovered text: it is logged and the caller gets None. Backend errors
propagate.
"""

import base64
import logging
from dataclasses import dataclass
from typing import Optional

from .config import PreviewConfig
from .core.errors import SfenError
from .core.locator import locate
from .core.sfen import decode
from .render.backend import RenderBackend
from .render.layout import RenderOptions, layout
from .render.svg import SvgBackend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Preview:
    """Encoded diagram and its MIME type."""
    data: bytes
    mime_type: str

    def data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    def markdown(self) -> str:
        """Markdown image embedding the preview, as used in hover tooltips."""
        return f"![]({self.data_uri()})"


def _render(text: str, options: RenderOptions, backend: RenderBackend) -> Optional[Preview]:
    try:
        sfen = locate(text)
        position = decode(sfen)
    except SfenError as e:
        logger.debug("no preview for %r: %s", text, e)
        return None

    diagram = layout(position, options)
    data = backend.render(diagram)
    logger.debug("rendered %s preview (%d bytes, %sx%s)",
                 backend.mime_type, len(data), diagram.width, diagram.height)
    return Preview(data, backend.mime_type)


class SfenPreviewer:
    """
    Long-lived preview renderer.

    Owns the backend (and so its tile cache) for the lifetime of the
    host, applying the editor configuration on every request.
    """

    def __init__(self, config: Optional[PreviewConfig] = None,
                 backend: Optional[RenderBackend] = None):
        self.config = config or PreviewConfig()
        self.backend = backend or SvgBackend()

    def options(self, dark_theme: bool = False) -> RenderOptions:
        return self.config.render_options(dark_theme, use_tiles=self.backend.prefers_tiles)

    def render(self, text: str, dark_theme: bool = False,
               filename: Optional[str] = None) -> Optional[Preview]:
        """Render the SFEN found in ``text``, or None when there is nothing to show."""
        if filename is not None and not self.config.accepts(filename):
            logger.debug("skipping %s: not matched by file selector", filename)
            return None
        return _render(text, self.options(dark_theme), self.backend)


def render_sfen_preview(text: str, options: Optional[RenderOptions] = None,
                        backend: Optional[RenderBackend] = None) -> Optional[Preview]:
    """
    One-shot preview of the SFEN contained in ``text``.

    Returns None when the text holds no SFEN or it is malformed.
    """
    backend = backend or SvgBackend()
    options = options or RenderOptions(use_tiles=backend.prefers_tiles)
    return _render(text, options, backend)
