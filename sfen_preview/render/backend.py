"""
Rendering backend interface.

A backend turns a ``Diagram`` into encoded image bytes. Backends are
long-lived: any caches they keep are reused across render calls.
"""

from abc import ABC, abstractmethod

from .instructions import Diagram


class RenderBackend(ABC):
    """Strategy that encodes a laid-out diagram."""

    #: MIME type of the bytes returned by ``render``
    mime_type: str = "application/octet-stream"

    #: Whether the layout should emit board pieces as ``Tile``s
    prefers_tiles: bool = False

    @abstractmethod
    def render(self, diagram: Diagram) -> bytes:
        """Encode the diagram."""
        pass
