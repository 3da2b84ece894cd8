from dataclasses import dataclass, field
from fnmatch import fnmatch
from typing import Any, Dict, List, Mapping, Optional

from .render.layout import RenderOptions


TEXT_COLOR_MODES = ("default", "white", "black")

SETTINGS_PREFIX = "sfen-viewer."


@dataclass
class PreviewConfig:
    """Editor-facing preview settings."""
    text_color: str = "default"
    font_size: float = 30
    file_selector: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.text_color not in TEXT_COLOR_MODES:
            raise ValueError(
                f"text_color must be one of {', '.join(TEXT_COLOR_MODES)}, got {self.text_color!r}"
            )
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size!r}")

    @classmethod
    def from_dict(cls, settings: Mapping[str, Any]) -> 'PreviewConfig':
        """Build a config from ``sfen-viewer.*`` settings; other keys are ignored.

        Args:
            settings: Flat settings mapping, e.g. ``{"sfen-viewer.font-size": 24}``.

        Returns:
            PreviewConfig: Config with defaults for missing keys.
        """
        defaults = cls()
        return cls(
            text_color=settings.get(SETTINGS_PREFIX + "text-color", defaults.text_color),
            font_size=settings.get(SETTINGS_PREFIX + "font-size", defaults.font_size),
            file_selector=list(settings.get(SETTINGS_PREFIX + "file-selector", [])),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            SETTINGS_PREFIX + "text-color": self.text_color,
            SETTINGS_PREFIX + "font-size": self.font_size,
            SETTINGS_PREFIX + "file-selector": list(self.file_selector),
        }

    def is_dark(self, theme_is_dark: bool = False) -> bool:
        """Whether to draw for a dark background."""
        if self.text_color == "default":
            return theme_is_dark
        return self.text_color == "white"

    def resolve_text_color(self, theme_is_dark: bool = False) -> str:
        return "white" if self.is_dark(theme_is_dark) else "black"

    def accepts(self, filename: Optional[str]) -> bool:
        """Check the document against the file selector; no patterns accept all."""
        if not self.file_selector:
            return True
        if filename is None:
            return False
        return any(fnmatch(filename, pattern) for pattern in self.file_selector)

    def render_options(self, theme_is_dark: bool = False, use_tiles: bool = False) -> RenderOptions:
        return RenderOptions.from_font_size(
            self.font_size,
            text_color=self.resolve_text_color(theme_is_dark),
            use_tiles=use_tiles,
        )
