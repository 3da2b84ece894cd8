"""
SVG backend: assembles the diagram as an SVG document.
"""

from typing import List
from xml.sax.saxutils import escape, quoteattr

from .backend import RenderBackend
from .instructions import Diagram, DrawingInstruction, FilledRect, Glyph, Line, Tile


def _num(value: float) -> str:
    """Compact decimal: 40.0 -> '40', 53.3333 -> '53.333'."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def line_element(line: Line) -> str:
    return (
        f'<line x1="{_num(line.x1)}" y1="{_num(line.y1)}" '
        f'x2="{_num(line.x2)}" y2="{_num(line.y2)}" stroke={quoteattr(line.color)}/>'
    )


def rect_element(rect: FilledRect) -> str:
    return (
        f'<rect x="{_num(rect.x)}" y="{_num(rect.y)}" '
        f'width="{_num(rect.width)}" height="{_num(rect.height)}" fill={quoteattr(rect.color)}/>'
    )


def text_element(glyph: Glyph) -> str:
    x, y = _num(glyph.x), _num(glyph.y)
    # Rotation pivots on the same point the text is centred on
    transform = f' transform="rotate(180 {x} {y})"' if glyph.rotated180 else ""
    return (
        f'<text x="{x}" y="{y}" font-size="{_num(glyph.font_size)}" '
        f'fill={quoteattr(glyph.color)} font-family="serif" '
        f'text-anchor="middle" dominant-baseline="central"{transform}>'
        f'{escape(glyph.text)}</text>'
    )


class SvgBackend(RenderBackend):
    """Vector backend producing ``image/svg+xml``."""

    mime_type = "image/svg+xml"
    prefers_tiles = False

    def element(self, instruction: DrawingInstruction) -> str:
        if isinstance(instruction, Line):
            return line_element(instruction)
        if isinstance(instruction, FilledRect):
            return rect_element(instruction)
        if isinstance(instruction, Glyph):
            return text_element(instruction)
        if isinstance(instruction, Tile):
            # No bitmap tiles in SVG: draw the glyph the tile stands for
            return text_element(instruction.image_ref.as_glyph(instruction.x, instruction.y))
        raise TypeError(f"unsupported instruction {instruction!r}")

    def render_text(self, diagram: Diagram) -> str:
        parts: List[str] = [
            f'<svg width="{_num(diagram.width)}" height="{_num(diagram.height)}" '
            f'xmlns="http://www.w3.org/2000/svg">'
        ]
        parts.extend(self.element(instruction) for instruction in diagram.instructions)
        parts.append("</svg>")
        return "\n".join(parts)

    def render(self, diagram: Diagram) -> bytes:
        return self.render_text(diagram).encode("utf-8")
