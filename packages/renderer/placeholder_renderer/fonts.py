"""Font metrics providers for label rendering."""

from __future__ import annotations

from typing import Protocol

from PIL import ImageDraw, ImageFont


class FontFace(Protocol):
    @property
    def line_height(self) -> int: ...

    def bbox(self, text: str) -> tuple[float, float, float, float]: ...

    def draw(self, draw: ImageDraw.ImageDraw, xy: tuple[float, float], text: str, fill: tuple[int, ...]) -> None: ...


class BitmapFontFace:
    """Pillow's built-in fixed-size bitmap font."""

    _LINE_PROBE = "Ag|"

    def __init__(self, font: ImageFont.ImageFont | None = None) -> None:
        self.font = font if font is not None else ImageFont.load_default_imagefont()

    @property
    def line_height(self) -> int:
        _left, top, _right, bottom = self.font.getbbox(self._LINE_PROBE)
        return int(bottom - top)

    def bbox(self, text: str) -> tuple[float, float, float, float]:
        return self.font.getbbox(text)

    def draw(self, draw: ImageDraw.ImageDraw, xy: tuple[float, float], text: str, fill: tuple[int, ...]) -> None:
        draw.text(xy, text, font=self.font, fill=fill)


_DEFAULT_FACE: BitmapFontFace | None = None


def default_face() -> BitmapFontFace:
    global _DEFAULT_FACE
    if _DEFAULT_FACE is None:
        _DEFAULT_FACE = BitmapFontFace()
    return _DEFAULT_FACE
