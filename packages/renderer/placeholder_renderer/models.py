"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

from PIL import Image

OutputTarget = str | PathLike[str] | None


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


@dataclass(frozen=True)
class ColorResolution:
    color: Color
    warning: str | None = None


@dataclass(frozen=True)
class PlaceholderConfig:
    width: int
    height: int
    bg_color: Color
    text_color: Color
    output: OutputTarget = None


@dataclass(frozen=True)
class RenderOptions:
    fit_fraction: float = 0.5
    min_text_width: int = 10
    fallback_line_height: int = 13
    clip_overflow: bool = True


@dataclass(frozen=True)
class TextPlacement:
    native_width: int
    native_height: int
    scale: float
    width: int
    height: int
    x: int
    y: int

    @property
    def box(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class RenderResult:
    image: Image.Image
    label: str
    placement: TextPlacement
    output: OutputTarget = None
