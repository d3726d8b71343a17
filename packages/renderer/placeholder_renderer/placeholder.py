"""Placeholder image composer: solid background with a centered size label."""

from __future__ import annotations

import logging
import math

from PIL import Image, ImageDraw

from .errors import PlaceholderUsageError
from .fonts import FontFace, default_face
from .models import PlaceholderConfig, RenderOptions, RenderResult, TextPlacement
from .output import png_data_url, write_png

logger = logging.getLogger("placeholder.renderer")

DEFAULT_OPTIONS = RenderOptions()


def label_for(width: int, height: int) -> str:
    return f"{width} x {height}"


def validate_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise PlaceholderUsageError(f"Width and height must be greater than 0 (got {width}x{height})")


def validate_options(options: RenderOptions) -> None:
    if not (0.0 < options.fit_fraction <= 1.0):
        raise PlaceholderUsageError(f"fit fraction must be in (0, 1], got {options.fit_fraction}")


def fit_text(
    native_width: int,
    native_height: int,
    width: int,
    height: int,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> TextPlacement:
    """Uniformly scale a ``native_width x native_height`` text block and center it.

    The block is widened to ``width * fit_fraction`` (never below its native width
    or ``min_text_width``). Offsets truncate toward zero and can be negative when the scaled block is larger
    than the canvas; with ``clip_overflow`` off the scale is capped so it fits.
    """
    target = max(float(native_width), width * options.fit_fraction)
    target = max(target, float(options.min_text_width))

    scale = target / native_width if native_width > 0 else 1.0
    if not math.isfinite(scale) or scale <= 0:
        scale = 1.0

    if not options.clip_overflow and native_width > 0 and native_height > 0:
        scale = min(scale, width / native_width, height / native_height)

    scaled_w = max(1, round(native_width * scale))
    scaled_h = max(1, round(native_height * scale))

    return TextPlacement(
        native_width=native_width,
        native_height=native_height,
        scale=scale,
        width=scaled_w,
        height=scaled_h,
        x=int((width - scaled_w) / 2),
        y=int((height - scaled_h) / 2),
    )


class PlaceholderRenderer:
    """Draws the size label onto a flat background and writes it as PNG."""

    def __init__(self, face: FontFace | None = None, options: RenderOptions | None = None) -> None:
        self.face = face if face is not None else default_face()
        self.options = options or DEFAULT_OPTIONS
        validate_options(self.options)

    def render(self, config: PlaceholderConfig) -> RenderResult:
        image, placement = self._compose(config)
        if config.output is not None:
            write_png(image, config.output)
            logger.info("placeholder written path=%s", config.output, extra={"event": "placeholder_written"})
        return RenderResult(
            image=image,
            label=label_for(config.width, config.height),
            placement=placement,
            output=config.output,
        )

    def render_image(self, config: PlaceholderConfig) -> Image.Image:
        image, _placement = self._compose(config)
        return image

    def preview_data_url(self, config: PlaceholderConfig) -> str:
        return png_data_url(self.render_image(config))

    def measure(self, text: str) -> tuple[tuple[float, float, float, float], int, int]:
        bbox = self.face.bbox(text)
        left, top, right, bottom = bbox
        native_w = math.ceil(right - left)
        native_h = math.ceil(bottom - top)

        if native_w <= 0:
            native_w = 1
        if native_h <= 0:
            native_h = math.ceil(self.face.line_height)
            if native_h <= 0:
                native_h = max(1, self.options.fallback_line_height)
        return bbox, native_w, native_h

    def _compose(self, config: PlaceholderConfig) -> tuple[Image.Image, TextPlacement]:
        validate_dimensions(config.width, config.height)

        canvas = Image.new("RGBA", (config.width, config.height), config.bg_color.as_tuple())
        text = label_for(config.width, config.height)

        bbox, native_w, native_h = self.measure(text)
        glyphs = self._glyph_bitmap(text, bbox, native_w, native_h, config)

        placement = fit_text(native_w, native_h, config.width, config.height, self.options)
        logger.debug(
            "label %r native=%dx%d scaled=%dx%d at (%d, %d)",
            text,
            native_w,
            native_h,
            placement.width,
            placement.height,
            placement.x,
            placement.y,
            extra={"event": "label_fit"},
        )

        self._blit(canvas, glyphs, placement)
        return canvas, placement

    def _glyph_bitmap(
        self,
        text: str,
        bbox: tuple[float, float, float, float],
        native_w: int,
        native_h: int,
        config: PlaceholderConfig,
    ) -> Image.Image:
        glyphs = Image.new("RGBA", (native_w, native_h), (0, 0, 0, 0))
        draw = ImageDraw.Draw(glyphs)
        self.face.draw(draw, (-bbox[0], -bbox[1]), text, config.text_color.as_tuple())
        return glyphs

    @staticmethod
    def _blit(canvas: Image.Image, glyphs: Image.Image, placement: TextPlacement) -> None:
        scaled = glyphs.resize((placement.width, placement.height), Image.Resampling.BILINEAR)
        # alpha_composite only takes non-negative offsets; overflow is cropped off the source.
        src = (max(0, -placement.x), max(0, -placement.y))
        dest = (max(0, placement.x), max(0, placement.y))
        canvas.alpha_composite(scaled, dest=dest, source=src)
