"""Renderer package for placeholder image composition."""

from .analysis import ink_bbox, ink_coverage, ink_mask
from .colors import (
    DEFAULT_COLOR_NAMES,
    GREY,
    ColorResolver,
    list_color_names,
    parse_hex_color,
    resolve,
    resolve_color,
)
from .errors import PlaceholderError, PlaceholderOutputError, PlaceholderUsageError
from .fonts import BitmapFontFace, FontFace, default_face
from .models import Color, ColorResolution, PlaceholderConfig, RenderOptions, RenderResult, TextPlacement
from .output import png_bytes, png_data_url, write_png
from .placeholder import (
    DEFAULT_OPTIONS,
    PlaceholderRenderer,
    fit_text,
    label_for,
    validate_dimensions,
    validate_options,
)

__all__ = [
    "BitmapFontFace",
    "Color",
    "ColorResolution",
    "ColorResolver",
    "DEFAULT_COLOR_NAMES",
    "DEFAULT_OPTIONS",
    "FontFace",
    "GREY",
    "PlaceholderConfig",
    "PlaceholderError",
    "PlaceholderOutputError",
    "PlaceholderRenderer",
    "PlaceholderUsageError",
    "RenderOptions",
    "RenderResult",
    "TextPlacement",
    "default_face",
    "fit_text",
    "ink_bbox",
    "ink_coverage",
    "ink_mask",
    "label_for",
    "list_color_names",
    "parse_hex_color",
    "png_bytes",
    "png_data_url",
    "resolve",
    "resolve_color",
    "validate_dimensions",
    "validate_options",
    "write_png",
]
