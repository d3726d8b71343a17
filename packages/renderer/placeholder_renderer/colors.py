"""Hex and named color resolution."""

from __future__ import annotations

import re
from collections.abc import Mapping

from .models import Color, ColorResolution

GREY = Color(128, 128, 128)

DEFAULT_COLOR_NAMES: dict[str, Color] = {
    "black": Color(0, 0, 0),
    "white": Color(255, 255, 255),
    "red": Color(255, 0, 0),
    "green": Color(0, 255, 0),
    "blue": Color(0, 0, 255),
    "grey": GREY,
    "gray": GREY,
}

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")


def parse_hex_color(value: str) -> Color | None:
    """Parse ``RRGGBB`` with an optional leading ``#``; None if it is not one."""
    match = _HEX_RE.fullmatch(value)
    if match is None:
        return None
    digits = match.group(1)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return Color(r, g, b)


class ColorResolver:
    """Resolves user color strings; names are matched case-insensitively."""

    def __init__(self, names: Mapping[str, Color] | None = None, fallback: Color = GREY) -> None:
        table = DEFAULT_COLOR_NAMES if names is None else names
        self.names = {self._key(k): v for k, v in table.items()}
        self.fallback = fallback

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def with_names(self, extra: Mapping[str, Color]) -> "ColorResolver":
        merged = dict(self.names)
        merged.update({self._key(k): v for k, v in extra.items()})
        return ColorResolver(merged, fallback=self.fallback)

    def list_names(self) -> list[str]:
        return sorted(self.names.keys())

    def resolve(self, value: str) -> ColorResolution:
        color = parse_hex_color(value)
        if color is not None:
            return ColorResolution(color)

        named = self.names.get(self._key(value))
        if named is not None:
            return ColorResolution(named)

        return ColorResolution(
            self.fallback,
            warning=f"Color '{value}' not recognized, defaulting to grey.",
        )


_DEFAULT_RESOLVER = ColorResolver()


def resolve(value: str) -> ColorResolution:
    return _DEFAULT_RESOLVER.resolve(value)


def resolve_color(value: str) -> Color:
    return _DEFAULT_RESOLVER.resolve(value).color


def list_color_names() -> list[str]:
    return _DEFAULT_RESOLVER.list_names()
