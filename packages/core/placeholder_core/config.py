"""Render settings schema and JSON load helpers."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from placeholder_renderer import Color, ColorResolver, PlaceholderUsageError, RenderOptions, parse_hex_color

SETTINGS_VERSION = 1

logger = logging.getLogger("placeholder.config")


@dataclass
class RenderSection:
    fit_fraction: float = 0.5
    min_text_width: int = 10
    fallback_line_height: int = 13
    clip_overflow: bool = True


@dataclass
class PlaceholderSettings:
    settings_version: int = SETTINGS_VERSION
    render: RenderSection = field(default_factory=RenderSection)
    colors: dict[str, str] = field(default_factory=dict)

    def render_options(self, fit_fraction: float | None = None) -> RenderOptions:
        return RenderOptions(
            fit_fraction=self.render.fit_fraction if fit_fraction is None else float(fit_fraction),
            min_text_width=self.render.min_text_width,
            fallback_line_height=self.render.fallback_line_height,
            clip_overflow=self.render.clip_overflow,
        )

    def color_resolver(self, base: ColorResolver | None = None) -> ColorResolver:
        base = base or ColorResolver()
        return base.with_names(named_colors(self.colors))


def named_colors(raw: dict[str, str]) -> dict[str, Color]:
    out: dict[str, Color] = {}
    for name, value in raw.items():
        color = parse_hex_color(str(value))
        if color is None:
            logger.warning("ignoring color %r: %r is not a hex color", name, value, extra={"event": "config_color_ignored"})
            continue
        out[name] = color
    return out


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: PlaceholderSettings) -> None:
    try:
        cfg.render.fit_fraction = float(cfg.render.fit_fraction)
        cfg.render.min_text_width = max(1, int(cfg.render.min_text_width))
        cfg.render.fallback_line_height = max(1, int(cfg.render.fallback_line_height))
    except (TypeError, ValueError) as exc:
        raise PlaceholderUsageError(f"invalid render settings: {exc}") from exc
    if not isinstance(cfg.render.clip_overflow, bool):
        raise PlaceholderUsageError(f"invalid render settings: clip_overflow must be true or false, got {cfg.render.clip_overflow!r}")


def load_settings(path: Path | None = None) -> PlaceholderSettings:
    if path is None:
        return PlaceholderSettings()
    if not path.exists():
        logger.warning("settings file %s not found, using defaults", path, extra={"event": "settings_missing"})
        return PlaceholderSettings()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise PlaceholderUsageError(f"cannot read settings file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise PlaceholderUsageError(f"settings file {path} must contain a JSON object")

    render = raw.get("render", {}) or {}
    if not isinstance(render, dict):
        raise PlaceholderUsageError(f"'render' in {path} must be an object")

    colors = raw.get("colors", {}) or {}
    if not isinstance(colors, dict):
        raise PlaceholderUsageError(f"'colors' in {path} must be an object of name -> hex")

    try:
        version = int(raw.get("settings_version", SETTINGS_VERSION))
    except (TypeError, ValueError) as exc:
        raise PlaceholderUsageError(f"invalid settings_version in {path}: {exc}") from exc

    cfg = PlaceholderSettings(
        settings_version=version,
        render=_merge(RenderSection, render),
        colors={str(k): str(v) for k, v in colors.items()},
    )
    _normalize_render(cfg)
    return cfg
