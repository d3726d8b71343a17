"""CLI entrypoint for generating placeholder PNG images."""

from __future__ import annotations

import argparse
import json
import sys
from importlib import metadata
from pathlib import Path

from placeholder_core import configure_logging, get_logger, load_settings
from placeholder_renderer import (
    Color,
    ColorResolver,
    PlaceholderConfig,
    PlaceholderError,
    PlaceholderRenderer,
    PlaceholderUsageError,
    RenderResult,
    ink_bbox,
    png_data_url,
)


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _installed_version() -> str:
    try:
        return metadata.version("placeholder-gen")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _usage_error(parser: argparse.ArgumentParser, message: str) -> int:
    print(message, file=sys.stderr)
    parser.print_usage(sys.stderr)
    return 1


def _resolve_color(resolver: ColorResolver, value: str, warnings: list[str]) -> Color:
    resolution = resolver.resolve(value)
    if resolution.warning:
        warnings.append(resolution.warning)
        get_logger().warning(resolution.warning, extra={"event": "color_fallback"})
    return resolution.color


def _report(result: RenderResult, config: PlaceholderConfig, warnings: list[str]) -> dict[str, object]:
    placement = result.placement
    return {
        "output": None if result.output is None else str(result.output),
        "width": config.width,
        "height": config.height,
        "label": result.label,
        "background": config.bg_color.hex,
        "text_color": config.text_color.hex,
        "scale": round(placement.scale, 4),
        "label_box": list(placement.box),
        "ink_box": ink_bbox(result.image, config.bg_color),
        "warnings": warnings,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="placeholder",
        description="Generate a solid-color placeholder PNG labelled with its size",
    )
    parser.add_argument("--width", "-width", dest="width", type=int, default=0, help="The width of the image")
    parser.add_argument("--height", "-height", dest="height", type=int, default=0, help="The height of the image")
    parser.add_argument(
        "--bg-color",
        "--bgColor",
        "-bgColor",
        dest="bg_color",
        default="grey",
        help="Background color (e.g. grey, #FF0000)",
    )
    parser.add_argument(
        "--text-color",
        "--textColor",
        "-textColor",
        dest="text_color",
        default="white",
        help="Text color (e.g. white, #00FF00)",
    )
    parser.add_argument(
        "--filename",
        "-filename",
        "-o",
        dest="filename",
        default="placeholder.png",
        help="The output filename",
    )
    parser.add_argument(
        "--fit-fraction",
        dest="fit_fraction",
        type=float,
        default=None,
        help="Share of the image width the label should span (default 0.5)",
    )
    parser.add_argument("--config", default=None, help="Optional JSON render settings file")
    output_mode = parser.add_mutually_exclusive_group()
    output_mode.add_argument("--data-url", action="store_true", help="Print a PNG data URL instead of writing a file")
    output_mode.add_argument("--json", action="store_true", help="Print a JSON report of the rendered image")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    parser.add_argument("--log-file", default=None, help="Also write JSON log lines to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_installed_version()}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(level=args.log_level, log_file=Path(args.log_file).expanduser() if args.log_file else None)
    except OSError as exc:
        return _usage_error(parser, f"cannot open log file {args.log_file}: {exc}")
    logger = get_logger()

    if args.width <= 0 or args.height <= 0:
        return _usage_error(parser, "Width and height must be greater than 0")

    try:
        settings = load_settings(Path(args.config).expanduser() if args.config else None)
        renderer = PlaceholderRenderer(options=settings.render_options(args.fit_fraction))
    except PlaceholderUsageError as exc:
        return _usage_error(parser, str(exc))
    resolver = settings.color_resolver()

    warnings: list[str] = []
    config = PlaceholderConfig(
        width=args.width,
        height=args.height,
        bg_color=_resolve_color(resolver, args.bg_color, warnings),
        text_color=_resolve_color(resolver, args.text_color, warnings),
        output=None if args.data_url else Path(args.filename),
    )

    try:
        result = renderer.render(config)
    except PlaceholderError as exc:
        logger.debug("render failed", exc_info=True, extra={"event": "render_failed"})
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.data_url:
        print(png_data_url(result.image))
    elif args.json:
        _print_json(_report(result, config, warnings))
    else:
        print(f"Placeholder image '{args.filename}' created successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
