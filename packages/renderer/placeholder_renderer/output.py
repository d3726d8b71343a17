"""PNG encoding and file sink."""

from __future__ import annotations

import base64
import logging
from io import BytesIO
from os import PathLike
from pathlib import Path

from PIL import Image

from .errors import PlaceholderOutputError

logger = logging.getLogger("placeholder.output")


def png_bytes(image: Image.Image) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def png_data_url(image: Image.Image) -> str:
    b64 = base64.b64encode(png_bytes(image)).decode("ascii")
    return f"data:image/png;base64,{b64}"


def write_png(image: Image.Image, output: str | PathLike[str]) -> Path:
    """Encode ``image`` as PNG into ``output``.

    The file handle is closed on every path. If encoding or writing fails after
    the file was opened, the truncated file is removed and the failure is raised
    as :class:`PlaceholderOutputError`.
    """
    path = Path(output)
    opened = False
    try:
        with path.open("wb") as fh:
            opened = True
            image.save(fh, format="PNG")
    except (OSError, ValueError) as exc:
        if opened:
            path.unlink(missing_ok=True)
        logger.debug("png write failed path=%s", path, extra={"event": "png_write_failed"})
        raise PlaceholderOutputError(output, exc) from exc

    logger.debug("png written path=%s", path, extra={"event": "png_written"})
    return path
