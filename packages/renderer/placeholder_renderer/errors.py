"""Error types raised by the placeholder pipeline."""

from __future__ import annotations

from os import PathLike


class PlaceholderError(Exception):
    pass


class PlaceholderUsageError(PlaceholderError, ValueError):
    pass


class PlaceholderOutputError(PlaceholderError):
    def __init__(self, output: str | PathLike[str], cause: BaseException) -> None:
        self.output = output
        self.cause = cause
        super().__init__(f"failed to write placeholder image '{output}': {cause}")
