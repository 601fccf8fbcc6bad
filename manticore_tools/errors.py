"""Exception types raised by the Manticore tool handlers."""

from __future__ import annotations


class ManticoreError(Exception):
    """Base class for every error raised by this package."""


class HTTPError(ManticoreError):
    """An error answer from the Manticore HTTP API."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return self.message


class ToolError(ManticoreError):
    """A tool operation could not be carried out by the server."""