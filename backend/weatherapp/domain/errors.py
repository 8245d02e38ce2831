from __future__ import annotations

from typing import Optional


class WeatherAppError(Exception):
    """Base class for errors surfaced to the HTTP and CLI layers."""


class ValidationError(WeatherAppError, ValueError):
    pass


class ParseError(WeatherAppError, ValueError):
    pass


class MissingDataError(ParseError):
    """Upstream record lacks a field the comparison needs."""


class UpstreamError(WeatherAppError, RuntimeError):
    def __init__(self, message: str, status_code: int, *, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
