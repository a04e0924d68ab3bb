"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class LottoError(AppError):
    """Base for every failure raised while fetching or reading a draw page."""


class TransportError(LottoError):
    """The results page could not be retrieved."""

    def __init__(self, message: str = "Failed to fetch results page", details: Any | None = None) -> None:
        super().__init__(code="transport_error", message=message, status_code=502, details=details)


class UnexpectedParsingError(LottoError):
    """A selector matched an unexpected number of nodes.

    The complete document is kept on ``html`` for offline diagnosis. It is
    never part of ``details`` so it does not leak into API responses.
    """

    def __init__(
        self,
        message: str,
        html: str,
        details: Any | None = None,
        code: str = "unexpected_page_structure",
    ) -> None:
        super().__init__(code=code, message=message, status_code=502, details=details)
        self.html = html


class NumericParseError(UnexpectedParsingError):
    """A number element did not contain a small unsigned integer."""

    def __init__(self, message: str, html: str, details: Any | None = None) -> None:
        super().__init__(message, html, details=details, code="unexpected_number_format")


class DateParsingError(LottoError):
    """The filter date on the page is not in ``DD.MM.YYYY`` form."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(
            code="date_parsing_error",
            message=f"Could not parse draw date {value!r}: {reason}",
            status_code=502,
            details={"value": value},
        )
        self.value = value


class SuppliedDateHasNoDraw(LottoError):
    """The page is well-formed but shows a draw of another date."""

    def __init__(self, requested: Any, found: Any) -> None:
        super().__init__(
            code="no_draw_for_date",
            message=f"No draw on {requested}",
            status_code=404,
            details={"requested": str(requested), "found": str(found)},
        )
        self.requested = requested
        self.found = found
