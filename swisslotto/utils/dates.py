"""Date helpers shared by the page parser, the client and the CLI."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

# Used for the filter date embedded in the page and for outbound form fields.
DATE_FORMAT = "%d.%m.%Y"


def today() -> date:
    """Current calendar date in UTC."""

    return datetime.now(timezone.utc).date()


def format_draw_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_draw_date(value: str) -> date:
    """Parse ``DD.MM.YYYY``. Raises ``ValueError`` on malformed input."""

    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def thursday_of_previous_week(reference: date | None = None) -> date:
    """Thursday of the ISO week before ``reference`` (default: today)."""

    ref = reference or today()
    monday = ref - timedelta(days=ref.isoweekday() - 1)
    return monday - timedelta(days=7) + timedelta(days=3)
