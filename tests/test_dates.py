from __future__ import annotations

from datetime import date

import pytest

from swisslotto.utils.dates import format_draw_date, parse_draw_date, thursday_of_previous_week


def test_format_uses_day_month_year():
    assert format_draw_date(date(2023, 2, 1)) == "01.02.2023"


def test_parse_day_month_year():
    assert parse_draw_date("01.02.2023") == date(2023, 2, 1)


def test_parse_rejects_iso():
    with pytest.raises(ValueError):
        parse_draw_date("2023-02-01")


@pytest.mark.parametrize(
    "reference, expected",
    [
        (date(2026, 10, 19), date(2026, 10, 15)),  # Monday
        (date(2026, 10, 25), date(2026, 10, 15)),  # Sunday
        (date(2026, 1, 1), date(2025, 12, 25)),
    ],
)
def test_thursday_of_previous_week(reference, expected):
    assert thursday_of_previous_week(reference) == expected
