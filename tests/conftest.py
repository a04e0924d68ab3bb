from __future__ import annotations

import pathlib
from collections.abc import Sequence

import pytest

FIXTURES = pathlib.Path(__file__).parent / "fixtures"

_DATE_INPUT = '<input type="text" id="formattedFilterDate" name="formattedFilterDate"{value}>'
_NUMBER = '<li class="actual-numbers__number actual-numbers__number___{kind}"><span>{text}</span></li>'


def build_page(
    *,
    date_values: Sequence[str | None] = ("01.02.2023",),
    normal: Sequence[object] = (5, 11, 19, 24, 33, 42),
    lucky: Sequence[object] = (3,),
    replay: Sequence[object] = (9,),
) -> str:
    """Minimal results page; each sequence controls how many nodes are emitted.

    A ``None`` date value emits the input without a value attribute.
    """

    inputs = "".join(
        _DATE_INPUT.format(value="" if value is None else f' value="{value}"') for value in date_values
    )
    numbers = "".join(
        [_NUMBER.format(kind="normal", text=n) for n in normal]
        + [_NUMBER.format(kind="lucky", text=n) for n in lucky]
        + [_NUMBER.format(kind="replay", text=n) for n in replay]
    )
    return (
        "<html><body>"
        f"<form>{inputs}</form>"
        '<div class="filter-results"><div class="quotes__game">'
        f'<ul class="actual-numbers__numbers">{numbers}</ul>'
        "</div></div>"
        "</body></html>"
    )


@pytest.fixture
def winning_numbers_html() -> str:
    return (FIXTURES / "winning-numbers.html").read_text(encoding="utf-8")
