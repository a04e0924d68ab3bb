"""Extract a ``LottoDraw`` from the Swisslos winning-numbers page.

The page is read with four CSS selectors. Each one must match an exact number
of nodes; anything else means the page layout changed and is reported as an
``UnexpectedParsingError`` carrying the complete document.
"""

from __future__ import annotations

import logging
import re
from datetime import date

from bs4 import BeautifulSoup, Tag

from swisslotto.errors import (
    DateParsingError,
    NumericParseError,
    SuppliedDateHasNoDraw,
    UnexpectedParsingError,
)
from swisslotto.models.draw import MAIN_NUMBER_COUNT, MAX_NUMBER_VALUE, LottoDraw
from swisslotto.utils.dates import parse_draw_date, today

logger = logging.getLogger(__name__)

HTML_PARSER = "lxml"

_NUMBERS_SCOPE = ".filter-results .quotes__game .actual-numbers__numbers"

FORMATTED_DATE_SELECTOR = "input#formattedFilterDate"
NORMAL_NUMBER_SELECTOR = f"{_NUMBERS_SCOPE} .actual-numbers__number___normal span"
LUCKY_NUMBER_SELECTOR = f"{_NUMBERS_SCOPE} .actual-numbers__number___lucky span"
REPLAY_NUMBER_SELECTOR = f"{_NUMBERS_SCOPE} .actual-numbers__number___replay span"

_NUMBER_RE = re.compile(r"[0-9]{1,3}")


def _select_exactly(document: BeautifulSoup, selector: str, expected: int, label: str, html: str) -> list[Tag]:
    nodes = document.select(selector)
    if len(nodes) != expected:
        logger.info("Expected %s %s, found %s", expected, label, len(nodes))
        raise UnexpectedParsingError(
            f"Expected {expected} {label} in html response, found {len(nodes)}",
            html,
            details={"selector": selector, "expected": expected, "found": len(nodes)},
        )
    return nodes


def _parse_number(node: Tag, label: str, html: str) -> int:
    text = node.get_text(strip=True)
    if not _NUMBER_RE.fullmatch(text) or int(text) > MAX_NUMBER_VALUE:
        raise NumericParseError(
            f"Expected a number between 0 and {MAX_NUMBER_VALUE} for {label}, found {text!r}",
            html,
            details={"field": label, "text": text},
        )
    return int(text)


def _parse_date(document: BeautifulSoup, html: str, expected_date: date | None) -> date | None:
    """Return the filter date shown on the page, or None if the input has no value."""

    (node,) = _select_exactly(document, FORMATTED_DATE_SELECTOR, 1, "date element", html)

    value = node.get("value")
    if not value or not value.strip():
        return None

    try:
        draw_date = parse_draw_date(value)
    except ValueError as exc:
        raise DateParsingError(value, str(exc)) from exc

    if expected_date is not None and draw_date != expected_date:
        raise SuppliedDateHasNoDraw(expected_date, draw_date)
    return draw_date


def parse_draw_from_html(html: str, expected_date: date | None = None) -> LottoDraw:
    """Parse a results page into a ``LottoDraw``.

    Args:
        html: Page markup as returned by the results URL.
        expected_date: When given, the page must show the draw of this date,
            otherwise ``SuppliedDateHasNoDraw`` is raised.

    Raises:
        UnexpectedParsingError: a selector matched the wrong number of nodes,
            or (as ``NumericParseError``) a number was not numeric.
        DateParsingError: the filter date is not ``DD.MM.YYYY``.
        SuppliedDateHasNoDraw: the page shows a different date.
    """

    document = BeautifulSoup(html, HTML_PARSER)

    draw_date = _parse_date(document, html, expected_date)

    normal_nodes = _select_exactly(document, NORMAL_NUMBER_SELECTOR, MAIN_NUMBER_COUNT, "normal numbers", html)
    main_numbers = tuple(_parse_number(node, "normal number", html) for node in normal_nodes)

    (lucky_node,) = _select_exactly(document, LUCKY_NUMBER_SELECTOR, 1, "lucky number", html)
    lucky_number = _parse_number(lucky_node, "lucky number", html)

    (replay_node,) = _select_exactly(document, REPLAY_NUMBER_SELECTOR, 1, "replay number", html)
    replay_number = _parse_number(replay_node, "replay number", html)

    return LottoDraw(
        date=draw_date or today(),
        main_numbers=main_numbers,
        lucky_number=lucky_number,
        replay_number=replay_number,
    )
