"""HTTP client for the Swisslos winning-numbers page."""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from swisslotto.config import DEFAULT_DRAW_URL, DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from swisslotto.errors import TransportError
from swisslotto.models.draw import LottoDraw
from swisslotto.services.parser import parse_draw_from_html
from swisslotto.utils.dates import format_draw_date, today

logger = logging.getLogger(__name__)


def build_http_session(
    retries: int = 0,
    backoff_factor: float = 0.3,
    user_agent: str = DEFAULT_USER_AGENT,
) -> requests.Session:
    """Create a requests session, optionally with retry/backoff for transient errors."""

    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        status=retries,
        backoff_factor=backoff_factor,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET", "POST"),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)

    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def build_filter_form(draw_date: date, current_date: date | None = None) -> dict[str, str]:
    """Form body the results page expects when filtering by date."""

    formatted = format_draw_date(draw_date)
    return {
        "formattedFilterDate": formatted,
        "filterDate": formatted,
        "currentDate": format_draw_date(current_date or today()),
    }


class SwissLottoClient:
    """Fetches the results page and turns it into ``LottoDraw`` records.

    Every call is an independent request; nothing is cached between calls.
    An injected session is used as-is and left open. Without one, each
    thread gets its own session from ``session_factory`` since
    ``requests.Session`` is not guaranteed to be thread-safe.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        url: str = DEFAULT_DRAW_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session_factory: Callable[[], requests.Session] = build_http_session,
    ) -> None:
        self._session = session
        self._session_factory = session_factory
        self._local = threading.local()
        self._lock = threading.Lock()
        self._created: list[requests.Session] = []
        self.url = url
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "SwissLottoClient":
        factory = functools.partial(
            build_http_session,
            retries=int(config.get("HTTP_RETRIES", 0)),
            backoff_factor=float(config.get("HTTP_BACKOFF_FACTOR", 0.3)),
            user_agent=str(config.get("HTTP_USER_AGENT", DEFAULT_USER_AGENT)),
        )
        return cls(
            url=str(config.get("SWISS_LOTTO_DRAW_URL", DEFAULT_DRAW_URL)),
            timeout=float(config.get("HTTP_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)),
            session_factory=factory,
        )

    @property
    def session(self) -> requests.Session:
        """Session used by the calling thread."""

        if self._session is not None:
            return self._session

        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            self._local.session = session
            with self._lock:
                self._created.append(session)
        return session

    def close(self) -> None:
        """Close every session this client created."""

        with self._lock:
            created, self._created = self._created, []
        for session in created:
            session.close()
        self._local = threading.local()

    def __enter__(self) -> "SwissLottoClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, method: str, **kwargs: Any) -> str:
        logger.debug("%s %s", method, self.url)
        try:
            resp = self.session.request(method, self.url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
        except requests.RequestException as exc:
            # Logged by whoever handles the TransportError.
            raise TransportError(
                message=f"Failed to fetch results page: {exc}",
                details={"url": self.url, "method": method},
            ) from exc
        return resp.text

    def fetch_latest_html(self) -> str:
        """GET the results page as it currently stands."""

        return self._request("GET")

    def fetch_html_for_date(self, draw_date: date) -> str:
        """POST the date filter form and return the page for ``draw_date``."""

        return self._request("POST", data=build_filter_form(draw_date))

    def get_latest_draw(self) -> LottoDraw:
        return parse_draw_from_html(self.fetch_latest_html())

    def get_draw_of_date(self, draw_date: date) -> LottoDraw:
        """Draw held on ``draw_date``.

        Raises ``SuppliedDateHasNoDraw`` when the page answers with another date.
        """

        return parse_draw_from_html(self.fetch_html_for_date(draw_date), draw_date)

    def get_previous_draw(self, draw_date: date) -> LottoDraw:
        """Whatever draw the page shows when filtered on ``draw_date``.

        Unlike ``get_draw_of_date`` the returned date is not checked, so a
        date without a draw yields the closest draw the publisher offers.
        """

        return parse_draw_from_html(self.fetch_html_for_date(draw_date))

    def parse_draw_from_html(self, html: str, expected_date: date | None = None) -> LottoDraw:
        return parse_draw_from_html(html, expected_date)
