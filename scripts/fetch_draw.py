from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence
from datetime import date

from swisslotto.config import get_config
from swisslotto.errors import LottoError
from swisslotto.schemas.draw import LottoDrawSchema
from swisslotto.services.client import SwissLottoClient, build_http_session
from swisslotto.utils.dates import thursday_of_previous_week


logger = logging.getLogger(__name__)


def _iso_date(value: str) -> date:
	try:
		return date.fromisoformat(value)
	except ValueError as exc:
		raise argparse.ArgumentTypeError(f"not an ISO date (YYYY-MM-DD): {value!r}") from exc


def main(argv: Sequence[str] | None = None) -> int:
	"""Print one Swiss Lotto draw as JSON."""

	config = get_config()

	parser = argparse.ArgumentParser(description="Fetch a Swiss Lotto draw and print it as JSON")
	mode = parser.add_mutually_exclusive_group()
	mode.add_argument("--date", dest="draw_date", type=_iso_date, help="Draw held on this date (strict)")
	mode.add_argument(
		"--previous",
		dest="previous_date",
		type=_iso_date,
		help="Draw the results page shows for this date filter, whatever its date",
	)
	mode.add_argument(
		"--last-week",
		action="store_true",
		help="Previous draw for the Thursday of last week",
	)
	parser.add_argument("--url", dest="url", type=str, default=config.SWISS_LOTTO_DRAW_URL)
	parser.add_argument("--timeout", dest="timeout_seconds", type=float, default=config.HTTP_TIMEOUT_SECONDS)
	parser.add_argument("--retries", dest="retries", type=int, default=config.HTTP_RETRIES)
	parser.add_argument("--backoff", dest="backoff", type=float, default=config.HTTP_BACKOFF_FACTOR)
	parser.add_argument("--indent", dest="indent", type=int, default=2)
	args = parser.parse_args(argv)

	logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO), format="%(asctime)s %(levelname)s %(message)s")

	http = build_http_session(
		retries=args.retries,
		backoff_factor=args.backoff,
		user_agent=config.HTTP_USER_AGENT,
	)

	with http, SwissLottoClient(http, url=args.url, timeout=args.timeout_seconds) as client:
		try:
			if args.draw_date is not None:
				draw = client.get_draw_of_date(args.draw_date)
			elif args.previous_date is not None:
				draw = client.get_previous_draw(args.previous_date)
			elif args.last_week:
				target = thursday_of_previous_week()
				logger.info("Looking up previous draw for %s", target.isoformat())
				draw = client.get_previous_draw(target)
			else:
				draw = client.get_latest_draw()
		except LottoError as exc:
			logger.error("%s", exc.message)
			return 1

	print(json.dumps(LottoDrawSchema().dump(draw), indent=args.indent or None))
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
