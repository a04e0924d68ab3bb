"""Draw routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app

from swisslotto.schemas.draw import DrawDateSchema, LottoDrawSchema
from swisslotto.services.client import SwissLottoClient
from swisslotto.utils.responses import ok

draws_bp = Blueprint("draws", __name__, url_prefix="/draws")

_draw_schema = LottoDrawSchema()
_date_schema = DrawDateSchema()

CLIENT_EXTENSION = "swisslotto_client"


def _client() -> SwissLottoClient:
    return current_app.extensions[CLIENT_EXTENSION]


@draws_bp.get("/latest")
def latest_draw():
    """Draw currently shown on the results page."""

    return ok(_draw_schema.dump(_client().get_latest_draw()))


@draws_bp.get("/<draw_date>")
def draw_of_date(draw_date: str):
    """Draw held on the given ISO date, 404 when there was none."""

    data = _date_schema.load({"date": draw_date})
    return ok(_draw_schema.dump(_client().get_draw_of_date(data["date"])))


@draws_bp.get("/<draw_date>/previous")
def previous_draw(draw_date: str):
    """Draw the publisher shows for the given date filter, whatever its date."""

    data = _date_schema.load({"date": draw_date})
    return ok(_draw_schema.dump(_client().get_previous_draw(data["date"])))
