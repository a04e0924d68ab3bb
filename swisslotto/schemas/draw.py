"""Marshmallow schemas for draw records and draw lookups."""

from __future__ import annotations

from marshmallow import Schema, fields, post_load, validate

from swisslotto.models.draw import MAIN_NUMBER_COUNT, MAX_NUMBER_VALUE, LottoDraw

_small_number = validate.Range(min=0, max=MAX_NUMBER_VALUE)


class LottoDrawSchema(Schema):
    """Serialize a LottoDraw; ``load`` rebuilds the record."""

    date = fields.Date(required=True)
    main_numbers = fields.List(
        fields.Integer(strict=True, validate=_small_number),
        required=True,
        validate=validate.Length(equal=MAIN_NUMBER_COUNT),
    )
    lucky_number = fields.Integer(required=True, strict=True, validate=_small_number)
    replay_number = fields.Integer(required=True, strict=True, validate=_small_number)

    @post_load
    def _make_draw(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return LottoDraw(**data)


class DrawDateSchema(Schema):
    """Validate the ISO date taken from a draw URL."""

    date = fields.Date(required=True, format="iso")
