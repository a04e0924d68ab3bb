"""Swiss Lotto draw results: page parser, HTTP client and JSON API."""

from __future__ import annotations

from flask import Flask

from swisslotto.errors import (
    DateParsingError,
    LottoError,
    NumericParseError,
    SuppliedDateHasNoDraw,
    TransportError,
    UnexpectedParsingError,
)
from swisslotto.models.draw import LottoDraw
from swisslotto.services.client import SwissLottoClient
from swisslotto.services.parser import parse_draw_from_html

__all__ = [
    "DateParsingError",
    "LottoDraw",
    "LottoError",
    "NumericParseError",
    "SuppliedDateHasNoDraw",
    "SwissLottoClient",
    "TransportError",
    "UnexpectedParsingError",
    "create_app",
    "parse_draw_from_html",
]


def create_app(config_object: object | None = None) -> Flask:
    """Application factory.

    Args:
        config_object: Optional config class overriding the APP_ENV choice.

    Returns:
        Configured Flask application.
    """
    from swisslotto.config import get_config
    from swisslotto.error_handlers import register_error_handlers
    from swisslotto.logging_config import configure_logging
    from swisslotto.routes.draws import CLIENT_EXTENSION, draws_bp
    from swisslotto.routes.health import health_bp

    app = Flask(__name__)
    app.config.from_object(config_object or get_config())

    configure_logging(app)
    register_error_handlers(app)

    app.extensions[CLIENT_EXTENSION] = SwissLottoClient.from_config(app.config)

    app.register_blueprint(health_bp)
    app.register_blueprint(draws_bp)

    return app
