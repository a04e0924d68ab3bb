"""Domain records."""

from swisslotto.models.draw import LottoDraw

__all__ = ["LottoDraw"]
