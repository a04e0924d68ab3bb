from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from swisslotto.utils.dates import today

MAIN_NUMBER_COUNT = 6

# Draw numbers are stored as unsigned bytes.
MAX_NUMBER_VALUE = 255


def _check_number(name: str, value: object) -> int:
    # bool is an int subclass but never a drawn number
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= MAX_NUMBER_VALUE:
        raise ValueError(f"{name} must be between 0 and {MAX_NUMBER_VALUE}, got {value}")
    return value


@dataclass(frozen=True)
class LottoDraw:
    """One Swiss Lotto draw: six main numbers plus the lucky and replay numbers."""

    date: date = field(default_factory=today)
    main_numbers: tuple[int, ...] = (0,) * MAIN_NUMBER_COUNT
    lucky_number: int = 0
    replay_number: int = 0

    def __post_init__(self) -> None:
        numbers = tuple(self.main_numbers)
        if len(numbers) != MAIN_NUMBER_COUNT:
            raise ValueError(f"Expected {MAIN_NUMBER_COUNT} main numbers, got {len(numbers)}")
        for index, number in enumerate(numbers):
            _check_number(f"main_numbers[{index}]", number)
        _check_number("lucky_number", self.lucky_number)
        _check_number("replay_number", self.replay_number)
        # frozen: bypass __setattr__ to normalise list input into a tuple
        object.__setattr__(self, "main_numbers", numbers)
