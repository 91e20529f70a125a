"""Cards, their learning states and review ratings."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum


class State(IntEnum):
    """Learning state of a card."""

    LEARNING = 1
    REVIEW = 2
    RELEARNING = 3


class Rating(IntEnum):
    """The four possible ratings given when reviewing a card."""

    AGAIN = 1
    HARD = 2
    GOOD = 3
    EASY = 4


class InvalidCardError(ValueError):
    """Raised when a card's memory state is inconsistent."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Card:
    """A flashcard and its memory state."""

    id: int
    state: State = State.LEARNING
    step: int = 0
    stability: float = 0.0
    difficulty: float = 0.0
    due: datetime = field(default_factory=_utc_now)
    last_review: datetime | None = None

    def duplicate(self) -> Card:
        """Return an independent copy of this card."""
        return dataclasses.replace(self)

    def check(self) -> None:
        """Raise InvalidCardError unless stability and difficulty are both zero or both non-zero."""
        both_zero = self.stability == 0 and self.difficulty == 0
        both_set = self.stability != 0 and self.difficulty != 0
        if not (both_zero or both_set):
            raise InvalidCardError(
                "The difficulty and stability of a card are either both zero or both non-zero."
            )


def new_empty_card(card_id: int) -> Card:
    """Create a fresh card in the learning state, due now."""
    return Card(id=card_id, state=State.LEARNING, due=_utc_now())