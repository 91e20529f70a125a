"""The FSRS scheduler: computes memory state and next due date of cards."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol

from fsrs.models import Card, Rating, State
from fsrs.params import (
    DEFAULT_PARAMETERS,
    FUZZ_RANGES,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    STABILITY_MIN,
    validate_parameters,
)

_DEFAULT_LEARNING_STEPS = (timedelta(minutes=1), timedelta(minutes=10))
_DEFAULT_RELEARNING_STEPS = (timedelta(minutes=10),)


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1) from ``random()``."""

    def random(self) -> float: ...


def _round(value: float) -> int:
    """Round half away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _days(interval: timedelta) -> float:
    return interval.total_seconds() / 86400


@dataclass(frozen=True)
class SchedulerSnapshot:
    """The configuration of a scheduler at one moment."""

    parameters: tuple[float, ...]
    desired_retention: float
    learning_steps: tuple[timedelta, ...]
    relearning_steps: tuple[timedelta, ...]
    maximum_interval: int
    enable_fuzzing: bool


class Scheduler:
    """Schedules card reviews with the FSRS memory model.

    ``learning_steps`` and ``relearning_steps`` of ``None`` select the
    defaults; pass an empty sequence for no steps at all.
    """

    def __init__(
        self,
        parameters: Sequence[float] | None = None,
        desired_retention: float = 0.9,
        learning_steps: Iterable[timedelta] | None = None,
        relearning_steps: Iterable[timedelta] | None = None,
        maximum_interval: int = 36500,
        enable_fuzzing: bool = True,
        rng: RandomSource | None = None,
    ) -> None:
        self.parameters: tuple[float, ...] = (
            DEFAULT_PARAMETERS if parameters is None else validate_parameters(parameters)
        )
        self.desired_retention = desired_retention
        self.learning_steps: tuple[timedelta, ...] = (
            _DEFAULT_LEARNING_STEPS if learning_steps is None else tuple(learning_steps)
        )
        self.relearning_steps: tuple[timedelta, ...] = (
            _DEFAULT_RELEARNING_STEPS if relearning_steps is None else tuple(relearning_steps)
        )
        self.maximum_interval = maximum_interval
        self.enable_fuzzing = enable_fuzzing
        self.rng: RandomSource = random if rng is None else rng  # type: ignore[assignment]

    @property
    def decay(self) -> float:
        return -self.parameters[20]

    @property
    def factor(self) -> float:
        return 0.9 ** (1.0 / self.decay) - 1

    def snapshot(self) -> SchedulerSnapshot:
        """Return the scheduler's current configuration."""
        return SchedulerSnapshot(
            parameters=tuple(self.parameters),
            desired_retention=self.desired_retention,
            learning_steps=tuple(self.learning_steps),
            relearning_steps=tuple(self.relearning_steps),
            maximum_interval=self.maximum_interval,
            enable_fuzzing=self.enable_fuzzing,
        )

    def get_card_retrievability(self, card: Card, now: datetime) -> float:
        """Probability of recalling the card at ``now``; 0 if never reviewed."""
        if card.last_review is None:
            return 0.0
        elapsed_days = _days(now - card.last_review)
        return (1 + self.factor * elapsed_days / card.stability) ** self.decay

    def review_card(self, card: Card, rating: Rating, review_datetime: datetime) -> Card:
        """Return a new card reflecting a review with ``rating`` at ``review_datetime``."""
        card.check()

        recent = card.last_review is not None and _days(review_datetime - card.last_review) < 1

        card = card.duplicate()

        if card.state in (State.LEARNING, State.RELEARNING):
            steps = self.learning_steps if card.state == State.LEARNING else self.relearning_steps

            if card.stability == 0 and card.difficulty == 0:
                card.stability = self._initial_stability(rating)
                card.difficulty = self._initial_difficulty(rating)
            elif recent:
                card.stability = self._short_term_stability(card.stability, rating)
                card.difficulty = self._next_difficulty(card.difficulty, rating)
            else:
                retrievability = self.get_card_retrievability(card, review_datetime)
                card.stability = self._next_stability(
                    card.difficulty, card.stability, retrievability, rating
                )
                card.difficulty = self._next_difficulty(card.difficulty, rating)

            if not steps or (card.step >= len(steps) and rating > Rating.AGAIN):
                next_interval = self._graduate(card)
            elif rating == Rating.AGAIN:
                card.step = 0
                next_interval = steps[0]
            elif rating == Rating.HARD:
                if card.step == 0:
                    if len(steps) == 1:
                        next_interval = steps[0] * 1.5
                    else:
                        next_interval = (steps[0] + steps[1]) / 2
                else:
                    next_interval = steps[card.step]
            elif rating == Rating.GOOD:
                if card.step + 1 >= len(steps):
                    next_interval = self._graduate(card)
                else:
                    card.step += 1
                    next_interval = steps[card.step]
            else:
                next_interval = self._graduate(card)

        elif card.state == State.REVIEW:
            if recent:
                card.stability = self._short_term_stability(card.stability, rating)
            else:
                retrievability = self.get_card_retrievability(card, review_datetime)
                card.stability = self._next_stability(
                    card.difficulty, card.stability, retrievability, rating
                )
            card.difficulty = self._next_difficulty(card.difficulty, rating)

            if rating == Rating.AGAIN and self.relearning_steps:
                card.state = State.RELEARNING
                card.step = 0
                next_interval = self.relearning_steps[0]
            else:
                next_interval = timedelta(days=self._next_interval(card.stability))

        else:
            raise ValueError(f"unknown state {card.state!r} card id {card.id}")

        if self.enable_fuzzing and card.state == State.REVIEW:
            next_interval = self._fuzzed_interval(next_interval)

        card.due = review_datetime + next_interval
        card.last_review = review_datetime
        return card

    def _graduate(self, card: Card) -> timedelta:
        card.state = State.REVIEW
        card.step = -1
        return timedelta(days=self._next_interval(card.stability))

    @staticmethod
    def _clamp_difficulty(difficulty: float) -> float:
        return min(max(difficulty, MIN_DIFFICULTY), MAX_DIFFICULTY)

    @staticmethod
    def _clamp_stability(stability: float) -> float:
        return max(stability, STABILITY_MIN)

    def _initial_stability(self, rating: Rating) -> float:
        return self._clamp_stability(self.parameters[int(rating) - 1])

    def _initial_difficulty(self, rating: Rating) -> float:
        p = self.parameters
        difficulty = p[4] - math.exp(p[5] * (int(rating) - 1)) + 1
        return self._clamp_difficulty(difficulty)

    def _next_interval(self, stability: float) -> int:
        interval = (stability / self.factor) * (
            self.desired_retention ** (1 / self.decay) - 1
        )
        return min(max(1, _round(interval)), self.maximum_interval)

    def _short_term_stability(self, stability: float, rating: Rating) -> float:
        p = self.parameters
        increase = math.exp(p[17] * (int(rating) - 3 + p[18])) * stability ** (-p[19])
        if rating in (Rating.GOOD, Rating.EASY):
            increase = max(increase, 1.0)
        return self._clamp_stability(stability * increase)

    def _next_difficulty(self, difficulty: float, rating: Rating) -> float:
        p6, p7 = self.parameters[6], self.parameters[7]
        delta = -(p6 * (int(rating) - 3))
        damped = difficulty + (10.0 - difficulty) * delta / 9.0
        target = self._initial_difficulty(Rating.EASY)
        return self._clamp_difficulty(p7 * target + (1 - p7) * damped)

    def _next_stability(
        self, difficulty: float, stability: float, retrievability: float, rating: Rating
    ) -> float:
        if rating == Rating.AGAIN:
            value = self._next_forget_stability(difficulty, stability, retrievability)
        else:
            value = self._next_recall_stability(difficulty, stability, retrievability, rating)
        return self._clamp_stability(value)

    def _next_forget_stability(
        self, difficulty: float, stability: float, retrievability: float
    ) -> float:
        p = self.parameters
        long_term = (
            p[11]
            * difficulty ** (-p[12])
            * ((stability + 1) ** p[13] - 1)
            * math.exp((1 - retrievability) * p[14])
        )
        short_term = stability / math.exp(p[17] * p[18])
        return min(long_term, short_term)

    def _next_recall_stability(
        self, difficulty: float, stability: float, retrievability: float, rating: Rating
    ) -> float:
        p = self.parameters
        hard_penalty = p[15] if rating == Rating.HARD else 1.0
        easy_bonus = p[16] if rating == Rating.EASY else 1.0
        return stability * (
            1
            + math.exp(p[8])
            * (11 - difficulty)
            * stability ** (-p[9])
            * (math.exp((1 - retrievability) * p[10]) - 1)
            * hard_penalty
            * easy_bonus
        )

    def _fuzzed_interval(self, interval: timedelta) -> timedelta:
        interval_days = _days(interval)
        if interval_days < 2.5:
            return interval
        min_ivl, max_ivl = self._fuzz_range(interval_days)
        fuzzed = min_ivl + self.rng.random() * (max_ivl - min_ivl + 1)
        fuzzed = min(_round(fuzzed), self.maximum_interval)
        return timedelta(days=int(fuzzed))

    def _fuzz_range(self, days: float) -> tuple[int, int]:
        delta = 1.0 + sum(
            fr.factor * max(0.0, min(days, fr.end) - fr.start) for fr in FUZZ_RANGES
        )
        min_ivl = max(2, _round(days - delta))
        max_ivl = min(_round(days + delta), self.maximum_interval)
        return min(min_ivl, max_ivl), max_ivl