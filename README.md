# fsrs

A scheduler for spaced-repetition flashcards that uses the FSRS memory model.
After each review, you pass it a card and a rating. It returns an updated
card with new stability and difficulty values and the date of the next
review.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Usage

```python
from datetime import datetime, timezone

from fsrs.models import Rating, new_empty_card
from fsrs.scheduler import Scheduler

scheduler = Scheduler(enable_fuzzing=False)
card = new_empty_card(1)

now = datetime.now(timezone.utc)
card = scheduler.review_card(card, Rating.GOOD, now)
print(card.state, card.step, card.due)

print(scheduler.get_card_retrievability(card, datetime.now(timezone.utc)))
```

`review_card` leaves the card it receives unchanged and returns a new card.
`get_card_retrievability` returns `0.0` for a card that has never been
reviewed.

### Cards, states and ratings (`fsrs.models`)

- `Card` is a dataclass with the fields `id`, `state`, `step`,
  `stability`, `difficulty`, `due` and `last_review`.
  `Card.duplicate()` returns a copy of the card.
- `new_empty_card(card_id)` creates a card in the `LEARNING` state. The card
  is due now, in UTC.
- `State` has the values `LEARNING`, `REVIEW` and `RELEARNING`.
- `Rating` has the values `AGAIN`, `HARD`, `GOOD` and `EASY`.

A new card starts in `LEARNING` and moves through the learning steps. When
it graduates to `REVIEW`, its step becomes `-1`. A review card rated `AGAIN`
goes to `RELEARNING` if relearning steps are set. If no relearning steps are
set, it stays in `REVIEW`.

The stability and difficulty of a card must be either both zero or both
non-zero. `Card.check()` raises `fsrs.models.InvalidCardError` when they are
not. `review_card` makes this check before it does anything else.

### Configuration (`fsrs.scheduler.Scheduler`)

Every `Scheduler` argument is optional:

| Argument            | Default                                   |
|---------------------|-------------------------------------------|
| `parameters`        | the 21 weights in `fsrs.params.DEFAULT_PARAMETERS` |
| `desired_retention` | `0.9`                                     |
| `learning_steps`    | 1 minute and 10 minutes                   |
| `relearning_steps`  | 10 minutes                                |
| `maximum_interval`  | `36500` days                              |
| `enable_fuzzing`    | `True`                                    |
| `rng`               | the `random` module's shared generator    |

- Steps are sequences of `datetime.timedelta`. `None` selects the defaults.
  An empty sequence means no steps.
- `rng` accepts any object with a `random()` method that returns a float in
  `[0, 1)`. Pass a seeded `random.Random` to get the same fuzzing results on
  every run.
- Fuzzing changes only intervals of cards in the `REVIEW` state, and only
  intervals of 2.5 days or more. The fuzz spans are listed in
  `fsrs.params.FUZZ_RANGES`.

`Scheduler` checks custom parameters with
`fsrs.params.validate_parameters`. It raises
`fsrs.params.InvalidParameterError` when the count is not 21 or when a value
lies outside `LOWER_BOUNDS_PARAMETERS` / `UPPER_BOUNDS_PARAMETERS`.

The `decay` and `factor` properties are derived from the last parameter.
`Scheduler.snapshot()` returns a frozen `SchedulerSnapshot` that holds a copy
of the scheduler's configuration.

## What this package does not do

This is a library only. It has no command-line tool and no user interface,
and it does not store cards or review history. Keeping cards between
sessions is up to your application.

## Running the tests

```
pip install .[test]
pytest
```