"""FSRS spaced-repetition scheduling for flashcards: cards, parameters and the scheduler."""

__version__ = "0.1.0"