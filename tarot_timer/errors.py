"""Error taxonomy for the tarot timeline engine.

Every error here is a recoverable, user-facing outcome: callers catch it,
show the message and re-offer the action. Nothing is retried automatically.
"""


class TarotTimerError(Exception):
    """Base class for all tarot timer errors."""

    default_message = "Tarot timer error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidArgumentError(TarotTimerError, ValueError):
    """A date or hour argument is malformed or out of range."""

    default_message = "Invalid argument"


class NotFoundError(TarotTimerError, LookupError):
    """A card or journal entry does not exist."""

    default_message = "Nothing to delete"


class CardNotFoundError(NotFoundError):
    """The card id is not one of the 78 catalog identifiers."""

    default_message = "Unknown card"


class AlreadySavedError(TarotTimerError):
    """A journal entry already exists for the date."""

    default_message = "Already saved today"


class NothingToSaveError(TarotTimerError):
    """Save was requested before any hour was drawn."""

    default_message = "No cards to save - draw first"


class HourNotDrawnError(TarotTimerError):
    """A memo edit targeted an hour whose card has not been drawn."""

    default_message = "Hour has not been drawn yet"
