from __future__ import annotations


class BankerError(ValueError):
    """Base class for every error raised by the scoring engine."""


class PreconditionError(BankerError):
    """The caller supplied incomplete or out-of-range input.

    Recoverable: nothing was settled or replaced, so the caller can re-prompt
    and try again with the same game snapshot.
    """


class InvariantError(BankerError):
    """A game or course record is malformed and cannot be scored."""


class GameCompletedError(PreconditionError):
    """The round is finished; no further hole saves or navigation are allowed."""
