"""Exceptions raised by the Scrapple core."""


class ScrappleError(Exception):
    """Base class for all Scrapple errors."""


class InvalidWordError(ScrappleError, ValueError):
    """A word cannot be played from a hand (too short, too long, or missing letters)."""

    def __init__(self, word: str, reason: str) -> None:
        super().__init__(f"cannot play {word!r}: {reason}")
        self.word = word
        self.reason = reason


class NoCandidatesError(ScrappleError, ValueError):
    """Best-word selection was asked to choose from an empty sequence."""
