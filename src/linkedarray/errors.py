"""Exception classes for linkedarray."""


class LinkedArrayError(Exception):
    """Base exception for all linkedarray errors."""


class EndOfSequenceError(LinkedArrayError):
    """Raised when a cursor is advanced past the tail of its list."""


class InvalidLinkModeError(LinkedArrayError, ValueError):
    """Raised when a list is configured with an unknown link mode."""
