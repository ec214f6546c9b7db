"""
Quote engine exceptions.

Validation errors are the caller's fault (bad numbers from the UI).
Invariant violations and pricing config errors are ours: they mean an
enum value slipped past the model or the rule table is incomplete.
"""


class QuoteError(Exception):
    """Base class for everything the quote engine raises."""


class QuoteValidationError(QuoteError, ValueError):
    """An input number is NaN, infinite, negative or zero where it can't be."""

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {value!r} ({reason})")


class InvariantViolation(QuoteError):
    """A closed enumeration produced a value the engine doesn't handle."""


class PricingConfigError(QuoteError):
    """The pricing rule table is missing an entry or failed to load."""
