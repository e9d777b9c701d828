"""
Custom exception hierarchy for lenient-dates.

Callers can catch a specific failure (e.g., UnsupportedOrderError vs
ConfigValidationError) without relying on generic ValueError/RuntimeError.

Row-level non-matches are never exceptions: every parse attempt turns a
non-matching row into null, and only total failure across all attempts
surfaces as a missing value in the result.
"""

from __future__ import annotations


class LenientDatesError(Exception):
    """Base exception for all lenient-dates errors."""


class UnsupportedOrderError(LenientDatesError):
    """Raised when none of the requested orders can be parsed.

    Raised once, before any parse attempt is built.  The message
    enumerates every invalid token that was supplied; the tokens are
    also available as ``invalid_orders``.
    """

    def __init__(self, invalid_orders: list[str], message: str | None = None) -> None:
        self.invalid_orders = list(invalid_orders)
        if message is None:
            quoted = ", ".join(f"'{o}'" for o in self.invalid_orders) or "''"
            message = f"Unsupported `orders`: {quoted}"
        super().__init__(message)


class LocaleNotSupportedError(LenientDatesError):
    """Raised when a time locale other than 'C' is requested on Windows."""


class ConfigValidationError(LenientDatesError):
    """Raised when a parse/job config file fails validation.

    This can happen if:
    - The YAML file is empty.
    - Required fields are missing or have wrong types.
    """


class ExportError(LenientDatesError):
    """Raised when the batch job fails to write its output file."""
