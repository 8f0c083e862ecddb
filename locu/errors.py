# locu/errors.py
"""Exceptions raised by the locu package.

All of them derive from :class:`LocuError`; the concrete classes also
inherit from the matching built-in exception so that callers catching
``ValueError`` / ``ZeroDivisionError`` keep working.
"""

from __future__ import annotations


class LocuError(Exception):
    """Base class of every error raised by locu."""


class InvalidInputError(LocuError, ValueError):
    """The sample cannot be turned into a Lorenz curve."""


class DivisionByZeroError(LocuError, ZeroDivisionError):
    """The sample sums to zero, so cumulative shares are undefined."""


class InvalidConfigError(LocuError, ValueError):
    """A rendering option is out of range or of the wrong type."""
