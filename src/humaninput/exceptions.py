"""Domain exception hierarchy for humaninput."""

from __future__ import annotations


class HumanInputError(RuntimeError):
    """Base class for all humaninput errors."""


class ConfigValidationError(HumanInputError):
    """Raised when configuration cannot be validated safely."""
