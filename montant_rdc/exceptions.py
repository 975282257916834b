"""
Exception hierarchy for amount handling.

The lenient entry points (format_amount, parse_amount, narrate_amount) never
raise these: they degrade to zero as the data-entry screens expect. The strict
entry points raise them so a caller can surface the problem to an operator.
"""

from __future__ import annotations


class AmountError(Exception):
    """Base exception for all amount failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class UnparsableAmountError(AmountError):
    """The input holds no amount that can be read."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNPARSABLE_AMOUNT", message, details)


class AmbiguousSeparatorError(AmountError):
    """A lone separator followed by three digits: grouping or decimals?"""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("AMBIGUOUS_SEPARATOR", message, details)
