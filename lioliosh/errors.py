"""Errors for Lioliosh.

Language-level failures (bad numbers, division by zero, ...) are never raised:
they are ordinary Error values produced by the evaluator. The texts for those
live in ErrorMessage so every producer spells them the same way.

The exception classes below cover everything outside the language's value
domain: malformed input text and misuse of the Value API.
"""


class ErrorMessage:
    INVALID_NUMBER = "Invalid Number"
    NON_NUMBER = "Cannot operate on non-number!"
    DIVISION_BY_ZERO = "Division By Zero."
    MISSING_SYMBOL = "S-expression does not start with symbol."
    UNKNOWN_OPERATOR = "Unknown operator!"
    EMPTY_OPERANDS = "Cannot operate on empty list!"


class LioError(Exception):
    """ Base class for all Lioliosh errors"""
    pass


class LioSyntaxError(LioError):
    """ Raised when input text does not match the grammar"""

    def __init__(self, message: str, position: int = 0, source: str = "<stdin>"):
        super().__init__(message)
        self.message = message
        self.position = position
        self.source = source

    def __str__(self) -> str:
        # Columns are reported 1-based, positions are 0-based offsets.
        return f"{self.source}:{self.position + 1}: error: {self.message}"


class LioTypeError(LioError):
    """ Raised when a Value operation is applied to the wrong variant"""


class LioOwnershipError(LioError):
    """ Raised when a released Value is used or released again"""


class LioConfigError(LioError):
    """ Raised when a LIOLIOSH_* setting cannot be used"""
