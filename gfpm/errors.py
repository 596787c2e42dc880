"""Exceptions raised for violated preconditions of field and polynomial arithmetic.

Each exception also derives from the built-in exception type that Python code
would raise for the same situation. For instance, the inverse of zero raises
ZeroInverseError, which can be caught as a ZeroDivisionError as well.
"""


class FieldError(Exception):
    """Base class for all GFPM errors."""


class InvalidOrderError(FieldError, ValueError):
    """Order of a prime field is not a prime number."""


class FieldMismatchError(FieldError, TypeError):
    """Operands belong to different fields."""


class ZeroInverseError(FieldError, ZeroDivisionError):
    """Zero has no multiplicative inverse."""


class ZeroDivisorError(FieldError, ZeroDivisionError):
    """Division by the zero polynomial."""


class NotIrreducibleError(FieldError, ValueError):
    """Modulus of an extension field is reducible."""


class NoPrimitiveElementError(FieldError, ArithmeticError):
    """Search for a primitive element exhausted all candidates.

    This happens only if the modulus of the extension field is not irreducible.
    """
