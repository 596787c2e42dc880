"""This module supports Galois (finite) fields of prime order.

Function GF creates types implementing prime fields.
Instantiate an object from a field and subsequently apply overloaded
operators such as + (addition), - (subtraction), * (multiplication),
and / (division), etc., to compute with field elements.
In-place versions of the field operators are also provided.

Calls to GF with identical modulus return the same class, hence
two elements belong to the same field iff their types coincide.
Combining elements of different fields raises a FieldMismatchError.
"""

import functools
import logging
import gmpy2
from gfpm import ntheory
from gfpm.errors import InvalidOrderError, FieldMismatchError, ZeroInverseError


@functools.cache
def GF(p):
    """Create a Galois (finite) field for given prime modulus p."""
    if not isinstance(p, int):
        raise TypeError(f'int required, got {type(p).__name__}')

    if not ntheory.is_prime(p):
        raise InvalidOrderError(f'{p} is not a prime')

    GFp = type(f'GF({p})', (PrimeFieldElement,), {'__slots__': ()})
    GFp.__doc__ = 'Class of prime field elements.'
    GFp.modulus = p
    GFp.order = p
    GFp.characteristic = p
    logging.debug(f'Create prime field GF({p})')
    return GFp


class PrimeFieldElement:
    """Common base class for prime field elements.

    Invariant: 'value' is reduced w.r.t. modulus, so 0 <= value < modulus.
    """

    __slots__ = 'value'

    modulus = None
    order = None
    characteristic = None

    def __init__(self, value=0):
        value = self._intern(value)
        # Directly call int.__mod__() for efficiency:
        self.value = value.__mod__(self.modulus)

    @classmethod
    def _intern(cls, a):
        a = cls._coerce(a)
        if a is NotImplemented:
            raise TypeError(f'int or element of {cls.__name__} expected')

        return a

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, PrimeFieldElement):
            if type(a) is not cls:
                raise FieldMismatchError(f'element of {cls.__name__} expected, '
                                         f'got element of {type(a).__name__}')

            return a.value

        if isinstance(a, int):
            return a

        return NotImplemented

    @classmethod
    def zero(cls):
        """Additive identity."""
        return cls(0)

    @classmethod
    def one(cls):
        """Multiplicative identity."""
        return cls(1)

    @classmethod
    def last(cls):
        """Largest element, with value modulus-1."""
        return cls(cls.modulus - 1)

    @classmethod
    def get_value(cls, v):
        """Field element for integer v, reduced modulo p."""
        return cls(v)

    def __int__(self):
        """Extract field element as an integer value in {0, ..., p-1}."""
        return self.value

    def __add__(self, other):
        """Addition."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value + other)

    __radd__ = __add__

    def __iadd__(self, other):
        """In-place addition."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        self.value += other
        self.value %= self.modulus
        return self

    def __sub__(self, other):
        """Subtraction."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value - other)

    def __rsub__(self, other):
        """Subtraction (with reflected arguments)."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(other - self.value)

    def __isub__(self, other):
        """In-place subtraction."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        self.value -= other
        self.value %= self.modulus
        return self

    def __neg__(self):
        """Additive inverse, p - value (and 0 for 0)."""
        return type(self)(self.modulus - self.value)

    def __pos__(self):
        """Unary +."""
        return type(self)(self.value)

    def __mul__(self, other):
        """Multiplication."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value * other)

    __rmul__ = __mul__

    def __imul__(self, other):
        """In-place multiplication."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        self.value *= other
        self.value %= self.modulus
        return self

    def __truediv__(self, other):
        """Division."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value * self._reciprocal(other))

    def __rtruediv__(self, other):
        """Division (with reflected arguments)."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(other * self._reciprocal(self.value))

    def __itruediv__(self, other):
        """In-place division."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        self.value *= self._reciprocal(other)
        self.value %= self.modulus
        return self

    def __pow__(self, other):
        """Exponentiation."""
        if not isinstance(other, int):
            return NotImplemented

        a = self.value
        if other < 0:
            a = self._reciprocal(a)
            other = -other
        return type(self)(int(gmpy2.powmod(a, other, self.modulus)))

    @classmethod
    def _reciprocal(cls, a):
        """Multiplicative inverse of a, found by exhaustive search."""
        p = cls.modulus
        a %= p
        if a == 0:
            raise ZeroInverseError('zero has no multiplicative inverse')

        for b in range(1, p):
            if (a * b) % p == 1:
                return b

        raise ZeroInverseError(f'{a} has no multiplicative inverse modulo {p}')

    def reciprocal(self):
        """Multiplicative inverse."""
        cls = type(self)
        return cls(cls._reciprocal(self.value))

    def __eq__(self, other):
        """Equality test."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self.value == other % self.modulus

    def __lt__(self, other):
        """Strictly less-than comparison of values."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self.value < other % self.modulus

    def __le__(self, other):
        """Less-than or equal comparison of values."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self.value <= other % self.modulus

    def __gt__(self, other):
        """Strictly greater-than comparison of values."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self.value > other % self.modulus

    def __ge__(self, other):
        """Greater-than or equal comparison of values."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self.value >= other % self.modulus

    def __hash__(self):
        """Make prime field elements hashable (e.g., for use in sets).

        Hashes agree among elements of the same field only; elements compare equal
        to ints, but do not hash like them.
        """
        return hash((type(self).__name__, self.value))

    def __bool__(self):
        """Truth value testing.

        Return False if this field element is zero, True otherwise.
        """
        return bool(self.value)

    def __repr__(self):
        return f'{self.value}'
