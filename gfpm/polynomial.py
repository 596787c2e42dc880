"""This module supports arithmetic with polynomials over a coefficient field.

Function Poly creates the type of polynomials over a given field, such as
a prime field GF(p) created by gfpm.pfield.GF. Any field-like class works as
coefficient field, provided it offers zero() and one(), construction from
int, and operators +, -, *, / and == on its elements.

A polynomial is stored as a list of monomials, each monomial a pair
consisting of a coefficient and a degree. There is at most one monomial
per degree, but monomials may have zero coefficients and need not be sorted.
Method trim() brings a polynomial in canonical form: no zero coefficients
and sorted by increasing degree. The degree of a polynomial is the largest
degree with a nonzero coefficient; the zero polynomial has no degree (None).

The operators +,-,*,<<,//,%,** and function divmod are overloaded, with
in-place versions for + and *. Coefficients are copied whenever they enter
or leave a polynomial, so in-place operations on a coefficient obtained from
a polynomial (e.g., c = a[0]; c += 1) do not affect the polynomial itself.
"""

import functools
from gfpm.errors import FieldMismatchError, ZeroDivisorError

X = 'x'  # symbol for indeterminate in polynomials


@functools.cache
def Poly(field):
    """Create type for polynomials over given coefficient field."""
    name = f'{field.__name__}[{X}]'
    FieldPolynomial = type(name, (Polynomial,), {'__slots__': ()})
    FieldPolynomial.field = field
    return FieldPolynomial


class Monomial:
    """Term c x^d with coefficient c and degree d>=0."""

    __slots__ = 'coeff', 'degree'

    def __init__(self, coeff, degree):
        self.coeff = coeff
        self.degree = degree

    def __repr__(self):
        return f'Monomial({self.coeff!r}, {self.degree})'


class Polynomial:
    """Polynomials over a field represented as lists of monomials.

    Invariant: at most one monomial per degree in attribute 'monomials'.
    """

    __slots__ = 'monomials'

    field = None

    def __init__(self, value=None, check=True):
        """Initialize polynomial to given value (zero polynomial, by default).

        Value can be a list of coefficients [c_0, c_1, ..., c_n] for c_0 + c_1 x + ... + c_n x^n,
        a single coefficient, a string like 'x^2 + 2x + 1', or a polynomial of the same type.
        """
        if check:
            value = self._intern(value)
        self.monomials = value

    @classmethod
    def _intern(cls, a):
        # convert a to a fresh list of monomials, if possible
        if a is None:
            return []

        if isinstance(a, Polynomial):
            if not isinstance(a, cls):
                raise FieldMismatchError(f'polynomial of type {cls.__name__} expected')

            return [Monomial(cls._coeff(m.coeff), m.degree) for m in a.monomials]

        if isinstance(a, str):
            return cls._from_terms(a)

        if isinstance(a, (list, tuple)):
            order = getattr(cls.field, 'order', None)
            if order is not None:
                if not all(0 <= c < order for c in a if isinstance(c, int)):
                    raise ValueError('polynomial coefficients invalid or out of range')

            return [Monomial(cls._coeff(c), i) for i, c in enumerate(a)]

        c = cls._scalar(a)
        if c is NotImplemented:
            raise TypeError(f'polynomial over {cls.field.__name__} expected')

        return [Monomial(c, 0)]

    @classmethod
    def _coerce(cls, a):
        # convert a to a polynomial of type cls, if possible
        if isinstance(a, Polynomial):
            if not isinstance(a, cls):
                raise FieldMismatchError(f'polynomial of type {cls.__name__} expected')

            return a

        if isinstance(a, (list, tuple, str)):
            return cls(a)

        c = cls._scalar(a)
        if c is NotImplemented:
            return NotImplemented

        return cls([Monomial(c, 0)], check=False)

    @classmethod
    def _scalar(cls, a):
        # convert a to a coefficient, if possible
        try:
            return cls._coeff(a)
        except FieldMismatchError:
            raise
        except TypeError:
            return NotImplemented

    @classmethod
    def _coeff(cls, c):
        # fresh field element, never an alias of c
        return cls.field(c)

    @classmethod
    def zero(cls):
        """Zero polynomial."""
        return cls()

    @classmethod
    def one(cls):
        """Constant polynomial 1."""
        return cls([Monomial(cls.field.one(), 0)], check=False)

    @classmethod
    def _from_terms(cls, s, x=X):
        field = cls.field
        d = {}
        s = ''.join(s.split())  # remove all whitespace
        for term in s.split('+'):
            try:
                if term.find(x) == -1:
                    c = int(term)
                    i = 0
                elif term.endswith(x):
                    c = term[:-1]
                    c = 1 if c == '' else int(c)
                    i = 1
                else:
                    c, i = term.split(f'{x}^')
                    c = 1 if c == '' else int(c)
                    i = int(i)
            except Exception as exc:
                raise ValueError('ill formatted polynomial') from exc

            if i < 0:
                raise ValueError('ill formatted polynomial')

            order = getattr(field, 'order', None)
            if order is not None and not 0 <= c < order:
                raise ValueError('polynomial coefficients invalid or out of range')

            d[i] = d.get(i, 0) + c
        return [Monomial(field(c), i) for i, c in sorted(d.items())]

    @classmethod
    def from_terms(cls, s, x=X):
        """Convert string s with sum of powers of x to a polynomial."""
        return cls(cls._from_terms(s, x), check=False)

    def to_terms(self, x=X):
        """Convert polynomial to a string with sum of powers of x, highest degree first."""
        zero = self.field.zero()
        one = self.field.one()
        terms = []
        for m in sorted(self.monomials, key=lambda m: m.degree, reverse=True):
            if m.coeff == zero:
                continue

            c = '' if m.coeff == one else m.coeff
            if m.degree == 0:
                terms.append(f'{m.coeff}')  # x^0 = 1
            elif m.degree == 1:
                terms.append(f'{c}{x}')  # x^1 = x
            else:
                terms.append(f'{c}{x}^{m.degree}')
        if not terms:
            return f'{zero}'

        return ' + '.join(terms)

    def to_vector(self, length=None):
        """Concatenate the coefficients of degrees 0 up to length-1, without separators.

        Default length is the degree plus one (0 for the zero polynomial).
        """
        if length is None:
            d = self.degree()
            length = 0 if d is None else d + 1
        return ''.join(f'{self.get_coeff(i)}' for i in range(length))

    def degree(self):
        """Largest degree with nonzero coefficient (None for zero polynomial)."""
        zero = self.field.zero()
        d = None
        for m in self.monomials:
            if m.coeff != zero and (d is None or m.degree > d):
                d = m.degree
        return d

    def _deg0(self):
        d = self.degree()
        return 0 if d is None else d

    def is_zero(self):
        """Test for zero polynomial."""
        return self.degree() is None

    def is_coeff(self, c):
        """Test whether polynomial is the constant c."""
        d = self.degree()
        if d is not None and d != 0:
            return False

        return self.get_coeff(0) == c

    def get_coeff(self, d):
        """Coefficient of x^d (zero if no monomial of degree d is present)."""
        for m in self.monomials:
            if m.degree == d:
                return self._coeff(m.coeff)

        return self.field.zero()

    def set_coeff(self, d, c):
        """Set coefficient of x^d to c, replacing any monomial of degree d."""
        if d < 0:
            raise ValueError('negative degree not allowed')

        c = self._coeff(c)
        for i, m in enumerate(self.monomials):
            if m.degree == d:
                del self.monomials[i]
                break

        self.monomials.append(Monomial(c, d))

    def __getitem__(self, key):
        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials')

        if key < 0:
            raise IndexError('negative index not allowed for polynomials')

        return self.get_coeff(key)

    def coeffs(self):
        """Dense list of coefficients of degrees 0 up to the degree (empty for zero polynomial)."""
        d = self.degree()
        if d is None:
            return []

        c = {m.degree: m.coeff for m in self.monomials}
        return [self._coeff(c[i]) if i in c else self.field.zero() for i in range(d + 1)]

    def __iter__(self):
        yield from self.coeffs()

    def __call__(self, x):
        """Evaluate polynomial at given x."""
        x = self._coeff(x)
        y = self.field.zero()
        for c in reversed(self.coeffs()):
            y = y * x + c
        return y

    def trim(self):
        """Remove monomials with zero coefficients and sort remaining ones by degree, in-place."""
        zero = self.field.zero()
        self.monomials = sorted((m for m in self.monomials if m.coeff != zero),
                                key=lambda m: m.degree)
        return self

    def shift(self, k):
        """Multiply polynomial by x^k, for k>=0."""
        if k < 0:
            raise ValueError('negative shift not allowed')

        cls = type(self)
        return cls([Monomial(cls._coeff(m.coeff), m.degree + k) for m in self.monomials],
                   check=False)

    def __lshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return self.shift(other)

    def __rlshift__(self, other):
        return NotImplemented

    def _dense(self, n):
        zero = self.field.zero()
        c = {m.degree: m.coeff for m in self.monomials}
        return [c.get(i, zero) for i in range(n + 1)]

    def __add__(self, other):
        """Addition, coefficient-wise up to the larger of both degrees."""
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        n = max(self._deg0(), other._deg0())
        a = self._dense(n)
        b = other._dense(n)
        return cls([Monomial(a[i] + b[i], i) for i in range(n + 1)], check=False)

    __radd__ = __add__

    def __iadd__(self, other):
        """In-place addition."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        n = max(self._deg0(), other._deg0())
        b = other._dense(n)
        for i in range(n + 1):
            self.set_coeff(i, self.get_coeff(i) + b[i])
        return self

    def __neg__(self):
        """Additive inverse, negating every coefficient."""
        cls = type(self)
        return cls([Monomial(-m.coeff, m.degree) for m in self.monomials], check=False)

    def __pos__(self):
        cls = type(self)
        return cls(self)

    def __sub__(self, other):
        """Subtraction."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self + (-other)

    def __rsub__(self, other):
        """Subtraction (with reflected arguments)."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return other + (-self)

    def __mul__(self, other):
        """Multiplication by a scalar or by a polynomial."""
        cls = type(self)
        if not isinstance(other, (Polynomial, list, tuple, str)):
            c = cls._scalar(other)
            if c is NotImplemented:
                return NotImplemented

            return cls([Monomial(m.coeff * c, m.degree) for m in self.monomials], check=False)

        other = cls._coerce(other)
        return self._mul(other)

    __rmul__ = __mul__

    def __imul__(self, other):
        """In-place multiplication."""
        cls = type(self)
        if not isinstance(other, (Polynomial, list, tuple, str)):
            c = cls._scalar(other)
            if c is NotImplemented:
                return NotImplemented

            for m in self.monomials:
                m.coeff = m.coeff * c
            return self

        other = cls._coerce(other)
        self.monomials = self._mul(other).monomials
        return self

    def _mul(self, other):
        # full convolution over all degree pairs, result not trimmed
        cls = type(self)
        n = self._deg0()
        k = other._deg0()
        a = self._dense(n)
        b = other._dense(k)
        c = [self.field.zero()] * (n + k + 1)
        for i, a_i in enumerate(a):
            for j, b_j in enumerate(b):
                c[i + j] = c[i + j] + a_i * b_j
        return cls([Monomial(c_i, i) for i, c_i in enumerate(c)], check=False)

    def _divmod(self, other):
        cls = type(self)
        n = other.degree()
        if n is None:
            raise ZeroDivisorError('division by zero polynomial')

        lc = other.get_coeff(n)
        q = cls()
        r = cls(self)
        while (d := r.degree()) is not None and d >= n:
            k = d - n
            c = r.get_coeff(d) / lc
            q.set_coeff(k, c)
            s = other.shift(k)
            s *= -c
            r += s  # cancels the leading term of r
        return q, r

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._divmod(other)

    def __rdivmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return other._divmod(self)

    def __floordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._divmod(other)[0]

    def __rfloordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return other._divmod(self)[0]

    def __mod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._divmod(other)[1]

    def __rmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return other._divmod(self)[1]

    def powmod(self, n, modulus=None):
        """Polynomial to the power of n>=0, reduced modulo given polynomial (if any)."""
        cls = type(self)
        if n < 0:
            raise ValueError('negative exponent')

        if modulus is not None:
            modulus = cls._coerce(modulus)
            if modulus is NotImplemented:
                raise TypeError(f'polynomial modulus of type {cls.__name__} expected')

        def reduce(b):
            return b if modulus is None else b._divmod(modulus)[1]

        if n == 0:
            return reduce(cls.one())

        a = reduce(self)
        b = cls(a)
        for i in range(n.bit_length() - 2, -1, -1):
            b = reduce(b._mul(b))
            if (n >> i) & 1:
                b = reduce(b._mul(a))
        return b

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return self.powmod(other)

    def monic(self):
        """Monic version of polynomial; zero polynomial remains unchanged."""
        d = self.degree()
        if d is None:
            return type(self)(self)

        return self * (self.field.one() / self.get_coeff(d))

    @classmethod
    def gcd(cls, a, b):
        """Monic greatest common divisor of polynomials a and b."""
        a = cls._coerce(a)
        b = cls._coerce(b)
        while not b.is_zero():
            a, b = b, a._divmod(b)[1]
        return a.monic().trim()

    def is_irreducible(self):
        """Test polynomial for irreducibility, requiring a finite coefficient field."""
        cls = type(self)
        q = cls.field.order
        d = self.degree()
        if d is None or d <= 0:
            return False

        x = cls([0, 1])
        b = x
        for _ in range(d // 2):
            b = b.powmod(q, self)
            if not cls.gcd(b - x, self).is_coeff(1):
                return False

        return True

    def __eq__(self, other):
        """Equality test."""
        other = self._coerce(other)
        if other is NotImplemented:
            return False

        return self.coeffs() == other.coeffs()

    def __ne__(self, other):
        """Negated equality test."""
        return not self.__eq__(other)

    def __hash__(self):
        """Make polynomials hashable (e.g., for use in sets).

        Hashes agree among polynomials of the same type only; constant polynomials
        compare equal to ints, but do not hash like them.
        """
        return hash((type(self).__name__, tuple(self.coeffs())))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return not self.is_zero()

    def __repr__(self):
        return self.to_terms()
