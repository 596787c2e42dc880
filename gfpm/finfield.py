"""This module supports finite (Galois) fields GF(p^m) and their primitive elements.

Class FiniteField represents GF(p^m) as the polynomials over GF(p) of degree
less than m, with arithmetic modulo an irreducible polynomial f of degree m.
The irreducible polynomial is set once, after construction of the field.
Irreducibility of f is not checked, unless asked for explicitly.

A primitive element is a generator of the multiplicative group of GF(p^m),
which is cyclic of order N = p^m - 1. Candidates are enumerated by function
elements() in a fixed order and the first candidate of multiplicative order N
is returned. Hence, the result is deterministic, but in general it is not the
smallest primitive element in any particular order.
"""

import enum
import functools
import itertools
import logging
from gfpm import ntheory
from gfpm.pfield import GF
from gfpm.polynomial import Poly
from gfpm.errors import FieldError, NotIrreducibleError, NoPrimitiveElementError


class State(enum.Enum):
    """Stages of a finite field w.r.t. the search for a primitive element."""

    UNINITIALIZED = 'uninitialized'  # no irreducible polynomial yet
    READY = 'ready'
    SEARCHING = 'searching'
    FOUND = 'found'
    EXHAUSTED = 'exhausted'  # no primitive element, so modulus not irreducible


def elements(p, m):
    """Generate all p^m coefficient lists [c_0, ..., c_{m-1}] over {0, ..., p-1}.

    The lists are generated as the digits of a base-p counter starting at zero,
    where c_0 is the least significant digit. The generator stops right before
    the counter would wrap around to zero again.
    """
    for digits in itertools.product(range(p), repeat=m):
        yield list(reversed(digits))


class FiniteField:
    """Finite field GF(p^m), with elements represented by polynomials over GF(p)."""

    def __init__(self, p, m):
        if not isinstance(m, int):
            raise TypeError(f'int required, got {type(m).__name__}')

        if m < 1:
            raise ValueError('extension degree must be at least 1')

        self.prime_field = GF(p)
        self.poly = Poly(self.prime_field)
        self.p = p
        self.m = m
        self._irreducible = None
        self._primitive = None
        self.state = State.UNINITIALIZED

    @property
    def order(self):
        """Number of field elements p^m."""
        return self.p**self.m

    @property
    def characteristic(self):
        return self.p

    @property
    def ext_deg(self):
        return self.m

    @property
    def irreducible(self):
        """Copy of the irreducible polynomial defining the field (None if not set)."""
        f = self._irreducible
        return None if f is None else self.poly(f)

    @property
    def primitive(self):
        """Copy of the primitive element found (None if not found yet)."""
        g = self._primitive
        return None if g is None else self.poly(g)

    def set_irreducible(self, modulus, check=False):
        """Set irreducible polynomial of degree m defining the field.

        The modulus is given as a polynomial over GF(p), or as a list of its
        coefficients c_0, ..., c_m. If check is set, the modulus is tested for
        irreducibility as well.
        """
        if self._irreducible is not None:
            raise FieldError('irreducible polynomial already set')

        f = self.poly(modulus).trim()
        if f.degree() != self.m:
            raise ValueError(f'irreducible polynomial of degree {self.m} required, got {f}')

        if check and not f.is_irreducible():
            raise NotIrreducibleError(f'{f} is not irreducible over GF({self.p})')

        self._irreducible = f
        self.state = State.READY
        logging.debug(f'Set irreducible polynomial of GF({self.p}^{self.m}) to {f}')

    def _check_ready(self):
        if self._irreducible is None:
            raise FieldError('irreducible polynomial not set')

    def elements(self):
        """Generate all field elements as polynomials, starting at zero."""
        for c in elements(self.p, self.m):
            yield self.poly(c)

    def reduce(self, a):
        """Reduce polynomial a modulo the irreducible polynomial."""
        self._check_ready()
        return self.poly(a) % self._irreducible

    def __call__(self, value):
        """Field element for given value (polynomial, coefficient list, or term string)."""
        return self.reduce(value).trim()

    @functools.cached_property
    def _group_divisors(self):
        return ntheory.divisors(self.order - 1)

    def multiplicative_order(self, g):
        """Smallest divisor d of p^m-1 with g^d = 1 (None if there is none, e.g. for g = 0)."""
        self._check_ready()
        g = self.reduce(g)
        one = self.prime_field.one()
        for d in self._group_divisors:
            if g.powmod(d, self._irreducible).is_coeff(one):
                return d

        return None

    def is_primitive(self, g, verbose=False):
        """Test whether g generates the multiplicative group of the field.

        The powers g^d are computed for the divisors d of N = p^m - 1 in increasing
        order, until g^d = 1 for the first time. Then g is primitive iff d = N.
        If verbose is set, g^d mod f(x) is printed for each divisor d tested.
        """
        self._check_ready()
        g = self.poly(g)
        f = self._irreducible
        N = self.order - 1
        one = self.prime_field.one()
        for d in self._group_divisors:
            r = g.powmod(d, f)
            logging.debug(f'P^{d} mod f(x) = {r.to_vector(self.m)}')
            if verbose:
                print(f'P^{d} mod f(x) = {r}')
            if r.is_coeff(one):
                return d == N

        return False  # g^N != 1, so g = 0 or modulus not irreducible

    def primitive_element(self, verbose=False, all_degrees=False):
        """Find primitive element, which is the first one generated by elements().

        Flag all_degrees is reserved and currently has no effect.
        """
        self._check_ready()
        if self._primitive is not None:
            return self.poly(self._primitive)

        if all_degrees:
            logging.debug('Flag all_degrees has no effect on the search')
        self.state = State.SEARCHING
        logging.info(f'Search primitive element of GF({self.p}^{self.m}) modulo {self._irreducible}')
        for i, g in enumerate(self.elements(), 1):
            found = self.is_primitive(g, verbose=verbose)
            if verbose:
                if found:
                    print('P is primitive!')
                print('----------------')
            if found:
                self._primitive = g
                self.state = State.FOUND
                logging.info(f'Found primitive element {g} after {i} candidates')
                return self.poly(g)

        self.state = State.EXHAUSTED
        raise NoPrimitiveElementError(f'no primitive element modulo {self._irreducible}, '
                                      'modulus not irreducible')

    def __repr__(self):
        return f'GF({self.p}^{self.m})'
