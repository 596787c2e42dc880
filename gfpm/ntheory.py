"""This module collects the number theory used by GFPM.

Primality of field orders is tested by plain trial division.
Factoring the order of a multiplicative group and listing its divisors
is done with help of gmpy2 for stepping through the trial primes.
"""

import logging
import gmpy2


def is_prime(x):
    """Return True if x is prime, using trial division."""
    if x <= 1:
        return False

    d = 2
    while d * d <= x:
        if x % d == 0:
            return False

        d += 1
    return True


def factor(x):
    """Return prime factorization of x as a list of (prime, exponent) pairs.

    The primes appear in increasing order. For x=1 the empty list is returned.
    """
    if x <= 0:
        raise ValueError('positive number required')

    f = []
    p = 2
    while x > 1:
        if p * p > x or gmpy2.is_prime(x):
            f.append((int(x), 1))
            break

        if x % p == 0:
            e = 0
            while x % p == 0:
                x //= p
                e += 1
            f.append((int(p), e))
        p = int(gmpy2.next_prime(p))
    return f


def divisors(x):
    """Return all positive divisors of x in increasing order, including 1 and x."""
    d = [1]
    for p, e in factor(x):
        d = [a * p**i for a in d for i in range(e + 1)]
    d.sort()
    logging.debug(f'Number {x} has {len(d)} divisors')
    return d
