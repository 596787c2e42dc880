"""Find a primitive element of GF(p^m) from the command line.

Example usage:

    python -m gfpm 2 3 1011 1

to find a primitive element of GF(2^3) modulo irreducible polynomial
1 + x^2 + x^3, with verbose output. The polynomial is given by its digits,
constant term first. Missing arguments are prompted for interactively.

Output is printed as digit vectors, or in algebraic form if verbose.
With verbose output, the powers P^d mod f(x) are printed for each candidate P
and each divisor d of p^m - 1 tested.
"""

import sys
import time
import argparse
import logging
import gfpm
from gfpm.finfield import FiniteField
from gfpm.errors import FieldError


def read_int(s):
    """Parse a nonnegative integer, surrounding whitespace allowed."""
    s = s.strip()
    if not s.isdigit():
        raise ValueError(f'invalid number {s!r}')

    return int(s)


def read_poly(s):
    """Parse a polynomial given as string of digits, constant term first."""
    s = s.strip()
    if not s or not s.isdigit():
        raise ValueError(f'invalid polynomial {s!r}')

    return [int(ch) for ch in s]


def read_flag(s):
    """Parse a 0/1 flag."""
    s = s.strip()
    if s not in ('0', '1'):
        raise ValueError(f'invalid flag {s!r}')

    return s == '1'


def _arg_type(read, what):
    def parse(s):
        try:
            return read(s)
        except ValueError:
            raise argparse.ArgumentTypeError(f'Error reading {what} from {s}') from None

    return parse


def prompt(text, read, what):
    """Prompt until the reply can be read, reporting errors on stderr."""
    while True:
        s = input(text)
        try:
            return read(s)
        except ValueError:
            print(f'Error reading {what} from {s}', file=sys.stderr)


def get_arg_parser():
    """Return parser for the command line arguments of gfpm."""
    parser = argparse.ArgumentParser(prog='gfpm', parents=[gfpm.get_arg_parser()],
                                     description='Find a primitive element of GF(p^m).')
    parser.add_argument('p', nargs='?', type=_arg_type(read_int, 'P'), metavar='P',
                        help='prime characteristic p')
    parser.add_argument('m', nargs='?', type=_arg_type(read_int, 'M'), metavar='M',
                        help='extension degree m>=1')
    parser.add_argument('poly', nargs='?', type=_arg_type(read_poly, 'polynomial'),
                        metavar='POLY',
                        help='irreducible polynomial of degree m as digits, e.g. 101 for 1+x^2')
    parser.add_argument('verbose', nargs='?', type=_arg_type(read_flag, 'verbose'),
                        metavar='VERBOSE', help='verbose output 1/0')
    parser.add_argument('all_degrees', nargs='?', type=_arg_type(read_flag, "'all degrees'"),
                        metavar='ALLDEGS', help="'all degrees' 1/0 (reserved)")
    parser.add_argument('-V', '--version', action='version',
                        version=f'%(prog)s {gfpm.__version__}')
    parser.set_defaults(all_degrees=False)
    return parser


def main(argv=None):
    args = get_arg_parser().parse_args(argv)

    try:
        p = args.p
        if p is None:
            p = prompt('Enter P: ', read_int, 'P')
        m = args.m
        if m is None:
            m = prompt('Enter M: ', read_int, 'M')
        coeffs = args.poly
        if coeffs is None:
            coeffs = prompt('Enter polynomial (e.g. 101 for 1+x^2): ', read_poly, 'polynomial')
        verbose = args.verbose
        if verbose is None:
            verbose = prompt('Verbose output (1/0)? ', read_flag, 'verbose')
    except EOFError:
        print('Error: unexpected end of input', file=sys.stderr)
        return 1

    try:
        F = FiniteField(p, m)
        f = F.poly(coeffs)
        print(f'Irreducible polynomial is {f if verbose else f.to_vector(m + 1)}')
        F.set_irreducible(f)
        t1 = time.perf_counter()
        g = F.primitive_element(verbose=verbose, all_degrees=args.all_degrees)
        t2 = time.perf_counter()
    except (FieldError, ValueError) as exc:
        logging.debug(f'Search failed for {p=} {m=} {coeffs=}')
        print(f'Error: {exc}', file=sys.stderr)
        return 1

    print(f'Primitive element is {g if verbose else g.to_vector(m)}')
    print(f'Time taken: {(t2 - t1) * 1000:.3f}ms')
    return 0


if __name__ == '__main__':
    sys.exit(main())
