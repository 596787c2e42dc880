"""GFPM is a Python package for computing with finite fields GF(p^m).

GFPM provides the prime fields GF(p) for prime p, polynomials over any
such field (or, more generally, over any field-like coefficient type),
and the extension fields GF(p^m) represented as polynomials of degree
less than m modulo an irreducible polynomial of degree m.

The main application is finding a primitive element of GF(p^m), that is,
a generator of the cyclic multiplicative group of order p^m - 1. Candidate
elements are enumerated in a fixed order and the first element of full
multiplicative order is returned.

Field and polynomial arithmetic is available via Python's operator
overloading. The package can also be run from the command line:

    python -m gfpm 2 3 1011

to find a primitive element of GF(2^3) for modulus 1 + x^2 + x^3.
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments controlling GFPM's logging."""
    parser = argparse.ArgumentParser(add_help=False)

    group = parser.add_argument_group('GFPM logging')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info/warning(default)/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(log_level=os.getenv('GFPM_LOGLEVEL', 'warning'))
    return parser


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.CRITICAL)
    else:
        ch = (options.log_level or 'w')[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '3'  # default to '3'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stderr)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    del options
