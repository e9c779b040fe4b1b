import argparse
import asyncio
import logging
import sys

from .console import report_error
from .interpreter import Interpreter, StandardError
from .interpreter.evaluator import OVERFLOW_POLICIES


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog='chai',
        description='Run a Chai source file.',
    )
    parser.add_argument('source', nargs='?', help='Path to the .chai source file.')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Log pipeline progress (-vv for debug output).')
    parser.add_argument('--overflow', choices=OVERFLOW_POLICIES, default='wrap',
                        help='What Number addition does past 64 bits.')
    parser.add_argument('--encoding', default=None,
                        help='Source file encoding (detected when omitted).')
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format='%(name)s %(levelname)s: %(message)s')

    if args.source is None:
        report_error(StandardError('No input file provided.'))
        return 1

    interpreter = Interpreter({
        'overflow': args.overflow,
        'encoding': args.encoding,
    })
    return 0 if asyncio.run(interpreter.run(args.source)) else 1


if __name__ == '__main__':
    sys.exit(main())
