"""
Check whether strings are valid ISBN-10 or ISBN-13 numbers.

Exits with status 1 if any of the inputs is invalid.
"""
from pyisbnranges import Configuration, IsbnTools
from pyisbnranges.util import sprint


def register(parser):
    parser.add_argument(
        '--no-cleanup',
        help="do not strip non-alphanumeric characters before validating the format",
        action='store_true',
        default=False)
    parser.add_argument(
        '--no-check-digit',
        help="only validate the format, not the check digit",
        action='store_true',
        default=False)
    parser.add_argument('isbn', nargs='+', metavar='ISBN')


def run(args):
    tools = IsbnTools(Configuration(
        cleanup_before_validate=not args.no_cleanup,
        validate_check_digit=not args.no_check_digit))
    invalid = 0
    for s in args.isbn:
        if tools.is_valid_isbn(s):
            sprint('{0}\tvalid', s, color='green')
        else:
            invalid += 1
            sprint('{0}\tinvalid', s, color='red')
    return 1 if invalid else 0
