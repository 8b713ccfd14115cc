"""
Show the components of ISBN numbers.
"""
from clldutils.clilib import ParserError

from pyisbnranges import Isbn, IsbnError
from pyisbnranges.util import sprint, message


def register(parser):
    parser.add_argument('isbn', nargs='*', metavar='ISBN')


def run(args):
    if not args.isbn:
        raise ParserError('missing ISBN argument')

    for s in args.isbn:
        try:
            isbn = Isbn.of(s, table=args.table)
        except IsbnError as e:
            args.log.error(message(s, e))
            continue

        sprint(isbn.to_formatted_string(), attrs=['bold'])
        sprint('  {0}: {1}', isbn.variant.description, isbn.digits)
        if isbn.is_convertible_to10:
            sprint('  ISBN-10: {0}', isbn.to10().to_formatted_string())
        sprint('  ISBN-13: {0}', isbn.to13().to_formatted_string())

        if not isbn.has_valid_registration_group:
            sprint('  not in a recognized group', color='red')
            continue

        sprint('  group: {0} ({1})', isbn.group_identifier, isbn.group_name)
        if not isbn.is_valid:
            sprint('  not in a recognized range', color='red')
            continue

        sprint('  publisher: {0}', isbn.publisher_identifier)
        sprint('  title: {0}', isbn.title_identifier)
        sprint('  check digit: {0}', isbn.check_digit)
