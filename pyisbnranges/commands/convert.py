"""
Convert ISBN numbers to ISBN-10 or ISBN-13.
"""
from pyisbnranges import Isbn, IsbnError
from pyisbnranges.util import message


def register(parser):
    parser.add_argument(
        '--to',
        help="target representation",
        choices=['10', '13'],
        default='13')
    parser.add_argument(
        '--formatted',
        help="print hyphenated numbers",
        action='store_true',
        default=False)
    parser.add_argument('isbn', nargs='+', metavar='ISBN')


def run(args):
    for s in args.isbn:
        try:
            isbn = Isbn.of(s, table=args.table)
            isbn = isbn.to10() if args.to == '10' else isbn.to13()
        except IsbnError as e:
            args.log.error(message(s, e))
            continue
        print(isbn.to_formatted_string() if args.formatted else isbn)
