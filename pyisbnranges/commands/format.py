"""
Print the hyphenated form of ISBN numbers.
"""
from pyisbnranges import IsbnTools, IsbnError
from pyisbnranges.util import message


def register(parser):
    parser.add_argument('isbn', nargs='+', metavar='ISBN')


def run(args):
    tools = IsbnTools(table=args.table)
    for s in args.isbn:
        try:
            print(tools.format(s))
        except IsbnError as e:
            args.log.error(message(s, e))
