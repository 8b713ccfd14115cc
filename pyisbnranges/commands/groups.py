"""
List the registration groups of the range table.
"""


def register(parser):
    parser.add_argument(
        '--isbn10',
        help="only list groups which can appear in an ISBN-10, without EAN prefix",
        action='store_true',
        default=False)


def run(args):
    for group in args.table.groups(is13=not args.isbn10):
        print('{0}\t{1}'.format(
            group.isbn10_prefix if args.isbn10 else group, group.name))
