"""
Print statistics about the range table.
"""
from pyisbnranges.util import sprint


def run(args):
    table = args.table
    sprint('range message date: {0}', table.date or 'unknown')
    sprint('registration groups: {0}', table.group_count)
    sprint('valid ISBNs: {0:,}', table.valid_isbn_count)
