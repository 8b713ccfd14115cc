# normalize.py - cleanup and format validation of raw ISBN strings

import re

from clldutils.declenum import DeclEnum

from .checkdigit import validate_isbn10, validate_isbn13
from .errors import InvalidIsbn

__all__ = ['Variant', 'ASCII', 'NON_ALNUM', 'ISBN10', 'ISBN13', 'cleanup', 'normalize']

# 7-bit ASCII, the empty string does not match.
ASCII = re.compile(r'[\x00-\x7f]+')

NON_ALNUM = re.compile(r'[^0-9a-zA-Z]')

# Uppercase, unformatted ISBN-10.
ISBN10 = re.compile(r'[0-9]{9}[0-9X]')

ISBN13 = re.compile(r'97[89][0-9]{10}')


class Variant(DeclEnum):
    """
    The two ISBN representations. The value is the length of the unformatted
    digit string.
    """
    isbn10 = 10, 'ISBN-10'
    isbn13 = 13, 'ISBN-13'


def is_ascii(s):
    return ASCII.fullmatch(s) is not None


def cleanup(s):
    """Remove any non-alphanumeric character, keeping stray letters in place."""
    return NON_ALNUM.sub('', s)


def normalize(s):
    """
    Turn a raw string into an unformatted, checksum-valid ISBN.

    ISBN-13 is tried before upper-casing and before ISBN-10.

    :return: pair (`digits`, `Variant`)
    :raises InvalidIsbn: if the string is not a valid ISBN-10 or ISBN-13.
    """
    if not is_ascii(s):
        raise InvalidIsbn(s)

    s = cleanup(s)

    if ISBN13.fullmatch(s):
        if not validate_isbn13(s):
            raise InvalidIsbn(s)
        return s, Variant.isbn13

    s = s.upper()

    if ISBN10.fullmatch(s):
        if not validate_isbn10(s):
            raise InvalidIsbn(s)
        return s, Variant.isbn10

    raise InvalidIsbn(s)
