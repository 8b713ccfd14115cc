# converter.py - ISBN-10 <-> ISBN-13 for validated, unformatted input

from .checkdigit import isbn10_check_digit, isbn13_check_digit
from .errors import NotConvertible

__all__ = ['ISBN10_PREFIX', 'isbn10_to_13', 'isbn13_to_10']

ISBN10_PREFIX = '978'


def isbn10_to_13(isbn):
    digits = ISBN10_PREFIX + isbn[:9]
    return digits + isbn13_check_digit(digits)


def isbn13_to_10(isbn):
    """
    Only ISBN-13 numbers starting with 978 can be converted. The check digit
    is recomputed, not copied.

    :raises NotConvertible: for any other prefix, in particular 979.
    """
    if isbn[:3] != ISBN10_PREFIX:
        raise NotConvertible(isbn)
    digits = isbn[3:12]
    return digits + isbn10_check_digit(digits)
