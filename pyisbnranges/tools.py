# tools.py - work with ISBN numbers as plain strings

import attr

from . import converter
from .checkdigit import validate_isbn10, validate_isbn13
from .errors import InvalidIsbn
from .normalize import ISBN10, ISBN13, is_ascii, cleanup
from .ranges import default_table

__all__ = ['Configuration', 'IsbnTools', 'is_valid_isbn10', 'is_valid_isbn13']


@attr.s(frozen=True)
class Configuration(object):
    """
    :ivar cleanup_before_validate: Remove non-alphanumeric characters before \
    validating the format. Non-ASCII input is rejected in this mode.
    :ivar validate_check_digit: Whether to validate the check digit at all.
    """
    cleanup_before_validate = attr.ib(default=True, converter=bool)
    validate_check_digit = attr.ib(default=True, converter=bool)


class IsbnTools(object):

    def __init__(self, config=None, table=None):
        self.config = config or Configuration()
        self._table = table

    @property
    def table(self):
        return self._table if self._table is not None else default_table()

    def _cleanup(self, isbn):
        """
        :return: The cleaned up string or `None` if it contains non-ASCII characters.
        """
        if self.config.cleanup_before_validate:
            if not is_ascii(isbn):
                return None
            return cleanup(isbn)
        return isbn

    def _valid10(self, isbn):
        return bool(ISBN10.fullmatch(isbn)) and \
            (not self.config.validate_check_digit or validate_isbn10(isbn))

    def _valid13(self, isbn):
        return bool(ISBN13.fullmatch(isbn)) and \
            (not self.config.validate_check_digit or validate_isbn13(isbn))

    def is_valid_isbn(self, isbn):
        return self.is_valid_isbn10(isbn) or self.is_valid_isbn13(isbn)

    def is_valid_isbn10(self, isbn):
        isbn = self._cleanup(isbn)
        return isbn is not None and self._valid10(isbn.upper())

    def is_valid_isbn13(self, isbn):
        isbn = self._cleanup(isbn)
        return isbn is not None and self._valid13(isbn)

    def convert_isbn10_to13(self, isbn):
        """
        :return: The converted, unformatted ISBN-13.
        :raises InvalidIsbn: If `isbn` is not a valid ISBN-10.
        """
        cleaned = self._cleanup(isbn)
        if cleaned is None:
            raise InvalidIsbn(isbn)
        cleaned = cleaned.upper()
        if not self._valid10(cleaned):
            raise InvalidIsbn(cleaned)
        return converter.isbn10_to_13(cleaned)

    def convert_isbn13_to10(self, isbn):
        """
        Only ISBN-13 numbers starting with 978 can be converted to an ISBN-10.

        :return: The converted, unformatted ISBN-10.
        :raises InvalidIsbn: If `isbn` is not a valid ISBN-13.
        :raises NotConvertible: If `isbn` is valid but does not start with 978.
        """
        cleaned = self._cleanup(isbn)
        if cleaned is None:
            raise InvalidIsbn(isbn)
        if not self._valid13(cleaned):
            raise InvalidIsbn(cleaned)
        return converter.isbn13_to_10(cleaned)

    def format(self, isbn):
        """
        :return: The hyphenated ISBN, or the unformatted one if not in a recognized range.
        :raises InvalidIsbn: If `isbn` is not a valid ISBN-10 or ISBN-13.
        """
        cleaned = self._cleanup(isbn)
        if cleaned is None:
            raise InvalidIsbn(isbn)
        if self._valid13(cleaned):
            return self.table.format(cleaned)
        cleaned = cleaned.upper()
        if self._valid10(cleaned):
            return self.table.format(cleaned)
        raise InvalidIsbn(cleaned)


def is_valid_isbn10(isbn, config=None):
    return IsbnTools(config).is_valid_isbn10(isbn)


def is_valid_isbn13(isbn, config=None):
    return IsbnTools(config).is_valid_isbn13(isbn)
