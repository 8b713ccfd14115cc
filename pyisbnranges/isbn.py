# isbn.py

import attr
from clldutils.misc import lazyproperty

from . import converter
from .checkdigit import validate_isbn10, validate_isbn13
from .errors import InvalidIsbn, UnknownGroup, UnknownRange
from .normalize import Variant, ISBN10, ISBN13, normalize
from .ranges import default_table

__all__ = ['Isbn', 'parse']


def valid_isbn(instance, attribute, value):
    """The digits must be an unformatted, checksum-valid ISBN of the given variant."""
    if instance.variant is Variant.isbn13:
        regex, check = ISBN13, validate_isbn13
    elif instance.variant is Variant.isbn10:
        regex, check = ISBN10, validate_isbn10
    else:
        raise InvalidIsbn(value)
    if not isinstance(value, str) or not regex.fullmatch(value) or not check(value):
        raise InvalidIsbn(value)


@attr.s(frozen=True, eq=False, repr=False)
class Isbn(object):
    """A valid ISBN-10 or ISBN-13.

    Instances are created through `Isbn.of`, which cleans up and validates the
    input. Direct construction only accepts unformatted, checksum-valid digits
    matching `variant`. An ISBN-10 is equal to its corresponding ISBN-13.

    see also https://en.wikipedia.org/wiki/International_Standard_Book_Number
    """

    digits = attr.ib(validator=valid_isbn)
    variant = attr.ib()
    # `None` means the process-wide default range table.
    table = attr.ib(default=None)

    @classmethod
    def of(cls, s, table=None):
        """
        :raises InvalidIsbn: If `s` is not a valid ISBN.
        """
        digits, variant = normalize(s)
        return cls(digits, variant, table=table)

    @classmethod
    def of10(cls, s, table=None):
        """
        :raises NotConvertible: If `s` is an ISBN-13 not starting with 978.
        """
        return cls.of(s, table=table).to10()

    @classmethod
    def of13(cls, s, table=None):
        return cls.of(s, table=table).to13()

    def __str__(self):
        return self.digits

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.digits)

    def __hash__(self):
        return hash(self.to13().digits)

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.is_equal_to(other)
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, self.__class__):
            return not self.is_equal_to(other)
        return NotImplemented

    @property
    def is10(self):
        return self.variant is Variant.isbn10

    @property
    def is13(self):
        return self.variant is Variant.isbn13

    @property
    def is_convertible_to10(self):
        return self.is10 or self.digits.startswith(converter.ISBN10_PREFIX)

    def to10(self):
        """
        :raises NotConvertible: If this is an ISBN-13 not starting with 978.
        """
        if self.is10:
            return self
        return self.__class__(
            converter.isbn13_to_10(self.digits), Variant.isbn10, table=self.table)

    def to13(self):
        if self.is13:
            return self
        return self.__class__(
            converter.isbn10_to_13(self.digits), Variant.isbn13, table=self.table)

    def is_equal_to(self, other):
        return self.to13().digits == other.to13().digits

    @lazyproperty
    def range_info(self):
        table = self.table if self.table is not None else default_table()
        return table.lookup(self.digits)

    @property
    def has_valid_registration_group(self):
        return self.range_info is not None

    is_valid_group = has_valid_registration_group

    @property
    def is_valid(self):
        """
        Whether the ISBN is in a recognized range.

        If `False`, the ISBN cannot be split into parts: either it has not been
        allocated or the range table is outdated. `True` does not mean the ISBN
        has been assigned to a book.
        """
        return self.range_info is not None and self.range_info.parts is not None

    is_valid_range = is_valid

    def _info(self):
        if self.range_info is None:
            raise UnknownGroup(self.digits)
        return self.range_info

    def _parts(self):
        info = self._info()
        if info.parts is None:
            raise UnknownRange(self.digits)
        return info.parts

    @property
    def registration_group(self):
        return self._info().group

    @property
    def group_identifier(self):
        """
        For ISBN-13 the identifier includes the EAN prefix, e.g. "978-2"; the
        equivalent ISBN-10 identifier is "2".
        """
        return self._info().group_identifier

    @property
    def group_name(self):
        return self._info().group.name

    @property
    def publisher_identifier(self):
        return self._parts()[2 if self.is13 else 1]

    @property
    def title_identifier(self):
        return self._parts()[3 if self.is13 else 2]

    @property
    def parts(self):
        return list(self._parts())

    @property
    def check_digit(self):
        return self.digits[-1]

    def to_formatted_string(self):
        """The hyphenated ISBN, or the unformatted one if not in a recognized range."""
        if not self.is_valid:
            return self.digits
        return '-'.join(self.range_info.parts)

    format = to_formatted_string


def parse(s, table=None):
    return Isbn.of(s, table=table)
