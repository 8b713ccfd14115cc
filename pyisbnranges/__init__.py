from .errors import IsbnError, InvalidIsbn, NotConvertible, UnknownGroup, UnknownRange
from .normalize import Variant
from .ranges import (
    RegistrationGroup, RangeRule, RangeInfo, RangeTable, default_table, set_default_table,
)
from .isbn import Isbn, parse
from .tools import Configuration, IsbnTools, is_valid_isbn10, is_valid_isbn13

__version__ = '1.0.0'

__all__ = [
    'Isbn', 'parse', 'Variant',
    'IsbnError', 'InvalidIsbn', 'NotConvertible', 'UnknownGroup', 'UnknownRange',
    'RegistrationGroup', 'RangeRule', 'RangeInfo', 'RangeTable',
    'default_table', 'set_default_table', 'list_registration_groups',
    'Configuration', 'IsbnTools', 'is_valid_isbn10', 'is_valid_isbn13',
]


def list_registration_groups(is13=True, table=None):
    """
    :param is13: If `False`, list the groups of the ISBN-10 view only (EAN prefix 978).
    """
    return (table if table is not None else default_table()).groups(is13=is13)
