# errors.py

__all__ = ['IsbnError', 'InvalidIsbn', 'NotConvertible', 'UnknownGroup', 'UnknownRange']


class IsbnError(ValueError):
    """Base class for all ISBN errors."""

    template = '{0}'

    def __init__(self, isbn):
        self.isbn = isbn
        super(IsbnError, self).__init__(self.template.format(isbn))


class InvalidIsbn(IsbnError):
    """Input fails the charset, format or check digit validation."""

    template = '"{0}" is not a valid ISBN number.'


class NotConvertible(IsbnError):
    """An ISBN-13 not starting with 978 has no ISBN-10 equivalent."""

    template = 'ISBN {0} cannot be converted to an ISBN-10.'


class UnknownGroup(IsbnError):

    template = 'The ISBN {0} is semantically valid, but not in a recognized group.'


class UnknownRange(IsbnError):

    template = 'The ISBN {0} is semantically valid and belongs to a valid group, ' \
               'but is not in a recognized range.'
