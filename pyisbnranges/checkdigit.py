# checkdigit.py - ISBN-10 and ISBN-13 check digits

"""
All input is expected to be format-validated, i.e. to start with at least 9
(ISBN-10) or 12 (ISBN-13) digits.
"""

__all__ = [
    'isbn10_check_digit', 'isbn13_check_digit',
    'validate_isbn10', 'validate_isbn13',
]


def isbn10_check_digit(digits):
    result = sum(i * int(d) for i, d in enumerate(digits[:9], 1)) % 11
    return 'X' if result == 10 else str(result)


def isbn13_check_digit(digits):
    halfes = (digits[i:12:2] for i in (0, 1))
    odd, even = (sum(map(int, h)) for h in halfes)
    return str(-(odd + 3 * even) % 10)


def validate_isbn10(isbn):
    """The ISBN-10, unformatted, uppercase."""
    return isbn[9] == isbn10_check_digit(isbn)


def validate_isbn13(isbn):
    return isbn[12] == isbn13_check_digit(isbn)
