# models.py

import attr

__all__ = ['RegistrationGroup', 'RangeRule', 'RangeInfo']


@attr.s(frozen=True)
class RegistrationGroup(object):
    """
    A country, geographic region or language area, such as "978-1".

    Identity is the pair (prefix, identifier); the name is informational.
    """
    prefix = attr.ib(validator=attr.validators.in_(['978', '979']))
    identifier = attr.ib()
    name = attr.ib(eq=False)

    def __str__(self):
        return '{0.prefix}-{0.identifier}'.format(self)

    @property
    def isbn10_prefix(self):
        return self.identifier


def valid_bound(instance, attribute, value):
    if len(value) != instance.length or not value.isdigit():
        raise ValueError('invalid range bound for length {0}: {1!r}'.format(
            instance.length, value))


@attr.s(frozen=True)
class RangeRule(object):
    """
    A publisher range within a registration group.

    Bounds are digit strings of exactly `length` characters, so comparing
    them as strings is the same as comparing them as numbers.
    """
    length = attr.ib(converter=int)
    start = attr.ib(validator=valid_bound)
    end = attr.ib(validator=valid_bound)

    def matches(self, value):
        return self.start <= value <= self.end

    @property
    def size(self):
        return int(self.end) - int(self.start) + 1


@attr.s(frozen=True)
class RangeInfo(object):
    """
    Result of a range lookup for a single ISBN.

    `parts` has 4 items for ISBN-10 and 5 for ISBN-13, or is `None` if the
    ISBN belongs to `group` but does not fall within any of its ranges.
    """
    group = attr.ib()
    group_identifier = attr.ib()
    parts = attr.ib(default=None)
