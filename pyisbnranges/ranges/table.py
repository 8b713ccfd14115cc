# table.py - the ISBN range table and the range lookup

import logging
import threading
from pathlib import Path

from clldutils import jsonlib
from clldutils.misc import lazyproperty

from ..converter import ISBN10_PREFIX
from .models import RegistrationGroup, RangeRule, RangeInfo

__all__ = ['RangeTable', 'default_table', 'set_default_table', 'DATA_FILE']

log = logging.getLogger('pyisbnranges')

DATA_FILE = Path(__file__).parent.parent / 'data' / 'ranges.json'


class RangeTable(object):
    """
    The ranges published by ISBN International, as an ordered list of
    registration groups with their ordered publisher range rules.

    Order matters: lookups return the first group and the first rule that
    match, so records are kept exactly as supplied and never re-sorted.
    """

    def __init__(self, records, date=None, serial=None):
        self.date = date
        self.serial = serial
        self._entries = []
        for prefix, identifier, name, rules in records:
            self._entries.append((
                RegistrationGroup(prefix, identifier, name),
                # Length 0 marks a range not defined for use.
                tuple(RangeRule(*r) for r in rules if int(r[0]))))

    @classmethod
    def from_path(cls, path):
        """
        Load a range table from a JSON file of the form
        `{"date": ..., "serial": ..., "groups": [[prefix, identifier, name, [[length, start, end], ...]], ...]}`
        """
        d = jsonlib.load(path)
        res = cls(d['groups'], date=d.get('date'), serial=d.get('serial'))
        log.debug('loaded {0} registration groups from {1}'.format(len(res), path))
        return res

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def groups(self, is13=True):
        """
        :param is13: If `False`, only the groups which can appear in an ISBN-10 are returned.
        """
        return [g for g, _ in self if is13 or g.prefix == ISBN10_PREFIX]

    def lookup(self, isbn):
        """
        Split an unformatted, validated ISBN-10 or ISBN-13 into its parts.

        :return: `RangeInfo` or `None` if the ISBN is not in a known group.
        """
        is13 = len(isbn) == 13
        prefix, digits = (isbn[:3], isbn[3:]) if is13 else (ISBN10_PREFIX, isbn)

        for group, rules in self:
            if group.prefix != prefix:
                continue

            group_length = len(group.identifier)
            if digits[:group_length] != group.identifier:
                continue

            parts = None
            for rule in rules:
                value = digits[group_length:group_length + rule.length]
                if rule.matches(value):
                    parts = [
                        group.identifier,
                        value,
                        digits[group_length + rule.length:-1],
                        digits[-1]]
                    if is13:
                        parts.insert(0, prefix)
                    break

            return RangeInfo(
                group=group,
                group_identifier=str(group) if is13 else group.isbn10_prefix,
                parts=parts)

    def format(self, isbn):
        info = self.lookup(isbn)
        if info is None or info.parts is None:
            return isbn
        return '-'.join(info.parts)

    @lazyproperty
    def group_count(self):
        return len(self)

    @lazyproperty
    def valid_isbn_count(self):
        """
        Number of ISBN-13 falling within a range: title digits vary freely,
        the check digit is fixed.
        """
        return sum(
            rule.size * 10 ** (9 - len(group.identifier) - rule.length)
            for group, rules in self for rule in rules)


_default = None
_lock = threading.Lock()


def default_table():
    """The range table bundled with the package, loaded once per process."""
    global _default
    if _default is None:
        with _lock:
            if _default is None:
                _default = RangeTable.from_path(DATA_FILE)
    return _default


def set_default_table(table):
    """Replace the process-wide default, e.g. with a newer range file."""
    global _default
    with _lock:
        _default = table
