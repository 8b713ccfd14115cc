import json
import threading

import pytest

from pyisbnranges.ranges import (
    RangeTable, RangeRule, RangeInfo, RegistrationGroup, default_table, set_default_table,
)
from pyisbnranges import converter
from pyisbnranges.ranges import table as table_module


def test_RegistrationGroup():
    g = RegistrationGroup('978', '2', 'French language')
    assert str(g) == '978-2'
    assert g.isbn10_prefix == '2'
    assert g == RegistrationGroup('978', '2', 'other name')
    assert len({g, RegistrationGroup('978', '2', 'French language')}) == 1

    with pytest.raises(ValueError):
        RegistrationGroup('977', '2', 'French language')


def test_RangeRule():
    rule = RangeRule(3, '200', '699')
    assert rule.matches('200') and rule.matches('699') and rule.matches('345')
    assert not rule.matches('199')
    assert not rule.matches('700')
    assert rule.size == 500

    with pytest.raises(ValueError, match='range bound'):
        RangeRule(2, '0', '19')

    with pytest.raises(ValueError, match='range bound'):
        RangeRule(2, '0X', '19')


def test_RangeTable(small_table):
    assert len(small_table) == 3
    group, rules = list(small_table)[1]
    assert group.identifier == '99955'
    assert rules == (RangeRule(1, '0', '1'),)
    assert small_table.date.startswith('Mon')


@pytest.mark.parametrize('isbn, group_identifier, parts', [
    ('0123456789', '0', ['0', '12', '345678', '9']),
    ('0234567899', '0', ['0', '234', '56789', '9']),
    ('9780123456786', '978-0', ['978', '0', '12', '345678', '6']),
    ('9995501236', '99955', ['99955', '0', '123', '6']),
    ('9791001234563', '979-10', ['979', '10', '01', '23456', '3']),
    # group known, range unknown
    ('0800000000', '0', None),
    ('9995523450', '99955', None),
    ('9791098765438', '979-10', None),
])
def test_lookup(small_table, isbn, group_identifier, parts):
    info = small_table.lookup(isbn)
    assert isinstance(info, RangeInfo)
    assert info.group_identifier == group_identifier
    assert info.parts == parts


@pytest.mark.parametrize('isbn', ['1234567890', '9781234567897', '9790123456785'])
def test_lookup_unknown_group(small_table, isbn):
    assert small_table.lookup(isbn) is None
    assert small_table.format(isbn) == isbn


def test_lookup_first_match_wins():
    short, long_ = \
        ['978', '1', 'short', [[1, '0', '9']]], ['978', '12', 'long', [[1, '0', '9']]]
    assert RangeTable([short, long_]).lookup('123456789X').group.name == 'short'
    assert RangeTable([long_, short]).lookup('123456789X').group.name == 'long'

    table = RangeTable([['978', '1', 'rules', [[2, '00', '99'], [3, '000', '999']]]])
    assert table.lookup('123456789X').parts == ['1', '23', '456789', 'X']


def test_format(small_table):
    assert small_table.format('0123456789') == '0-12-345678-9'
    assert small_table.format('0800000000') == '0800000000'


def test_groups(small_table):
    assert [str(g) for g in small_table.groups()] == ['978-0', '978-99955', '979-10']
    assert [g.isbn10_prefix for g in small_table.groups(is13=False)] == ['0', '99955']


def test_stats(small_table):
    assert small_table.group_count == 3
    # 20 * 10**6 + 500 * 10**5 + 2 * 10**3 + 20 * 10**5
    assert small_table.valid_isbn_count == 72002000


def test_from_path(tmpdir):
    fname = tmpdir / 'ranges.json'
    fname.write_text(
        json.dumps({'date': 'today', 'groups': [['979', '8', 'United States', [[3, '200', '229']]]]}),
        encoding='utf8')
    table = RangeTable.from_path(str(fname))
    assert table.date == 'today'
    assert table.serial is None
    assert table.format('9798200000002') == '979-8-200-00000-2'


def test_default_table(table):
    assert default_table() is table
    assert len(table) == 273


def test_default_table_concurrent_init(monkeypatch):
    monkeypatch.setattr(table_module, '_default', None)
    res = []
    threads = [threading.Thread(target=lambda: res.append(default_table())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(res) == 8
    assert all(t is res[0] for t in res)


def test_isbn10_prefix_is_shared_with_converter():
    assert table_module.ISBN10_PREFIX is converter.ISBN10_PREFIX


def test_set_default_table(monkeypatch, small_table):
    monkeypatch.setattr(table_module, '_default', None)
    set_default_table(small_table)
    assert default_table() is small_table


@pytest.mark.parametrize('is13, prefix, name', [
    (False, '0', 'English language'),
    (False, '1', 'English language'),
    (False, '2', 'French language'),
    (False, '3', 'German language'),
    (False, '4', 'Japan'),
    (False, '611', 'Thailand'),
    (False, '85', 'Brazil'),
    (False, '88', 'Italy'),
    (False, '99970', 'Haiti'),
    (False, '605', 'Turkey'),
    (False, '979', 'Indonesia'),
    (True, '978-0', 'English language'),
    (True, '978-1', 'English language'),
    (True, '978-2', 'French language'),
    (True, '978-3', 'German language'),
    (True, '978-4', 'Japan'),
    (True, '978-611', 'Thailand'),
    (True, '978-85', 'Brazil'),
    (True, '978-88', 'Italy'),
    (True, '978-99970', 'Haiti'),
    (True, '979-12', 'Italy'),
    (True, '978-605', 'Turkey'),
    (True, '978-979', 'Indonesia'),
    (True, '979-13', 'Spain'),
])
def test_bundled_groups(table, is13, prefix, name):
    groups = {
        (str(g) if is13 else g.isbn10_prefix): g.name for g in table.groups(is13=is13)}
    assert groups[prefix] == name


def test_bundled_group_views(table):
    isbn10_groups, isbn13_groups = table.groups(is13=False), table.groups()
    assert 0 < len(isbn10_groups) < len(isbn13_groups)
    assert all(g.prefix == '978' for g in isbn10_groups)


def test_bundled_stats(table):
    assert table.group_count == 273
    assert 200 < table.group_count < 400
    assert 10 ** 9 < table.valid_isbn_count < 2 * 10 ** 9
    assert table.date
