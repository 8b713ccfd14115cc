import pytest

from pyisbnranges.ranges import RangeTable, default_table

SMALL_TABLE = [
    ['978', '0', 'English language', [[2, '00', '19'], [3, '200', '699']]],
    # A length of 0 marks a range not defined for use.
    ['978', '99955', 'Srpska, Republic of', [[0, '', ''], [1, '0', '1']]],
    ['979', '10', 'France', [[2, '00', '19']]],
]


@pytest.fixture(scope='session')
def table():
    """The range table bundled with the package."""
    return default_table()


@pytest.fixture
def small_table():
    return RangeTable(SMALL_TABLE, date='Mon, 1 Jan 2024 00:00:00 GMT')
