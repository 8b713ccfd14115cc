# ranges

from .models import RegistrationGroup, RangeRule, RangeInfo
from .table import RangeTable, default_table, set_default_table

__all__ = [
    'RegistrationGroup', 'RangeRule', 'RangeInfo',
    'RangeTable', 'default_table', 'set_default_table',
]
