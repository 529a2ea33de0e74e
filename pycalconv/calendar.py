"""A module to convert between Gregorian dates and Julian Day Numbers.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

The Julian Day Number (JDN) is the day count every other calendar in this
package converts through.  Dates use the proleptic Gregorian calendar with
astronomical year numbering (year 0 is 1 BC), so there is no gap in 1582.

All arithmetic is on integers.  The formulas truncate toward zero on
division, which is not what Python's // does for negative operands; use
_div and _mod rather than the operators.
"""

__all__ = ['gregorian_to_jdn', 'jdn_to_gregorian', 'days_in_gregorian_month',
           'is_gregorian_leap', 'date_to_jdn', 'jdn_to_date']

from datetime import date as Date
from typing import Tuple  # pylint: disable=unused-import

from .exception import InvalidMonthError

# date.toordinal() of 0001-01-01 is 1, which is JDN 1721426
ORDINAL_OFFSET = 1721425

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _div(a, b):
    # type: (int, int) -> int
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _mod(a, b):
    # type: (int, int) -> int
    return a - _div(a, b) * b


def gregorian_to_jdn(year, month, day):
    # type: (int, int, int) -> int
    """
    Converts given year, month, day to a Julian Day Number.

       +------------------+---------+
       | (year,month,day) |     jdn |
       |------------------+---------|
       | (2000,1,1)       | 2451545 |
       | (1970,1,1)       | 2440588 |
       | (1,1,1)          | 1721426 |
       +------------------+---------+
    """
    d = _div((year + _div(month - 8, 6) + 100100) * 1461, 4)
    d += _div(153 * _mod(month + 9, 12) + 2, 5) + day - 34840408
    d -= _div(_div(year + 100100 + _div(month - 8, 6), 100) * 3, 4) - 752
    return d


def jdn_to_gregorian(jdn):
    # type: (int) -> Tuple[int, int, int]
    """Converts a Julian Day Number to a tuple (year, month, day)."""
    j = 4 * jdn + 139361631
    j = j + _div(_div(4 * jdn + 183187720, 146097) * 3, 4) * 4 - 3908
    i = _div(_mod(j, 1461), 4) * 5 + 308
    day = _div(_mod(i, 153), 5) + 1
    month = _mod(_div(i, 153), 12) + 1
    year = _div(j, 1461) - 100100 + _div(8 - month, 6)
    return year, month, day


def is_gregorian_leap(year):
    # type: (int) -> bool
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_gregorian_month(year, month):
    # type: (int, int) -> int
    """Number of days in the given Gregorian month.

    Raises InvalidMonthError when month is not in 1..12.
    """
    if month < 1 or month > 12:
        raise InvalidMonthError("Invalid Gregorian month: %s" % (month))
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _MONTH_DAYS[month - 1]


def date_to_jdn(value):
    # type: (Date) -> int
    """Julian Day Number of a datetime.date (or datetime)."""
    return value.toordinal() + ORDINAL_OFFSET


def jdn_to_date(jdn):
    # type: (int) -> Date
    """datetime.date for a Julian Day Number in the range of datetime."""
    return Date.fromordinal(jdn - ORDINAL_OFFSET)
