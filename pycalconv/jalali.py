"""Jalali (Persian solar Hijri) calendar.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Leap years follow Borkowski's reworking of Birashk's 33-year cycle: the
cycle is re-phased at each of the historical break years listed in BREAKS,
and within a stretch between two breaks every fourth year is leap, with a
five year gap closing each 33-year sub-cycle.  The first day of a Jalali
year is located by its "march" day, the day of March of Gregorian year
jy + 621 on which Farvardin 1 falls.

Only years from BREAKS[0] up to (not including) BREAKS[-1] are supported.
"""

__all__ = ['BREAKS', 'JalaliYearInfo', 'jalali_leap_info', 'is_jalali_leap',
           'jalali_month_length', 'jalali_to_jdn', 'jdn_to_jalali']

from collections import namedtuple
from typing import Tuple  # pylint: disable=unused-import

from .calendar import _div, _mod, gregorian_to_jdn, jdn_to_gregorian
from .exception import InvalidMonthError, OutOfRangeError

BREAKS = (-61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
          1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178)

JalaliYearInfo = namedtuple('JalaliYearInfo', ['leap', 'gy', 'march'])


def _jal_cal(jy):
    # type: (int) -> Tuple[int, int, int]
    """Return (cycle position, Gregorian year, march day) for year jy.

    Cycle position 0 is a leap year; 1 is the year after one.
    """
    if jy < BREAKS[0] or jy >= BREAKS[-1]:
        raise OutOfRangeError("Jalali year %s is outside the supported range %d..%d"
                              % (jy, BREAKS[0], BREAKS[-1] - 1))

    gy = jy + 621
    leap_j = -14
    jp = BREAKS[0]
    jump = 0
    for jm in BREAKS[1:]:
        jump = jm - jp
        if jy < jm:
            break
        leap_j += _div(jump, 33) * 8 + _div(_mod(jump, 33), 4)
        jp = jm

    n = jy - jp
    leap_j += _div(n, 33) * 8 + _div(_mod(n, 33) + 3, 4)
    if _mod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1

    # Gregorian leap days since 1 March 621 minus the Julian ones
    leap_g = _div(gy, 4) - _div((_div(gy, 100) + 1) * 3, 4) - 150
    march = 20 + leap_j - leap_g

    if jump - n < 6:
        n = n - jump + _div(jump + 4, 33) * 33
    position = _mod(_mod(n + 1, 33) - 1, 4)
    if position == -1:
        position = 4
    return position, gy, march


def jalali_leap_info(jy):
    # type: (int) -> JalaliYearInfo
    """Leap flag and new-year epoch of Jalali year jy.

    The result is a JalaliYearInfo whose leap is 1 when the year has 366
    days, gy is the Gregorian year in which the Jalali year starts and
    march is the day of March of that Gregorian year holding Farvardin 1.

    Raises OutOfRangeError outside the break-point table.
    """
    position, gy, march = _jal_cal(jy)
    return JalaliYearInfo(1 if position == 0 else 0, gy, march)


def is_jalali_leap(jy):
    # type: (int) -> bool
    return jalali_leap_info(jy).leap == 1


def jalali_month_length(jy, jm):
    # type: (int, int) -> int
    """Days in month jm of Jalali year jy.

    Farvardin to Shahrivar have 31 days, Mehr to Bahman 30, and Esfand
    29, or 30 in a leap year.
    """
    if jm < 1 or jm > 12:
        raise InvalidMonthError("Invalid Jalali month: %s" % (jm))
    # Range check applies to every month, not only Esfand
    info = jalali_leap_info(jy)
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    return 30 if info.leap else 29


def jalali_to_jdn(jy, jm, jd):
    # type: (int, int, int) -> int
    _, gy, march = _jal_cal(jy)
    return (gregorian_to_jdn(gy, 3, march) + (jm - 1) * 31
            - _div(jm, 7) * (jm - 7) + jd - 1)


def _day_of_year(jy, k):
    # type: (int, int) -> Tuple[int, int, int]
    if k <= 185:
        # First six months: 31 days each
        return jy, 1 + _div(k, 31), _mod(k, 31) + 1
    k -= 186
    return jy, 7 + _div(k, 30), _mod(k, 30) + 1


def jdn_to_jalali(jdn):
    # type: (int) -> Tuple[int, int, int]
    """Converts a Julian Day Number to a tuple (jy, jm, jd).

    Raises OutOfRangeError when the day falls outside the supported years.
    """
    gy = jdn_to_gregorian(jdn)[0]
    jy = gy - 621

    if jy == BREAKS[-1]:
        # Last supported year ends in gy; its successor has no epoch
        jy -= 1
        k = jdn - jalali_to_jdn(jy, 1, 1)
        if k >= 365 + jalali_leap_info(jy).leap:
            raise OutOfRangeError("Julian day %s is after the last supported Jalali year %d"
                                  % (jdn, jy))
        return _day_of_year(jy, k)

    position, _, march = _jal_cal(jy)
    k = jdn - gregorian_to_jdn(gy, 3, march)
    if k >= 0:
        return _day_of_year(jy, k)

    # Still in the previous Jalali year, which started in gy - 1
    jy -= 1
    if jy < BREAKS[0]:
        raise OutOfRangeError("Julian day %s is before the first supported Jalali year %d"
                              % (jdn, BREAKS[0]))
    k += 179
    if position == 1:
        k += 1
    return jy, 7 + _div(k, 30), _mod(k, 30) + 1
