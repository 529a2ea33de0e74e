"""Tabular (arithmetic) Islamic calendar.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Months alternate 30 and 29 days starting with 30.  Dhu al-Hijjah, the
twelfth month, gains a 30th day in the 11 leap years of each 30-year
cycle listed in HIJRI_LEAP_YEARS.  This is a fixed arithmetic
approximation; it does not follow moon sighting and may differ by a day
or two from a published Hijri calendar.

Only years from 1 on are supported.
"""

__all__ = ['HIJRI_EPOCH', 'HIJRI_LEAP_YEARS', 'is_hijri_leap',
           'hijri_month_length', 'hijri_to_jdn', 'jdn_to_hijri']

from typing import Tuple  # pylint: disable=unused-import

from .exception import InvalidMonthError, OutOfRangeError

# JDN of 1 Muharram 1 AH
HIJRI_EPOCH = 1948439

HIJRI_LEAP_YEARS = frozenset([2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29])

CYCLE_YEARS = 30
CYCLE_DAYS = 10631


def _check_year(hy):
    # type: (int) -> None
    if hy < 1:
        raise OutOfRangeError("Hijri year %s is before year 1" % (hy))


def is_hijri_leap(hy):
    # type: (int) -> bool
    return (hy % CYCLE_YEARS or CYCLE_YEARS) in HIJRI_LEAP_YEARS


def hijri_month_length(hy, hm):
    # type: (int, int) -> int
    if hm < 1 or hm > 12:
        raise InvalidMonthError("Invalid Hijri month: %s" % (hm))
    _check_year(hy)
    if hm == 12:
        return 30 if is_hijri_leap(hy) else 29
    return 30 if hm % 2 == 1 else 29


def hijri_to_jdn(hy, hm, hd):
    # type: (int, int, int) -> int
    # ceil(29.5 * (hm - 1)) is the day offset of month hm
    return (hd + (59 * (hm - 1) + 1) // 2 + (hy - 1) * 354
            + (3 + 11 * hy) // 30 + HIJRI_EPOCH - 1)


def jdn_to_hijri(jdn):
    # type: (int) -> Tuple[int, int, int]
    """Converts a Julian Day Number to a tuple (hy, hm, hd).

    Raises OutOfRangeError for days before the Hijri epoch.
    """
    if jdn < HIJRI_EPOCH:
        raise OutOfRangeError("Julian day %s is before the Hijri epoch" % (jdn))

    jd = jdn - HIJRI_EPOCH + 10632
    n = (jd - 1) // CYCLE_DAYS
    r = jd - CYCLE_DAYS * n + 354
    q = ((10985 - r) // 5316) * ((50 * r) // 17719) + (r // 5670) * ((43 * r) // 15238)
    s = r - ((30 - q) // 15) * ((17719 * q) // 50) - (q // 16) * ((15238 * q) // 43) + 29
    hm = (24 * s) // 709
    hd = s - (709 * hm) // 24
    hy = 30 * n + q - 30
    return hy, hm, hd
