"""A module for housing the value types of the converter.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
CalendarDate -- A validated date tagged with its calendar.
JalaliDate -- Jalali year, month, day (jy, jm, jd).
GregorianDate -- Gregorian year, month, day (gy, gm, gd).
HijriDate -- Hijri year, month, day (hy, hm, hd).
ConversionResult -- The same day in all three calendars.
AgeResult -- Elapsed years, months and days.

Exported Functions:
calendar_tag -- Resolves a calendar name to its canonical tag.
today -- The current Gregorian date in a time zone.
"""

__all__ = ['JALALI', 'GREGORIAN', 'HIJRI', 'CALENDARS', 'LOCALZONE',
           'CalendarDate', 'JalaliDate', 'GregorianDate', 'HijriDate',
           'ConversionResult', 'AgeResult', 'calendar_tag', 'today']

from collections import namedtuple
from datetime import datetime as Timestamp, date as Date
from datetime import tzinfo  # pylint: disable=unused-import
from typing import Any, Dict, Optional, Union  # pylint: disable=unused-import
from zoneinfo import ZoneInfo

import tzlocal

from .exception import UnknownCalendarError

JALALI = 'jalali'
GREGORIAN = 'gregorian'
HIJRI = 'hijri'

CALENDARS = (JALALI, GREGORIAN, HIJRI)

_ALIASES = {
    'persian': JALALI,
    'shamsi': JALALI,
    'solar': JALALI,
    'miladi': GREGORIAN,
    'islamic': HIJRI,
    'lunar': HIJRI,
    'qamari': HIJRI,
}

LOCALZONE = tzlocal.get_localzone()


def calendar_tag(name):
    # type: (Any) -> str
    """Return the canonical calendar tag for NAME.

    Matching ignores case and surrounding whitespace, and accepts a few
    common alternative names (persian, shamsi, islamic, ...).
    """
    if not isinstance(name, str):
        raise UnknownCalendarError("Unknown calendar: %r" % (name,))
    key = name.strip().lower()
    if key in CALENDARS:
        return key
    if key in _ALIASES:
        return _ALIASES[key]
    raise UnknownCalendarError("Unknown calendar: %r" % (name,))


def today(zoneinfo=LOCALZONE):
    # type: (Union[tzinfo, str]) -> Date
    """Return today's Gregorian date as seen in ZONEINFO.

    ZONEINFO may be a tzinfo or an IANA zone name such as 'Asia/Tehran'.
    """
    if isinstance(zoneinfo, str):
        zoneinfo = ZoneInfo(zoneinfo)
    return Timestamp.now(zoneinfo).date()


CalendarDate = namedtuple('CalendarDate', ['calendar', 'year', 'month', 'day'])


class JalaliDate(namedtuple('JalaliDate', ['jy', 'jm', 'jd'])):
    __slots__ = ()

    def isoformat(self):
        # type: () -> str
        return '%04d-%02d-%02d' % self


class GregorianDate(namedtuple('GregorianDate', ['gy', 'gm', 'gd'])):
    __slots__ = ()

    def isoformat(self):
        # type: () -> str
        return '%04d-%02d-%02d' % self


class HijriDate(namedtuple('HijriDate', ['hy', 'hm', 'hd'])):
    __slots__ = ()

    def isoformat(self):
        # type: () -> str
        return '%04d-%02d-%02d' % self


class ConversionResult(namedtuple('ConversionResult', ['jalali', 'gregorian', 'hijri'])):
    """One day expressed in the Jalali, Gregorian and Hijri calendars."""
    __slots__ = ()

    def to_dict(self):
        # type: () -> Dict[str, Dict[str, int]]
        return {'jalali': dict(self.jalali._asdict()),
                'gregorian': dict(self.gregorian._asdict()),
                'hijri': dict(self.hijri._asdict())}


class AgeResult(namedtuple('AgeResult', ['years', 'months', 'days'])):
    __slots__ = ()

    def to_dict(self):
        # type: () -> Dict[str, int]
        return dict(self._asdict())
