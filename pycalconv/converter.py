"""Conversion between the Jalali, Gregorian and Hijri calendars.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Every conversion goes through the Julian Day Number: the input date is
validated by normalize(), turned into a JDN by its own calendar, and the
JDN is turned back into each calendar.  No calendar is ever converted
directly into another one, so the three dates of a ConversionResult always
name the same day.

Exported Functions:
normalize -- Validates a calendar, year, month, day and returns a CalendarDate.
to_jdn -- Julian Day Number of a date in any calendar.
from_jdn -- Date in a given calendar for a Julian Day Number.
convert -- The same day in all three calendars.
calc_age -- Elapsed years, months and days since a birth date.
"""

__all__ = ['normalize', 'to_jdn', 'from_jdn', 'convert', 'calc_age']

import logging
import math
import numbers
from collections.abc import Mapping
from datetime import date as Date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Tuple, Union  # pylint: disable=unused-import

from .calendar import (gregorian_to_jdn, jdn_to_gregorian,
                       days_in_gregorian_month, date_to_jdn)
from .jalali import jalali_month_length, jalali_to_jdn, jdn_to_jalali
from .hijri import hijri_month_length, hijri_to_jdn, jdn_to_hijri
from .exception import InvalidNumberError, InvalidDayError, FutureDateError
from .datatype import (JALALI, GREGORIAN, HIJRI, CalendarDate, JalaliDate,
                       GregorianDate, HijriDate, ConversionResult, AgeResult,
                       calendar_tag, today)

_log = logging.getLogger("pycalconv")

# Persian and Arabic-Indic digits as typed into a form
PERSIAN_DIGITS = '۰۱۲۳۴۵۶۷۸۹'
ARABIC_INDIC_DIGITS = '٠١٢٣٤٥٦٧٨٩'

_DIGITS = str.maketrans(PERSIAN_DIGITS + ARABIC_INDIC_DIGITS, '0123456789' * 2)

_MONTH_LENGTH = {JALALI: jalali_month_length,
                 GREGORIAN: days_in_gregorian_month,
                 HIJRI: hijri_month_length}

_TO_JDN = {JALALI: jalali_to_jdn,
           GREGORIAN: gregorian_to_jdn,
           HIJRI: hijri_to_jdn}

_FROM_JDN = {JALALI: lambda jdn: JalaliDate(*jdn_to_jalali(jdn)),
             GREGORIAN: lambda jdn: GregorianDate(*jdn_to_gregorian(jdn)),
             HIJRI: lambda jdn: HijriDate(*jdn_to_hijri(jdn))}


def _parse_number(value, field):
    # type: (Any, str) -> int
    """Return VALUE as an int, or raise InvalidNumberError.

    Accepts ints, whole finite floats and decimals, and strings holding
    one of those (Persian and Arabic-Indic digits included).
    """
    if value is None or isinstance(value, bool):
        raise InvalidNumberError("%s is not a number: %r" % (field, value))
    if isinstance(value, numbers.Integral):
        return int(value)

    if isinstance(value, str):
        text = value.strip().translate(_DIGITS)
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise InvalidNumberError("%s is not a number: %r" % (field, value)) from None

    if isinstance(value, Decimal):
        whole = value.is_finite() and value == value.to_integral_value()
    elif isinstance(value, numbers.Real):
        whole = math.isfinite(value) and value == int(value)
    else:
        whole = False
    if not whole:
        raise InvalidNumberError("%s is not a whole number: %r" % (field, value))
    return int(value)


def _split(value, year, month, day):
    # type: (Any, Any, Any, Any) -> Tuple[Any, Any, Any, Any]
    """Split the accepted call forms into calendar, year, month, day."""
    if year is not None or month is not None or day is not None:
        return value, year, month, day
    if isinstance(value, CalendarDate):
        return value.calendar, value.year, value.month, value.day
    if isinstance(value, Mapping):
        return (value.get('calendar'), value.get('year'),
                value.get('month'), value.get('day'))
    raise TypeError("Expected a CalendarDate, a mapping, or calendar, year, month, day")


def normalize(calendar, year, month, day):
    # type: (Any, Any, Any, Any) -> CalendarDate
    """Validate a date and return it as a CalendarDate.

    :param calendar: Calendar name; see datatype.calendar_tag.
    :param year: Year, as a number or numeric string.
    :param month: Month, 1 to 12.
    :param day: Day of the month.
    :raises InvalidNumberError: A field is not a whole finite number.
    :raises UnknownCalendarError: The calendar is not supported.
    :raises InvalidMonthError: The month is outside 1..12.
    :raises InvalidDayError: The day does not exist in that month.
    :raises OutOfRangeError: The year is outside the calendar's range.
    """
    y = _parse_number(year, 'year')
    m = _parse_number(month, 'month')
    d = _parse_number(day, 'day')
    tag = calendar_tag(calendar)

    length = _MONTH_LENGTH[tag](y, m)
    if d < 1 or d > length:
        raise InvalidDayError("Invalid %s day %d for %d-%02d (month has %d days)"
                              % (tag, d, y, m, length))
    return CalendarDate(tag, y, m, d)


def to_jdn(value, year=None, month=None, day=None):
    # type: (Any, Any, Any, Any) -> int
    """Julian Day Number of a date in any supported calendar.

    Accepts a CalendarDate, a mapping with calendar/year/month/day keys,
    or the four values as separate arguments.
    """
    date = normalize(*_split(value, year, month, day))
    return _TO_JDN[date.calendar](date.year, date.month, date.day)


def from_jdn(jdn, calendar):
    # type: (int, str) -> Union[JalaliDate, GregorianDate, HijriDate]
    return _FROM_JDN[calendar_tag(calendar)](jdn)


def convert(value, year=None, month=None, day=None):
    # type: (Any, Any, Any, Any) -> ConversionResult
    """Express a date in all three calendars.

    Accepts the same forms as to_jdn.  Raises the errors of normalize, and
    OutOfRangeError when the day cannot be expressed in one of the
    calendars; there are no partial results.
    """
    date = normalize(*_split(value, year, month, day))
    jdn = _TO_JDN[date.calendar](date.year, date.month, date.day)
    result = ConversionResult(_FROM_JDN[JALALI](jdn),
                              _FROM_JDN[GREGORIAN](jdn),
                              _FROM_JDN[HIJRI](jdn))
    _log.debug("Converted %s %d-%02d-%02d (JDN %d): %s",
               date.calendar, date.year, date.month, date.day, jdn, result)
    return result


def _reference_jdn(reference_date):
    # type: (Any) -> int
    if reference_date is None:
        reference_date = today()
    if isinstance(reference_date, Date):
        return date_to_jdn(reference_date)
    return to_jdn(GREGORIAN, *reference_date)


def calc_age(value, year=None, month=None, day=None, reference_date=None):
    # type: (Any, Any, Any, Any, Optional[Any]) -> AgeResult
    """Age in years, months and days of a birth date, as of REFERENCE_DATE.

    The birth date may be in any calendar; the count is done on the
    Gregorian calendar the way people count age: whole years, then whole
    months, then the remaining days.  REFERENCE_DATE is a Gregorian
    datetime.date, GregorianDate or (year, month, day) and defaults to
    today in the local time zone.

    :raises FutureDateError: The birth date is after the reference date.
    """
    birth_jdn = to_jdn(value, year, month, day)
    today_jdn = _reference_jdn(reference_date)
    if today_jdn < birth_jdn:
        raise FutureDateError("Birth date is %d days in the future"
                              % (birth_jdn - today_jdn))

    by, bm, bd = jdn_to_gregorian(birth_jdn)
    ty, tm, td = jdn_to_gregorian(today_jdn)
    years = ty - by
    months = tm - bm
    days = td - bd
    if days < 0:
        months -= 1
        if tm == 1:
            days += days_in_gregorian_month(ty - 1, 12)
        else:
            days += days_in_gregorian_month(ty, tm - 1)
        # Birth day beyond the end of the previous month
        if days < 0:
            days = 0
    if months < 0:
        years -= 1
        months += 12

    age = AgeResult(years, months, days)
    _log.debug("Age from JDN %d to JDN %d: %s", birth_jdn, today_jdn, age)
    return age
