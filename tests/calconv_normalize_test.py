"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

from decimal import Decimal

import pytest

from pycalconv import normalize, calendar_tag, CalendarDate
from pycalconv import GREGORIAN, JALALI, HIJRI
from pycalconv.exception import (Error, InvalidDateError, InvalidNumberError,
                                 InvalidMonthError, InvalidDayError,
                                 UnknownCalendarError, OutOfRangeError)


class TestCalendarTag(object):

    def test_canonical(self):
        assert calendar_tag('jalali') == JALALI
        assert calendar_tag('gregorian') == GREGORIAN
        assert calendar_tag('hijri') == HIJRI

    def test_case_and_space(self):
        assert calendar_tag(' Gregorian ') == GREGORIAN
        assert calendar_tag('JALALI') == JALALI

    def test_aliases(self):
        assert calendar_tag('persian') == JALALI
        assert calendar_tag('shamsi') == JALALI
        assert calendar_tag('islamic') == HIJRI
        assert calendar_tag('qamari') == HIJRI

    @pytest.mark.parametrize('name', ['julian', '', None, 3])
    def test_unknown(self, name):
        with pytest.raises(UnknownCalendarError):
            calendar_tag(name)


class TestNormalize(object):

    def test_valid_dates(self):
        assert normalize('gregorian', 2024, 2, 29) == CalendarDate(GREGORIAN, 2024, 2, 29)
        assert normalize('jalali', 1403, 12, 30) == (JALALI, 1403, 12, 30)
        assert normalize('hijri', 1445, 12, 30) == (HIJRI, 1445, 12, 30)

    def test_strings_are_parsed(self):
        date = normalize('gregorian', '2024', ' 03 ', '20')
        assert date == (GREGORIAN, 2024, 3, 20)
        assert all(type(v) is int for v in date[1:])

    def test_persian_digits(self):
        assert normalize('jalali', '۱۴۰۳', '۱', '۱') == (JALALI, 1403, 1, 1)
        assert normalize('hijri', '١٤٤٥', '٩', '١١') == (HIJRI, 1445, 9, 11)

    def test_whole_numbers_in_other_types(self):
        assert normalize('gregorian', 2024.0, Decimal('3'), '20.0') == (GREGORIAN, 2024, 3, 20)

    @pytest.mark.parametrize('value', [None, '', 'abc', float('nan'), float('inf'),
                                       '1.5', 2.5, True, [1]])
    def test_invalid_numbers(self, value):
        with pytest.raises(InvalidNumberError):
            normalize('gregorian', 2024, 3, value)

    def test_numbers_checked_before_calendar(self):
        with pytest.raises(InvalidNumberError):
            normalize('julian', 'x', 1, 1)

    def test_unknown_calendar(self):
        with pytest.raises(UnknownCalendarError):
            normalize('julian', 2024, 1, 1)

    def test_february_2023(self):
        with pytest.raises(InvalidDayError):
            normalize('gregorian', 2023, 2, 30)
        with pytest.raises(InvalidDayError):
            normalize('gregorian', 2023, 2, 29)

    def test_invalid_month(self):
        with pytest.raises(InvalidMonthError):
            normalize('jalali', 1402, 13, 1)
        with pytest.raises(InvalidMonthError):
            normalize('hijri', 1445, 0, 1)

    @pytest.mark.parametrize('calendar,year,month,day', [
        ('jalali', 1402, 12, 30),
        ('jalali', 1403, 7, 31),
        ('hijri', 1446, 12, 30),
        ('hijri', 1445, 2, 30),
        ('gregorian', 2024, 4, 31),
        ('gregorian', 2024, 1, 0),
        ('gregorian', 2024, 1, -1)])
    def test_invalid_day(self, calendar, year, month, day):
        with pytest.raises(InvalidDayError):
            normalize(calendar, year, month, day)

    def test_no_clamping(self):
        """An invalid day is an error, never a substitute value."""
        with pytest.raises(InvalidDayError):
            normalize('gregorian', 2024, 1, 32)

    def test_out_of_range_years(self):
        with pytest.raises(OutOfRangeError):
            normalize('jalali', 3178, 1, 1)
        with pytest.raises(OutOfRangeError):
            normalize('hijri', 0, 1, 1)

    def test_error_hierarchy(self):
        for cls in (InvalidNumberError, InvalidMonthError, InvalidDayError):
            assert issubclass(cls, InvalidDateError)
        with pytest.raises(Error) as exc:
            normalize('gregorian', 2023, 2, 30)
        assert '2023-02' in str(exc.value)
