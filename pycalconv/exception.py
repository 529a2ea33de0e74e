"""Classes containing the exceptions for reporting errors.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__all__ = ['Error', 'UnknownCalendarError', 'InvalidDateError',
           'InvalidNumberError', 'InvalidMonthError', 'InvalidDayError',
           'OutOfRangeError', 'FutureDateError']


class Error(Exception):
    def __init__(self, value):
        Exception.__init__(self, value)
        self.__value = value

    def __str__(self):
        return str(self.__value)


class UnknownCalendarError(Error):
    def __init__(self, value):
        Error.__init__(self, value)


class InvalidDateError(Error):
    """A year, month or day that cannot name a date."""

    def __init__(self, value):
        Error.__init__(self, value)


class InvalidNumberError(InvalidDateError):
    def __init__(self, value):
        InvalidDateError.__init__(self, value)


class InvalidMonthError(InvalidDateError):
    def __init__(self, value):
        InvalidDateError.__init__(self, value)


class InvalidDayError(InvalidDateError):
    def __init__(self, value):
        InvalidDateError.__init__(self, value)


class OutOfRangeError(Error):
    def __init__(self, value):
        Error.__init__(self, value)


class FutureDateError(Error):
    def __init__(self, value):
        Error.__init__(self, value)
