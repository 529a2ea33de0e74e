"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging

from typing import Iterator, Tuple  # pylint: disable=unused-import

import jdcal

_log = logging.getLogger("pycalconvtest")


def oracle_jdn(year, month, day):
    # type: (int, int, int) -> int
    """Julian Day Number of a Gregorian date, computed by jdcal.

    jdcal returns the Julian Date at midnight (JDN - 0.5) split in two
    floats; both halves are exact in binary so the sum rounds cleanly.
    """
    return int(sum(jdcal.gcal2jd(year, month, day)) + 0.5)


def oracle_gregorian(jdn):
    # type: (int) -> Tuple[int, int, int]
    y, m, d, _ = jdcal.jd2gcal(jdn - 0.5, 0)
    return y, m, d


def month_edges(years, month_length):
    # type: (range, object) -> Iterator[Tuple[int, int, int]]
    """Yield the first and last day of every month in YEARS."""
    for y in years:
        for m in range(1, 13):
            yield y, m, 1
            yield y, m, month_length(y, m)
