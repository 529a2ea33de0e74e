"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import datetime
import logging

import pytest

from pycalconv import converter

_log = logging.getLogger("pycalconvtest")

# Nowruz 1403
REFERENCE_DATE = datetime.date(2024, 3, 20)


@pytest.fixture
def reference_date():
    # type: () -> datetime.date
    return REFERENCE_DATE


@pytest.fixture
def frozen_today(monkeypatch):
    # type: (pytest.MonkeyPatch) -> datetime.date
    """Make the host clock report REFERENCE_DATE as today."""
    _log.info("Freezing today at %s", REFERENCE_DATE)
    monkeypatch.setattr(converter, 'today', lambda: REFERENCE_DATE)
    return REFERENCE_DATE
