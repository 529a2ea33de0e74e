"""Conversion between the Jalali, Gregorian and Hijri calendars.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__version__ = '1.0.0'

from .calendar import *   # pylint: disable=wildcard-import
from .jalali import *     # pylint: disable=wildcard-import
from .hijri import *      # pylint: disable=wildcard-import
from .datatype import *   # pylint: disable=wildcard-import
from .converter import *  # pylint: disable=wildcard-import
from .history import *    # pylint: disable=wildcard-import
from .exception import *  # pylint: disable=wildcard-import
