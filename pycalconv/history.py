"""A bounded, newest-first list of saved conversion and age results.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

The history is kept in memory; to_json() and from_json() give the text
form the caller stores wherever it likes.  A stored history that cannot be
read back is treated as empty.
"""

__all__ = ['MAX_RECORDS', 'HistoryRecord', 'ConversionHistory']

import json
import logging
from collections import namedtuple
from datetime import datetime as Timestamp
from typing import Iterable, Iterator, List, Optional  # pylint: disable=unused-import

from .datatype import LOCALZONE

_log = logging.getLogger("pycalconv")

MAX_RECORDS = 20

HistoryRecord = namedtuple('HistoryRecord', ['kind', 'text', 'created_at'])


class ConversionHistory(object):
    """Saved results, most recent first, holding at most LIMIT records."""

    def __init__(self, records=(), limit=MAX_RECORDS):
        # type: (Iterable[HistoryRecord], int) -> None
        self.limit = limit
        self.__records = list(records)[:limit]  # type: List[HistoryRecord]

    def __len__(self):
        # type: () -> int
        return len(self.__records)

    def __iter__(self):
        # type: () -> Iterator[HistoryRecord]
        return iter(self.__records)

    def add(self, kind, text, created_at=None):
        # type: (str, str, Optional[str]) -> HistoryRecord
        """Save a result in front of the others, dropping the oldest ones
        beyond the limit.  CREATED_AT defaults to the current local time."""
        if created_at is None:
            created_at = Timestamp.now(LOCALZONE).isoformat(timespec='seconds')
        record = HistoryRecord(kind, text, created_at)
        self.__records.insert(0, record)
        del self.__records[self.limit:]
        return record

    def clear(self):
        # type: () -> None
        del self.__records[:]

    def to_json(self):
        # type: () -> str
        return json.dumps([r._asdict() for r in self.__records], ensure_ascii=False)

    @classmethod
    def from_json(cls, text, limit=MAX_RECORDS):
        # type: (Optional[str], int) -> ConversionHistory
        if not text:
            return cls(limit=limit)
        try:
            records = [HistoryRecord(str(r['kind']), str(r['text']), str(r['created_at']))
                       for r in json.loads(text)]
        except (ValueError, TypeError, KeyError) as ex:
            _log.warning("Discarding unreadable history: %s", ex)
            return cls(limit=limit)
        return cls(records, limit=limit)
