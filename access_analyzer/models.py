"""Access Log Analyzer - Data models"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


@dataclass
class LogEntry:
    """Parsed access log line"""
    host: str
    date: str
    request: str
    status: str
    bytes: str
    referrer: str
    user_agent: str


@dataclass
class TrafficRecord:
    """Hits and bandwidth for one calendar day"""
    date: str
    unix_time: int
    hits: int
    bandwidth_mb: float


class Field(str, Enum):
    """LogEntry fields that aggregations can be filtered on"""
    HOST = 'host'
    DATE = 'date'
    REQUEST = 'request'
    STATUS = 'status'
    BYTES = 'bytes'
    REFERRER = 'referrer'
    USER_AGENT = 'user_agent'

    def of(self, entry: LogEntry) -> str:
        return getattr(entry, self.value)


# (key, count) pairs, highest count first
RankedTable = List[Tuple[str, int]]
