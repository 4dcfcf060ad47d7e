"""Access Log Analyzer - Core analysis engine"""

import logging
import time
from calendar import monthrange, timegm
from collections import Counter
from dataclasses import asdict
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional, Union

from rich.progress import Progress, SpinnerColumn, TextColumn

from .errors import InvalidLogFormat
from .models import Field, LogEntry, RankedTable, TrafficRecord
from .parser import is_valid_log, parse_line, split_lines
from .patterns import (BLANK_REFERRERS, DEFAULT_TOP_N, DRILL_DOWN_LIMIT,
                       MEDIA_EXTENSIONS, MEGABYTE, MONTHS,
                       REFERRER_PREFIXES, VALIDITY_SAMPLE_SIZE)
from .ranking import top_n

logger = logging.getLogger(__name__)

_MEDIA_SUFFIXES = tuple('.' + ext for ext in MEDIA_EXTENSIONS)

# Drill-down section -> field its keys are matched against
_DRILL_DOWN_FIELDS = {
    'requests': Field.REQUEST,
    'pages': Field.REQUEST,
    'errors': Field.REQUEST,
    'referrers': Field.REFERRER,
    'traffic': Field.DATE,
}


def page_path(request: str) -> str:
    """Strip the query string and fragment from a request target."""
    for sep in ('?', '#'):
        pos = request.find(sep)
        if pos != -1:
            request = request[:pos]
    return request


def is_media(path: str) -> bool:
    return path.lower().endswith(_MEDIA_SUFFIXES)


def referrer_domain(referrer: str) -> str:
    """Normalise a referrer URL to its domain, e.g. 'example.com'.

    Scheme and 'www.' are removed as literal prefixes; no URL parsing
    happens. Blank referrers come out as '-' or ''.
    """
    for prefix in REFERRER_PREFIXES:
        if referrer.startswith(prefix):
            referrer = referrer[len(prefix):]
    end = referrer.find('/')
    if end != -1:
        referrer = referrer[:end]
    return referrer.lower()


def day_to_unix_time(date: str) -> Optional[int]:
    """Convert 'dd/Mon/yyyy' to the UTC timestamp of that midnight, or
    None if it is not a real calendar day."""
    parts = date.split('/')
    if len(parts) != 3:
        return None
    day, month, year = parts
    if month not in MONTHS or not (day.isdecimal() and year.isdecimal()):
        return None
    day, month, year = int(day), MONTHS[month], int(year)
    if not 1 <= day <= monthrange(year, month)[1]:
        return None
    return timegm((year, month, day, 0, 0, 0, 0, 0, 0))


def _resolve_filter(field, value) -> Optional[Callable[[LogEntry], bool]]:
    if field is None and value is None:
        return None
    if field is None or value is None:
        raise ValueError("A filter needs both a field and a value")
    field = Field(field)
    return lambda entry: field.of(entry) == value


class LogStore:
    """Parsed access log and the aggregations computed over it"""

    def __init__(self):
        self.entries: List[LogEntry] = []
        self.parse_time: float = 0.0
        self._parsed = False
        self._reset_tables()

    def _reset_tables(self):
        self.hosts: RankedTable = []
        self.requests: RankedTable = []
        self.pages: RankedTable = []
        self.referrers: RankedTable = []
        self.ref_domains: RankedTable = []
        self.errors: RankedTable = []
        self.traffic: List[TrafficRecord] = []

    @classmethod
    def from_text(cls, text: str) -> 'LogStore':
        store = cls()
        store.parse(text)
        return store

    @property
    def is_parsed(self) -> bool:
        return self._parsed

    def parse(self, text: str, console=None):
        """Validate and parse the full text of a log, replacing anything
        parsed before, then build the default tables."""
        started = time.perf_counter()
        sample = text[:VALIDITY_SAMPLE_SIZE]
        if not is_valid_log(sample):
            logger.warning("Rejected input, sample lines are not in Common/Combined Log Format")
            raise InvalidLogFormat(sample)

        self.entries = []
        self._parsed = False
        self._reset_tables()
        lines = split_lines(text)

        if console is not None:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True
            ) as progress:
                progress.add_task(f"Parsing {len(lines):,} lines...", total=None)
                self.entries = [parse_line(line) for line in lines]
        else:
            self.entries = [parse_line(line) for line in lines]

        self.hosts = self.parse_hosts(DEFAULT_TOP_N)
        self.requests = self.parse_requests(DEFAULT_TOP_N)
        self.pages = self.parse_pages(DEFAULT_TOP_N)
        self.referrers = self.parse_referrers(DEFAULT_TOP_N)
        self.ref_domains = self.parse_ref_domains(DEFAULT_TOP_N)
        self.errors = self.parse_errors(DEFAULT_TOP_N)
        self.traffic = self.parse_traffic()

        self._parsed = True
        self.parse_time = time.perf_counter() - started
        logger.info("Parsed %d entries in %.3fs", len(self.entries), self.parse_time)

    def analyze_file(self, filepath: str, console=None, limit: int = DEFAULT_TOP_N,
                     field: Union[Field, str, None] = None, value: Optional[str] = None) -> Dict:
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Log file not found: {filepath}")

        with open(path, 'r', encoding='utf-8', errors='ignore') as f:
            text = f.read()

        self.parse(text, console=console)
        return self.generate_report(limit, field, value)

    def _select(self, field, value) -> Iterator[LogEntry]:
        matches = _resolve_filter(field, value)
        if matches is None:
            return iter(self.entries)
        return (entry for entry in self.entries if matches(entry))

    def parse_hosts(self, limit: int, field: Union[Field, str, None] = None,
                    value: Optional[str] = None) -> RankedTable:
        """Hosts ranked by number of requests"""
        logger.debug("parse_hosts(limit=%d, field=%s, value=%r)", limit, field, value)
        hosts = Counter(entry.host for entry in self._select(field, value))
        return top_n(hosts, limit)

    def parse_requests(self, limit: int, field: Union[Field, str, None] = None,
                       value: Optional[str] = None) -> RankedTable:
        """Request targets ranked by number of hits"""
        logger.debug("parse_requests(limit=%d, field=%s, value=%r)", limit, field, value)
        requests = Counter(entry.request for entry in self._select(field, value))
        return top_n(requests, limit)

    def parse_pages(self, limit: int, field: Union[Field, str, None] = None,
                    value: Optional[str] = None) -> RankedTable:
        """Like `parse_requests`, but without media files and with query
        strings and fragments removed."""
        logger.debug("parse_pages(limit=%d, field=%s, value=%r)", limit, field, value)
        pages = Counter()
        for entry in self._select(field, value):
            page = page_path(entry.request)
            if page and not is_media(page):
                pages[page] += 1
        return top_n(pages, limit)

    def parse_referrers(self, limit: int, field: Union[Field, str, None] = None,
                        value: Optional[str] = None) -> RankedTable:
        logger.debug("parse_referrers(limit=%d, field=%s, value=%r)", limit, field, value)
        referrers = Counter(entry.referrer for entry in self._select(field, value))
        for blank in BLANK_REFERRERS:
            referrers.pop(blank, None)
        return top_n(referrers, limit)

    def parse_ref_domains(self, limit: int, field: Union[Field, str, None] = None,
                          value: Optional[str] = None) -> RankedTable:
        logger.debug("parse_ref_domains(limit=%d, field=%s, value=%r)", limit, field, value)
        domains = Counter(referrer_domain(entry.referrer)
                          for entry in self._select(field, value))
        for blank in BLANK_REFERRERS:
            domains.pop(blank, None)
        return top_n(domains, limit)

    def parse_errors(self, limit: int, field: Union[Field, str, None] = None,
                     value: Optional[str] = None) -> RankedTable:
        """Requests that ended in a 404, ranked by number of hits"""
        logger.debug("parse_errors(limit=%d, field=%s, value=%r)", limit, field, value)
        errors = Counter(entry.request for entry in self._select(field, value)
                         if entry.status == '404')
        return top_n(errors, limit)

    def parse_traffic(self, field: Union[Field, str, None] = None,
                      value: Optional[str] = None) -> List[TrafficRecord]:
        """Hits and bandwidth per day, oldest day first.

        Entries with an unparseable date are left out. Entries with
        non-numeric bytes (e.g. '-') count as a hit with zero bytes.
        """
        logger.debug("parse_traffic(field=%s, value=%r)", field, value)
        days: Dict[str, TrafficRecord] = {}
        totals: Counter = Counter()
        for entry in self._select(field, value):
            record = days.get(entry.date)
            if record is None:
                unix_time = day_to_unix_time(entry.date)
                if unix_time is None:
                    continue
                record = days[entry.date] = TrafficRecord(entry.date, unix_time, 0, 0.0)
            record.hits += 1
            if entry.bytes.isdecimal():
                totals[entry.date] += int(entry.bytes)

        for date, record in days.items():
            record.bandwidth_mb = round(totals[date] / MEGABYTE, 2)
        return sorted(days.values(), key=lambda record: record.unix_time)

    def get_user_agent(self, host: str) -> str:
        """First non-empty user agent seen for `host`, or ''."""
        for entry in self.entries:
            if entry.host == host and entry.user_agent:
                return entry.user_agent
        return ''

    def summary(self) -> Dict:
        total_bytes = sum(int(e.bytes) for e in self.entries if e.bytes.isdecimal())
        days = self.traffic or self.parse_traffic()
        return {
            'total_entries': len(self.entries),
            'unique_hosts': len({e.host for e in self.entries}),
            'unique_requests': len({e.request for e in self.entries}),
            'total_bandwidth_mb': round(total_bytes / MEGABYTE, 2),
            'first_date': days[0].date if days else None,
            'last_date': days[-1].date if days else None,
            'parse_time': round(self.parse_time, 3),
        }

    def generate_report(self, limit: int = DEFAULT_TOP_N, field: Union[Field, str, None] = None,
                        value: Optional[str] = None) -> Dict:
        """All tables as plain lists, ready for JSON. A filter narrows every
        table but not the summary."""
        _resolve_filter(field, value)
        return {
            'summary': self.summary(),
            'hosts': [list(row) for row in self.parse_hosts(limit, field, value)],
            'requests': [list(row) for row in self.parse_requests(limit, field, value)],
            'pages': [list(row) for row in self.parse_pages(limit, field, value)],
            'referrers': [list(row) for row in self.parse_referrers(limit, field, value)],
            'ref_domains': [list(row) for row in self.parse_ref_domains(limit, field, value)],
            'errors': [list(row) for row in self.parse_errors(limit, field, value)],
            'traffic': [asdict(record) for record in self.parse_traffic(field, value)],
        }

    def drill_down(self, section: str, key: str, limit: int = DRILL_DOWN_LIMIT) -> Dict:
        """Details for one row of a ranked table.

        A host gets its user agent and its top requests and pages; any
        other row gets the hosts that requested it and its daily traffic.
        """
        if section == 'hosts':
            return {
                'section': section,
                'key': key,
                'user_agent': self.get_user_agent(key),
                'requests': self.parse_requests(limit, Field.HOST, key),
                'pages': self.parse_pages(limit, Field.HOST, key),
            }

        if section not in _DRILL_DOWN_FIELDS:
            raise ValueError(f"Unknown section: {section}")
        field = _DRILL_DOWN_FIELDS[section]
        return {
            'section': section,
            'key': key,
            'hosts': self.parse_hosts(limit, field, key),
            'traffic': [asdict(record) for record in self.parse_traffic(field, key)],
        }
