"""Access Log Analyzer - Line parsing

Lines are split into fields with plain ``str.find`` scans that only move
forward. Matching a regular expression against every line of a log that
is a few hundred megabytes large is several times slower, so the regex in
``patterns.LOG_PATTERN`` is only used to sanity check a couple of sample
lines before the real work starts.
"""

from typing import List

from .models import LogEntry
from .patterns import LOG_PATTERN


def split_lines(text: str) -> List[str]:
    """Split raw log text into lines, dropping blank ones.

    Only '\\n' and '\\r\\n' end a line; user agents occasionally carry other
    characters that ``str.splitlines`` would treat as line breaks.
    """
    lines = text.split('\n')
    return [line[:-1] if line.endswith('\r') else line
            for line in lines if line and line != '\r']


def is_valid_log(sample: str) -> bool:
    """Check whether either of the first two non-blank lines of `sample`
    is in Common or Combined Log Format.

    The second line is checked too, since `sample` is usually a prefix of
    a larger file and its first line may have been cut.
    """
    for line in split_lines(sample)[:2]:
        if LOG_PATTERN.match(line):
            return True
    return False


def _quoted(line: str, start: int):
    """Return the text between the next two double quotes at or after
    `start` and the position of the closing quote, or ('', -1)."""
    open_pos = line.find('"', start)
    if open_pos == -1:
        return '', -1
    close_pos = line.find('"', open_pos + 1)
    if close_pos == -1:
        return '', -1
    return line[open_pos + 1:close_pos], close_pos


def parse_line(line: str) -> LogEntry:
    """Parse one Common or Combined Log Format line.

    Never fails: a malformed line gives an entry with empty or garbage
    fields. A request without a leading '/' (e.g. CONNECT) is not
    recognised.
    """
    # Host, then skip identd and userid up to the timestamp
    end = line.find(' ')
    if end == -1:
        end = len(line)
    host = line[:end]

    # Keep the day only: dd/Mon/yyyy
    start = line.find('[', end) + 1
    date = line[start:start + 11] if start else ''

    # Request target, between the method and the protocol version
    end = line.find(']', start)
    if end == -1:
        end = start
    start = line.find('/', end)
    if start == -1:
        start = end = len(line)
    else:
        end = line.find(' ', start)
        if end == -1:
            end = len(line)
    request = line[start:end]

    # Status follows the closing quote of the request
    start = line.find('" ', end)
    if start == -1:
        return LogEntry(host, date, request, '', '', '', '')
    start += 2
    end = start + 3
    status = line[start:end]

    # Bytes run to the next space, or to the end of a Common Log Format line
    start = end + 1
    end = line.find(' ', start)
    if end == -1:
        return LogEntry(host, date, request, status, line[start:], '', '')
    size = line[start:end]

    referrer, end = _quoted(line, end)
    user_agent = _quoted(line, end + 1)[0] if end != -1 else ''

    return LogEntry(host, date, request, status, size, referrer, user_agent)
