"""Access Log Analyzer package"""

from .patterns import VERSION, DEFAULT_TOP_N
from .models import Field, LogEntry, TrafficRecord
from .errors import InvalidLogFormat
from .parser import parse_line, is_valid_log
from .ranking import top_n
from .analyzer import LogStore
from .output import print_report, print_drill_down

__all__ = ['VERSION', 'DEFAULT_TOP_N', 'Field', 'LogEntry', 'TrafficRecord',
           'InvalidLogFormat', 'parse_line', 'is_valid_log', 'top_n',
           'LogStore', 'print_report', 'print_drill_down']
