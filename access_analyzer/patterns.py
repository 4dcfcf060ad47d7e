"""Access Log Analyzer - Constants and patterns"""

import re

VERSION = "1.0.0"

# Number of rows kept in each ranked table
DEFAULT_TOP_N = 100

# Drill-down views are less selective, so they keep more rows
DRILL_DOWN_LIMIT = 1000

# Only this much of the input is looked at by the validity check
VALIDITY_SAMPLE_SIZE = 1000

MEGABYTE = 1024 * 1024

MONTHS = {
    'Jan': 1, 'Feb': 2, 'Mar': 3, 'Apr': 4, 'May': 5, 'Jun': 6,
    'Jul': 7, 'Aug': 8, 'Sep': 9, 'Oct': 10, 'Nov': 11, 'Dec': 12,
}

# Requests ending in one of these are assets, not pages
MEDIA_EXTENSIONS = (
    'jpg', 'jpeg', 'pdf', 'mp3', 'rar', 'exe', 'wmv', 'doc', 'avi', 'ppt',
    'mpg', 'mpeg', 'tif', 'wav', 'psd', 'txt', 'bmp', 'css', 'js', 'png',
    'gif', 'swf', 'dmg', 'flv', 'gz', 'ico',
)

# Referrer values meaning "no referrer"
BLANK_REFERRERS = ('-', '')

# Prefixes dropped from a referrer to get its domain, in this order
REFERRER_PREFIXES = ('http://', 'https://', 'www.')

# Structural check for Common and Combined Log Format lines. Extra quoted
# fields after the user agent (e.g. nginx's X-Forwarded-For) are allowed.
# Only used on a couple of sample lines; the per-line parser never runs a
# regex.
LOG_PATTERN = re.compile(
    r'^\S+ \S+ \S+ \[[^\]]+\] "[^"]*" \d{3} (?:\d+|-)'
    r'(?: "[^"]*" "[^"]*"(?: "[^"]*")*)?\s*$'
)
