"""Access Log Analyzer - Exceptions"""


class InvalidLogFormat(ValueError):
    """Raised when input does not look like a Common/Combined access log"""

    def __init__(self, sample: str = ''):
        self.sample = sample
        first_line = sample.strip().splitlines()[0][:80] if sample.strip() else ''
        super().__init__(
            f"Input is not a valid access log (first line: {first_line!r})"
        )
