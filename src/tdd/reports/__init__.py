from tdd.reports.base import Reporter
from tdd.reports.console import ConsoleReporter, get_reporter, set_out_stream, set_reporter

__all__ = [
    "ConsoleReporter",
    "Reporter",
    "get_reporter",
    "set_out_stream",
    "set_reporter",
]
