"""Confirmation signals raised while a test body runs."""

UNEXPECTED_EXCEPTION_REASON = "Unexpected exception thrown."


class ConfirmError(AssertionError):
    """Base class for failed confirmations.

    Attributes
    ----------
    reason : str
        Human-readable failure text, reported verbatim by the runner.
    line : int or None
        Source line of the failing confirmation, if known.
    """

    def __init__(self, reason: str, line: int | None = None):
        self.reason = reason
        self.line = line
        super().__init__(reason)


class BoolConfirmError(ConfirmError):
    """A boolean confirmation did not hold."""

    def __init__(self, expected: bool, line: int | None = None):
        self.expected = expected
        super().__init__(f"Expected: {'true' if expected else 'false'}", line)


class ValueConfirmError(ConfirmError):
    """Expected and actual values differ.

    Both sides are kept as text so the report can be rebuilt without the
    original objects.
    """

    def __init__(self, expected: str, actual: str, line: int | None = None):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected: {expected}\nActual: {actual}", line)


class MissingExceptionError(Exception):
    """A test required an exception type that was never raised.

    Raised by the runner, never by test authors.
    """

    def __init__(self, exception_type: str):
        self.exception_type = exception_type
        self.reason = f"Expected exception type {exception_type} was not thrown."
        super().__init__(self.reason)


class SuiteNotFoundError(LookupError):
    """Tests reference a suite identifier with no registered suite records."""

    def __init__(self, suite_name: str):
        self.suite_name = suite_name
        super().__init__(f"Test suite {suite_name!r} is not registered")
