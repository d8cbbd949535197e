"""tdd - a small self-registering unit-test framework."""

from .confirmations import confirm, confirm_false, confirm_true
from .reports import set_out_stream
from .testing import (
    Runner,
    expect_failure,
    run_tests,
    setup_and_teardown,
    suite,
    suite_class,
    test,
)
from .version import __version__


__all__ = [
    # Declarations
    "test",
    "suite",
    "suite_class",
    "setup_and_teardown",
    "expect_failure",
    # Confirmations
    "confirm",
    "confirm_true",
    "confirm_false",
    # Running
    "Runner",
    "run_tests",
    "set_out_stream",
]
