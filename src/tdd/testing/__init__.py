"""Self-registering tests, suites and the runner that executes them."""

from .models import (
    Outcome,
    OutcomeKind,
    RunReport,
    RunResult,
    SuiteRecord,
    SuiteState,
    TestRecord,
    TestResult,
    TestStatus,
)
from .registry import Registry, add_suite, add_test, clear_registry, get_registry
from .context import expect_failure, get_current_record
from .declarations import setup_and_teardown, suite, suite_class, test
from .runner import Runner, classify, execute_guarded, run_tests


__all__ = [
    "Outcome",
    "OutcomeKind",
    "Registry",
    "RunReport",
    "RunResult",
    "Runner",
    "SuiteRecord",
    "SuiteState",
    "TestRecord",
    "TestResult",
    "TestStatus",
    "add_suite",
    "add_test",
    "classify",
    "clear_registry",
    "execute_guarded",
    "expect_failure",
    "get_current_record",
    "get_registry",
    "run_tests",
    "setup_and_teardown",
    "suite",
    "suite_class",
    "test",
]
