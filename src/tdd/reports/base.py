"""Reporter interface for runner status lines."""

from __future__ import annotations

from abc import ABC, abstractmethod


SUITE_RULE = "------------------ "
ITEM_RULE = "------------ "
SUMMARY_RULE = "-------------------------"
SINGLE_TESTS_LABEL = "Single Tests"


class Reporter(ABC):
    """Formats runner events as line-oriented status text.

    Subclasses only decide where a line goes via :meth:`emit`.
    """

    @abstractmethod
    def emit(self, text: str, style: str | None = None) -> None:
        """Write ``text`` followed by a newline."""

    def on_run_start(self, suite_count: int) -> None:
        self.emit(f"Running {suite_count} test suites")

    def on_suite_start(self, suite_name: str) -> None:
        self.emit(f"{SUITE_RULE}Suite: {suite_name or SINGLE_TESTS_LABEL}", style="bold")

    def on_suite_not_found(self, suite_name: str) -> None:
        self.emit("Test suite is not found. Exiting test application.", style="red")

    def on_setup_start(self, name: str) -> None:
        self.emit(f"{ITEM_RULE}Setup: {name}")

    def on_teardown_start(self, name: str) -> None:
        self.emit(f"{ITEM_RULE}Teardown: {name}")

    def on_setup_failed(self, suite_name: str) -> None:
        self.emit("Test suite setup failed. Skipping tests in suite.", style="red")

    def on_teardown_failed(self, suite_name: str) -> None:
        self.emit("Test suite teardown failed.", style="red")

    def on_test_start(self, name: str) -> None:
        self.emit(f"{ITEM_RULE}Test: {name}")

    def on_passed(self) -> None:
        self.emit("Passed", style="green")

    def on_expected_failure(self, reason: str) -> None:
        self.emit(f"Expected failure\n{reason}", style="blue")

    def on_missed_expected_failure(self) -> None:
        self.emit("Missed expected failure\nTest passed but was expected to fail.", style="magenta")

    def on_failed(self, reason: str, confirm_line: int | None) -> None:
        if confirm_line is not None:
            self.emit(f"Failed confirm on line {confirm_line}\n{reason}", style="red")
        else:
            self.emit(f"Failed\n{reason}", style="red")

    def on_summary(self, passed: int, failed: int, missed_failures: int) -> None:
        self.emit(SUMMARY_RULE)
        summary = f"Tests passed: {passed}\nTests failed: {failed}"
        if missed_failures != 0:
            summary += f"\nMissed failures: {missed_failures}"
        self.emit(summary, style="bold")
