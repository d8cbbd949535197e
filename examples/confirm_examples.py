"""Confirmations that are expected to fail, reported as expected failures.

Run with:
    tdd-run examples/confirm_examples.py
"""

import sys

from tdd import confirm, confirm_true, expect_failure, run_tests, test


def is_negative(value: int) -> bool:
    return value < 0


def multiply_by_2(value: int) -> int:
    return value * 2


@test("Test bool confirms failure")
def _():
    expect_failure("Expected: true")
    result = is_negative(0)
    confirm_true(result)


@test("Test int confirms failure")
def _():
    expect_failure("Expected: 0\nActual: 2")
    result = multiply_by_2(1)
    confirm(0, result)


@test("Test float confirms within tolerance")
def _():
    confirm(0.3, 0.1 + 0.2)


if __name__ == "__main__":
    sys.exit(run_tests())
