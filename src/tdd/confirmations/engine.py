"""Typed confirmations used inside test bodies.

Every confirmation returns ``None`` when the values agree and raises a
:class:`~tdd.confirmations._base.ConfirmError` subclass otherwise. The
source line defaults to the line of the call site.
"""

from __future__ import annotations

import inspect
import numbers
from typing import Any

import numpy as np

from tdd.confirmations._base import BoolConfirmError, ValueConfirmError


SINGLE_PRECISION_TOLERANCE = 1e-4
DOUBLE_PRECISION_TOLERANCE = 1e-6

_SINGLE_PRECISION_TYPES = (np.float16, np.float32)


def _caller_line(depth: int = 2) -> int | None:
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                return None
            frame = frame.f_back
        return frame.f_lineno if frame is not None else None
    finally:
        del frame


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not _is_bool(value)


def _is_floating(value: Any) -> bool:
    return isinstance(value, (float, np.floating))


def tolerance_for(expected: Any, actual: Any) -> float:
    """Return the absolute tolerance used when comparing two floating values.

    Single precision operands (``numpy.float16``/``numpy.float32``) widen the
    window to ``1e-4``; everything else compares within ``1e-6``.
    """
    if isinstance(expected, _SINGLE_PRECISION_TYPES) or isinstance(actual, _SINGLE_PRECISION_TYPES):
        return SINGLE_PRECISION_TOLERANCE
    return DOUBLE_PRECISION_TOLERANCE


def is_close(expected: Any, actual: Any, tolerance: float) -> bool:
    """Check that ``actual`` lies inside ``[expected - tolerance, expected + tolerance]``.

    NaN never lies inside any window.
    """
    return expected - tolerance <= actual <= expected + tolerance


def _confirm_bool(expected: bool, actual: Any, line: int | None) -> None:
    if bool(actual) != bool(expected):
        raise BoolConfirmError(bool(expected), line)


def _confirm_float(expected: Any, actual: Any, line: int | None) -> None:
    if not is_close(expected, actual, tolerance_for(expected, actual)):
        raise ValueConfirmError(str(expected), str(actual), line)


def _confirm_value(expected: Any, actual: Any, line: int | None) -> None:
    if actual != expected:
        raise ValueConfirmError(str(expected), str(actual), line)


def _dispatch(expected: Any, actual: Any, line: int | None) -> None:
    if _is_bool(expected):
        _confirm_bool(expected, actual, line)
    elif isinstance(expected, str) and isinstance(actual, str):
        _confirm_value(expected, actual, line)
    elif _is_real(expected) and _is_real(actual) and (_is_floating(expected) or _is_floating(actual)):
        _confirm_float(expected, actual, line)
    else:
        _confirm_value(expected, actual, line)


def confirm(expected: Any, actual: Any, line: int | None = None) -> None:
    """Confirm that ``actual`` matches ``expected``.

    Parameters
    ----------
    expected : Any
        Reference value. Its type selects the comparison: booleans compare
        truthiness, strings compare exactly, floating point numbers compare
        within a fixed tolerance and everything else uses ``==``.
    actual : Any
        Value produced by the code under test.
    line : int or None
        Source line to report. Defaults to the caller's line.

    Raises
    ------
    BoolConfirmError
        If a boolean expectation does not hold.
    ValueConfirmError
        If the values differ.
    """
    if line is None:
        line = _caller_line()
    _dispatch(expected, actual, line)


def confirm_true(actual: Any, line: int | None = None) -> None:
    """Confirm that ``actual`` is truthy."""
    if line is None:
        line = _caller_line()
    _confirm_bool(True, actual, line)


def confirm_false(actual: Any, line: int | None = None) -> None:
    """Confirm that ``actual`` is falsy."""
    if line is None:
        line = _caller_line()
    _confirm_bool(False, actual, line)
