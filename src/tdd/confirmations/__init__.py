"""Confirmation library for test bodies."""

from tdd.confirmations._base import (
    UNEXPECTED_EXCEPTION_REASON,
    BoolConfirmError,
    ConfirmError,
    MissingExceptionError,
    SuiteNotFoundError,
    ValueConfirmError,
)
from tdd.confirmations.engine import (
    DOUBLE_PRECISION_TOLERANCE,
    SINGLE_PRECISION_TOLERANCE,
    confirm,
    confirm_false,
    confirm_true,
    is_close,
    tolerance_for,
)

__all__ = [
    "UNEXPECTED_EXCEPTION_REASON",
    "DOUBLE_PRECISION_TOLERANCE",
    "SINGLE_PRECISION_TOLERANCE",
    "BoolConfirmError",
    "ConfirmError",
    "MissingExceptionError",
    "SuiteNotFoundError",
    "ValueConfirmError",
    "confirm",
    "confirm_false",
    "confirm_true",
    "is_close",
    "tolerance_for",
]
