"""
Input validation utilities for pymodelspec.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion of hyperparameter values
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - Non-numeric placeholders (varying(), defer(...)) skip range checks
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np

from pymodelspec.core.args import MISSING, is_numeric, is_placeholder
from pymodelspec.core.exceptions import (
    InvalidModeError,
    InvalidParameterError,
    UsageError,
    ValidationError,
)


def check_no_extra_args(args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> None:
    """
    Verify that no arguments were captured by ``*args``/``**kwargs``.

    Args:
        args: Extra positional arguments
        kwargs: Extra keyword arguments

    Raises:
        UsageError: If any extra argument was supplied
    """
    if not args and not kwargs:
        return
    offending = tuple(f"<positional {i}>" for i in range(len(args))) + tuple(kwargs)
    raise UsageError(
        f"Unexpected arguments: {', '.join(offending)}. "
        f"Pass engine-specific arguments through `engine_options` instead.",
        arguments=offending,
    )


def check_mode(mode: Any, valid_modes: Iterable[str]) -> None:
    """
    Verify mode is one of the legal values.

    Args:
        mode: Requested mode
        valid_modes: Legal modes for the specification type

    Raises:
        InvalidModeError: If mode is not a legal value
    """
    valid = tuple(valid_modes)
    if not isinstance(mode, str) or mode not in valid:
        listed = ", ".join(f"'{m}'" for m in valid)
        raise InvalidModeError(
            f"`mode` should be one of: {listed}, got {mode!r}",
            mode=mode,
            valid_modes=valid,
        )


def check_hyperparameter_kind(value: Any, name: str) -> None:
    """
    Verify a hyperparameter is unset, a number or a placeholder.

    MISSING is accepted: it means the argument was not mentioned.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        InvalidParameterError: If value is of an unsupported kind or NaN
    """
    if value is MISSING or value is None or is_placeholder(value):
        return
    if not is_numeric(value):
        raise InvalidParameterError(
            f"{name}: expected a number, None or varying(), "
            f"got {type(value).__name__}",
            name=name,
            value=value,
        )
    if not isinstance(value, numbers.Integral) and np.isnan(float(value)):
        raise InvalidParameterError(f"{name}: must not be NaN", name=name, value=value)


def check_non_negative(value: Any, name: str) -> None:
    """
    Verify a numeric value is >= 0. Non-numeric values are skipped.

    Raises:
        InvalidParameterError: If value is a negative number
    """
    if is_numeric(value) and value < 0:
        raise InvalidParameterError(
            f"The amount of {name} should be >= 0, got {value}",
            name=name,
            value=value,
        )


def check_unit_interval(value: Any, name: str) -> None:
    """
    Verify a numeric value lies in the closed interval [0, 1].
    Non-numeric values are skipped.

    Raises:
        InvalidParameterError: If value is a number outside [0, 1]
    """
    if is_numeric(value) and (value < 0 or value > 1):
        raise InvalidParameterError(
            f"The {name} proportion should be within [0,1], got {value}",
            name=name,
            value=value,
        )


def check_engine_options(options: Any) -> None:
    """
    Verify engine options form a mapping with string keys.

    Args:
        options: Candidate engine options

    Raises:
        ValidationError: If options is not a mapping or has non-string keys
    """
    if not isinstance(options, Mapping):
        raise ValidationError(
            f"engine_options: expected a mapping, got {type(options).__name__}"
        )
    bad_keys = [key for key in options if not isinstance(key, str)]
    if bad_keys:
        raise ValidationError(
            f"engine_options: keys must be strings, got {bad_keys!r}"
        )
