"""
Argument markers shared by all specification types.

A hyperparameter argument carries one of three signals:

    MISSING        not mentioned in this call
    None           unset: let the engine choose its default. A merged
                   ``update`` leaves the stored value alone; a fresh one
                   stores it as unset.
    value          a number, ``varying()`` or ``defer(...)``

Engine options are stored unevaluated. Plain values are passed through
as-is; a ``Deferred`` wraps a zero-argument callable that the fit step
evaluates with ``resolve``.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np


class _Missing:
    """Sentinel type for arguments not mentioned in a call."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


@dataclass(frozen=True)
class Varying:
    """Placeholder for a hyperparameter that will be supplied by tuning."""

    def __repr__(self) -> str:
        return 'varying()'


def varying() -> Varying:
    """
    Mark a hyperparameter as varying.

    The value is not range-checked and is shown as ``varying()`` in
    specification summaries.

    Example:
        >>> linear_reg(regularization=varying())
    """
    return Varying()


@dataclass(frozen=True)
class Deferred:
    """
    An unevaluated value.

    Attributes:
        func: Zero-argument callable producing the value at fit time
        label: Text shown in summaries; defaults to ``<func name>()``
    """
    func: Callable[[], Any]
    label: str | None = None

    def evaluate(self) -> Any:
        """Call ``func`` and return its value."""
        return self.func()

    def __repr__(self) -> str:
        if self.label is not None:
            return self.label
        name = getattr(self.func, '__name__', type(self.func).__name__)
        return f"{name}()"


def defer(func: Callable[[], Any], label: str | None = None) -> Deferred:
    """
    Wrap ``func`` so that it is only evaluated at fit time.

    Args:
        func: Zero-argument callable
        label: Optional text used when the value is rendered

    Raises:
        TypeError: If ``func`` is not callable
    """
    if not callable(func):
        raise TypeError(f"defer() expects a callable, got {type(func).__name__}")
    return Deferred(func=func, label=label)


def resolve(value: Any) -> Any:
    """Evaluate ``value`` if it is deferred, otherwise return it unchanged."""
    if isinstance(value, Deferred):
        return value.evaluate()
    return value


def is_numeric(value: Any) -> bool:
    """True for real numbers, including numpy scalars; False for booleans."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def is_placeholder(value: Any) -> bool:
    """True for values that stand in for a number decided later."""
    return isinstance(value, (Varying, Deferred))


def format_arg(value: Any) -> str:
    """
    Render an argument value the way it appears in summaries.

    Floats use the shortest text that parses back to the same value, with
    a trailing ".0" dropped; integers are rendered exactly.
    """
    if value is None:
        return 'None'
    if is_numeric(value):
        if isinstance(value, numbers.Integral):
            return str(int(value))
        text = repr(float(value))
        return text[:-2] if text.endswith('.0') else text
    return repr(value)


def drop_unset(options: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``options`` without entries whose value is None."""
    return {key: value for key, value in options.items() if value is not None}
