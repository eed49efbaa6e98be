"""
Core infrastructure for pymodelspec.

This module provides the shared abstractions used by every specification
type (linear_reg, and future siblings).

Key components:
    spec: ModelSpec base class (create/update/describe machinery)
    engine: EngineBinding, set_engine, render_call
    args: MISSING, varying(), defer(), resolve()
    exceptions: Exception hierarchy
    validation: Input validators
    modes: Mode and hyperparameter name constants
"""

from pymodelspec.core.spec import ModelSpec
from pymodelspec.core.engine import EngineBinding, set_engine, render_call
from pymodelspec.core.args import (
    MISSING,
    Varying,
    Deferred,
    varying,
    defer,
    resolve,
    format_arg,
)
from pymodelspec.core.exceptions import (
    PyModelSpecError,
    UsageError,
    ValidationError,
    InvalidModeError,
    InvalidParameterError,
    EngineError,
)

__all__ = [
    # Base class
    "ModelSpec",
    # Engines
    "EngineBinding",
    "set_engine",
    "render_call",
    # Argument markers
    "MISSING",
    "Varying",
    "Deferred",
    "varying",
    "defer",
    "resolve",
    "format_arg",
    # Exceptions
    "PyModelSpecError",
    "UsageError",
    "ValidationError",
    "InvalidModeError",
    "InvalidParameterError",
    "EngineError",
]
