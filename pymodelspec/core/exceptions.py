"""
Exception hierarchy for pymodelspec.

All exceptions inherit from PyModelSpecError to allow catching any
library-specific error. Usage and validation errors additionally inherit
from the matching builtin (TypeError, ValueError) so generic handlers
still see them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Raised before any new specification is built
"""

from __future__ import annotations

from typing import Any


class PyModelSpecError(Exception):
    """Base exception for all pymodelspec errors."""
    pass


class UsageError(PyModelSpecError, TypeError):
    """
    Unexpected arguments were supplied.

    Signals API misuse rather than a bad value, e.g. passing an
    engine-specific argument directly instead of through
    ``engine_options``.

    Attributes:
        arguments: Names (or positions) of the offending arguments
    """

    def __init__(self, message: str, arguments: tuple[str, ...] = ()):
        super().__init__(message)
        self.arguments = arguments


class ValidationError(PyModelSpecError, ValueError):
    """
    Input validation failed.

    Raised when user-provided values fail validation checks.
    """
    pass


class InvalidModeError(ValidationError):
    """
    Mode is not a member of the specification's legal set.

    Attributes:
        mode: The rejected mode
        valid_modes: The legal modes for the specification type
    """

    def __init__(
        self,
        message: str,
        mode: Any = None,
        valid_modes: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.mode = mode
        self.valid_modes = valid_modes


class InvalidParameterError(ValidationError):
    """
    A hyperparameter value is out of range or of the wrong kind.

    Attributes:
        name: Canonical hyperparameter name
        value: The rejected value
    """

    def __init__(self, message: str, name: str | None = None, value: Any = None):
        super().__init__(message)
        self.name = name
        self.value = value


class EngineError(PyModelSpecError):
    """
    An engine binding cannot be applied to a specification.

    Raised when the engine does not support the specification's mode,
    when a hyperparameter violates an engine constraint, or when a fit
    template is requested from an unbound specification.

    Attributes:
        engine: Engine identifier, if known
    """

    def __init__(self, message: str, engine: str | None = None):
        super().__init__(message)
        self.engine = engine
