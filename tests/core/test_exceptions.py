"""
Tests for pymodelspec exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyModelSpecError)
    - Builtin bases (UsageError is a TypeError, ValidationError a ValueError)
    - Diagnostic attributes on UsageError, InvalidModeError,
      InvalidParameterError, EngineError
    - Default attribute values
"""

import pytest

from pymodelspec.core.exceptions import (
    EngineError,
    InvalidModeError,
    InvalidParameterError,
    PyModelSpecError,
    UsageError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyModelSpecError."""

    @pytest.mark.parametrize("exc", [
        UsageError("extra"),
        ValidationError("bad"),
        InvalidModeError("bad mode"),
        InvalidParameterError("bad value"),
        EngineError("bad engine"),
    ])
    def test_is_pymodelspec_error(self, exc):
        assert isinstance(exc, PyModelSpecError)

    def test_usage_error_is_type_error(self):
        with pytest.raises(TypeError):
            raise UsageError("unexpected argument")

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise ValidationError("bad input")

    def test_invalid_mode_is_validation_error(self):
        assert isinstance(InvalidModeError("x"), ValidationError)

    def test_invalid_parameter_is_validation_error(self):
        assert isinstance(InvalidParameterError("x"), ValidationError)

    def test_usage_error_is_not_validation_error(self):
        """Usage errors are kept apart from value errors."""
        assert not isinstance(UsageError("x"), ValidationError)

    def test_engine_error_is_not_validation_error(self):
        assert not isinstance(EngineError("x"), ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Attributes
# ═══════════════════════════════════════════════════════════════════════


class TestUsageError:

    def test_attributes(self):
        err = UsageError("Unexpected arguments: penalty", arguments=('penalty',))
        assert str(err) == "Unexpected arguments: penalty"
        assert err.arguments == ('penalty',)

    def test_default_arguments(self):
        assert UsageError("x").arguments == ()


class TestInvalidModeError:

    def test_attributes(self):
        err = InvalidModeError(
            "`mode` should be one of: 'regression'",
            mode='classification',
            valid_modes=('regression',),
        )
        assert err.mode == 'classification'
        assert err.valid_modes == ('regression',)

    def test_defaults(self):
        err = InvalidModeError("bad")
        assert err.mode is None
        assert err.valid_modes == ()


class TestInvalidParameterError:

    def test_attributes(self):
        err = InvalidParameterError("negative", name='regularization', value=-1)
        assert err.name == 'regularization'
        assert err.value == -1

    def test_catchable_with_attributes(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            raise InvalidParameterError("out of range", name='mixture', value=2.0)
        assert exc_info.value.name == 'mixture'
        assert exc_info.value.value == 2.0

    def test_defaults_are_none(self):
        err = InvalidParameterError("bad")
        assert err.name is None
        assert err.value is None


class TestEngineError:

    def test_attributes(self):
        err = EngineError("unsupported mode", engine='lm')
        assert str(err) == "unsupported mode"
        assert err.engine == 'lm'

    def test_default_engine(self):
        assert EngineError("x").engine is None
