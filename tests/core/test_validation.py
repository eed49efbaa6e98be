"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_no_extra_args: positional and keyword extras
    - check_mode: membership in the legal set
    - check_hyperparameter_kind: numbers, None, placeholders, MISSING
    - check_non_negative / check_unit_interval: range guards
    - check_engine_options: mapping with string keys
"""

import math

import numpy as np
import pytest

from pymodelspec.core.args import MISSING, defer, varying
from pymodelspec.core.exceptions import (
    InvalidModeError,
    InvalidParameterError,
    UsageError,
    ValidationError,
)
from pymodelspec.core.validation import (
    check_engine_options,
    check_hyperparameter_kind,
    check_mode,
    check_no_extra_args,
    check_non_negative,
    check_unit_interval,
)


class TestCheckNoExtraArgs:

    def test_empty_passes(self):
        check_no_extra_args((), {})

    def test_keyword_extra(self):
        with pytest.raises(UsageError, match="penalty") as exc_info:
            check_no_extra_args((), {'penalty': 1})
        assert exc_info.value.arguments == ('penalty',)

    def test_positional_extra(self):
        with pytest.raises(UsageError) as exc_info:
            check_no_extra_args((1, 2), {})
        assert exc_info.value.arguments == ('<positional 0>', '<positional 1>')

    def test_message_points_at_engine_options(self):
        with pytest.raises(UsageError, match="engine_options"):
            check_no_extra_args((), {'nlambda': 50})


class TestCheckMode:

    def test_valid(self):
        check_mode('regression', ('regression',))

    def test_invalid_lists_legal_set(self):
        with pytest.raises(InvalidModeError, match="'regression'") as exc_info:
            check_mode('classification', ('regression',))
        assert exc_info.value.mode == 'classification'
        assert exc_info.value.valid_modes == ('regression',)

    def test_non_string(self):
        with pytest.raises(InvalidModeError):
            check_mode(None, ('regression',))

    def test_case_sensitive(self):
        with pytest.raises(InvalidModeError):
            check_mode('Regression', ('regression',))


class TestCheckHyperparameterKind:

    @pytest.mark.parametrize("value", [
        None, MISSING, 0, 1, 0.5, np.float64(0.25), np.int64(3), varying(),
        defer(lambda: 1.0),
    ])
    def test_accepted(self, value):
        check_hyperparameter_kind(value, 'regularization')

    @pytest.mark.parametrize("value", ["10", True, [1.0], 1 + 2j])
    def test_rejected(self, value):
        with pytest.raises(InvalidParameterError) as exc_info:
            check_hyperparameter_kind(value, 'regularization')
        assert exc_info.value.name == 'regularization'

    def test_nan_rejected(self):
        with pytest.raises(InvalidParameterError, match="NaN"):
            check_hyperparameter_kind(math.nan, 'mixture')

    def test_huge_integer_accepted(self):
        # Too large to convert to a float
        check_hyperparameter_kind(10**400, 'regularization')
        check_non_negative(10**400, 'regularization')


class TestCheckNonNegative:

    @pytest.mark.parametrize("value", [0, 0.0, 1e-12, 10, math.inf])
    def test_non_negative_passes(self, value):
        check_non_negative(value, 'regularization')

    @pytest.mark.parametrize("value", [-1, -1e-12, -math.inf])
    def test_negative_fails(self, value):
        with pytest.raises(InvalidParameterError, match=">= 0"):
            check_non_negative(value, 'regularization')

    def test_placeholder_skipped(self):
        check_non_negative(varying(), 'regularization')


class TestCheckUnitInterval:

    @pytest.mark.parametrize("value", [0, 0.0, 0.5, 1, 1.0])
    def test_inside_passes(self, value):
        check_unit_interval(value, 'mixture')

    @pytest.mark.parametrize("value", [-0.01, 1.01, 2, -1])
    def test_outside_fails(self, value):
        with pytest.raises(InvalidParameterError, match=r"within \[0,1\]"):
            check_unit_interval(value, 'mixture')

    def test_none_skipped(self):
        check_unit_interval(None, 'mixture')


class TestCheckEngineOptions:

    def test_mapping_passes(self):
        check_engine_options({'nlambda': 50})

    def test_empty_passes(self):
        check_engine_options({})

    def test_not_mapping(self):
        with pytest.raises(ValidationError, match="mapping"):
            check_engine_options([('nlambda', 50)])

    def test_non_string_key(self):
        with pytest.raises(ValidationError, match="strings"):
            check_engine_options({1: 'a'})
