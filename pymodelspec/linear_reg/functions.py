"""
Function-style API for linear regression specifications.

Provides linear_reg(), update() and describe(). Each is a thin wrapper
over the LinearReg methods; argument validation happens there.
"""

from __future__ import annotations

from typing import Any, Mapping

from pymodelspec.core.args import MISSING
from pymodelspec.core.modes import MODE_REGRESSION
from pymodelspec.core.spec import ModelSpec
from pymodelspec.linear_reg.spec import LinearReg


def linear_reg(
    mode: str = MODE_REGRESSION,
    regularization: Any = None,
    mixture: Any = None,
    engine_options: Mapping[str, Any] | None = None,
    *args: Any,
    **kwargs: Any,
) -> LinearReg:
    """
    General interface for linear regression models.

    Parameters
    ----------
    mode : str
        Type of model. The only possible value is "regression".
    regularization : float, varying() or None
        Non-negative total amount of regularization. Must be zero for
        some engines. None defers to the engine default.
    mixture : float, varying() or None
        Proportion of the penalty used for L2 (ridge) versus L1 (lasso),
        between zero and one inclusive. Ignored by some engines.
    engine_options : mapping or None
        Arguments for the underlying fit function. Not evaluated until
        the model is fit; None values are dropped.

    Returns
    -------
    LinearReg
        An unbound specification.

    Raises
    ------
    UsageError
        If any other argument is supplied.
    InvalidModeError
        If mode is not "regression".
    InvalidParameterError
        If regularization is negative, mixture is outside [0, 1], or a
        hyperparameter is neither a real number, None, varying() nor
        defer(...). Strings, booleans, complex numbers and NaN are rejected
        rather than passed through unchecked.

    Examples
    --------
    >>> linear_reg()
    >>> linear_reg(regularization=varying())
    >>> linear_reg(regularization=10, mixture=0.1, engine_options={"nlambda": 50})
    """
    return LinearReg.create(mode, regularization, mixture, engine_options, *args, **kwargs)


def update(
    spec: LinearReg,
    regularization: Any = MISSING,
    mixture: Any = MISSING,
    engine_options: Mapping[str, Any] | None = None,
    fresh: bool = False,
    *args: Any,
    **kwargs: Any,
) -> LinearReg:
    """
    Update a linear regression specification.

    Use in lieu of recreating the object from scratch. ``fresh`` selects
    between a key-wise overlay (False) and wholesale replacement (True).
    See ``LinearReg.update``.

    Examples
    --------
    >>> model = linear_reg(regularization=10, mixture=0.1)
    >>> update(model, regularization=1)
    >>> update(model, regularization=1, fresh=True)
    """
    if not isinstance(spec, LinearReg):
        raise TypeError(f"spec must be a LinearReg, got {type(spec).__name__}")
    return spec.update(regularization, mixture, engine_options, fresh, *args, **kwargs)


def describe(spec: ModelSpec) -> str:
    """Return the human-readable summary of any model specification."""
    if not isinstance(spec, ModelSpec):
        raise TypeError(f"spec must be a ModelSpec, got {type(spec).__name__}")
    return spec.describe()
