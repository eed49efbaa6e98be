"""
Linear regression model specifications.

Public API:
    linear_reg(mode, regularization, mixture, engine_options) -> LinearReg
    update(spec, regularization, mixture, engine_options, fresh) -> LinearReg
    describe(spec) -> str

A specification only records what is wanted. Binding to an engine
(ordinary least squares, penalized, Bayesian or distributed regression)
and fitting happen elsewhere.

Example:
    >>> from pymodelspec.linear_reg import linear_reg, update
    >>> spec = linear_reg(regularization=10, mixture=0.1)
    >>> spec = update(spec, regularization=1)
    >>> print(spec)
"""

from pymodelspec.linear_reg.spec import LinearReg
from pymodelspec.linear_reg.functions import linear_reg, update, describe

__all__ = [
    "LinearReg",
    "linear_reg",
    "update",
    "describe",
]
