"""
pymodelspec: declarative model specifications for Python.

A specification describes the model you want (mode, hyperparameters,
engine-specific options) without fitting it. Fitting engines are bound
later and live in other libraries.

Submodules:
    core: ModelSpec base class, engine bindings, exceptions, validation
    linear_reg: Linear regression specifications
"""

__version__ = "0.1.0"

from pymodelspec import core
from pymodelspec import linear_reg
from pymodelspec.core import EngineBinding, ModelSpec, set_engine, varying, defer
from pymodelspec.linear_reg import LinearReg

__all__ = [
    "__version__",
    "core",
    "linear_reg",
    "ModelSpec",
    "LinearReg",
    "EngineBinding",
    "set_engine",
    "varying",
    "defer",
]
