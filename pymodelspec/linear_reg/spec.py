"""
Linear regression specification.

LinearReg records the two canonical hyperparameters of a linear model:

    regularization  total amount of regularization, >= 0
    mixture         proportion of the penalty that is L2 (ridge) versus
                    L1 (lasso), in [0, 1]

Both are translated to engine-specific names only when an engine is bound.
Some engines require regularization to be zero (ordinary least squares)
and some ignore mixture.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from pymodelspec.core.args import MISSING
from pymodelspec.core.modes import HYPERPARAMETER_NAMES, MIXTURE, MODE_REGRESSION, REGULARIZATION
from pymodelspec.core.spec import ModelSpec
from pymodelspec.core.validation import (
    check_no_extra_args,
    check_non_negative,
    check_unit_interval,
)


@dataclass(frozen=True, repr=False, eq=False)
class LinearReg(ModelSpec):
    """
    Linear regression model specification.

    Immutable after construction. Build with ``LinearReg.create`` (or the
    ``linear_reg`` function) and edit with ``update``, ``update_merged`` or
    ``update_replaced``, each of which returns a new specification.

    Construction:
        LinearReg.create()                                    # engine defaults
        LinearReg.create(regularization=10, mixture=0.1)      # penalized
        LinearReg.create(engine_options={'nlambda': 50})      # pass-through
    """

    VALID_MODES: ClassVar[tuple[str, ...]] = (MODE_REGRESSION,)
    HYPERPARAMETERS: ClassVar[tuple[str, ...]] = HYPERPARAMETER_NAMES
    TITLE: ClassVar[str] = "Linear Regression Model Specification"

    @classmethod
    def _check_range(cls, name: str, value: Any) -> None:
        if name == REGULARIZATION:
            check_non_negative(value, name)
        elif name == MIXTURE:
            check_unit_interval(value, name)

    @classmethod
    def create(
        cls,
        mode: str = MODE_REGRESSION,
        regularization: Any = None,
        mixture: Any = None,
        engine_options: Mapping[str, Any] | None = None,
        *args: Any,
        **kwargs: Any,
    ) -> LinearReg:
        """
        Create a linear regression specification.

        Args:
            mode: Predictive task. The only legal value is 'regression'.
            regularization: Non-negative total amount of regularization, or
                None to use the engine default
            mixture: L2 proportion in [0, 1], or None for the engine default
            engine_options: Engine-specific arguments, stored unevaluated.
                Entries whose value is None are dropped.

        Returns:
            Unbound LinearReg

        Raises:
            UsageError: If any other argument is supplied
            InvalidModeError: If mode is not 'regression'
            InvalidParameterError: If regularization < 0, mixture is
                outside [0, 1], or either is not a real number, None,
                varying() or defer(...) (strings, booleans and NaN are
                rejected)
        """
        check_no_extra_args(args, kwargs)
        return cls(
            mode=mode,
            hyperparameters={REGULARIZATION: regularization, MIXTURE: mixture},
            engine_options={} if engine_options is None else engine_options,
        )

    @property
    def regularization(self) -> Any:
        return self.hyperparameters[REGULARIZATION]

    @property
    def mixture(self) -> Any:
        return self.hyperparameters[MIXTURE]

    def update(
        self,
        regularization: Any = MISSING,
        mixture: Any = MISSING,
        engine_options: Mapping[str, Any] | None = None,
        fresh: bool = False,
        *args: Any,
        **kwargs: Any,
    ) -> LinearReg:
        """
        Return an updated copy of this specification.

        With ``fresh=False`` only the hyperparameters supplied with a value
        are changed; None and unmentioned ones keep their stored value. With
        ``fresh=True`` the hyperparameters are replaced by exactly the given
        values (None and unmentioned ones become unset) and non-empty engine
        options replace the stored ones.

        Validation happens before anything is merged; on error this
        specification is unchanged.

        Example:
            >>> spec = linear_reg(regularization=10, mixture=0.1)
            >>> spec.update(regularization=1).mixture
            0.1
            >>> spec.update(regularization=1, fresh=True).mixture is None
            True
        """
        check_no_extra_args(args, kwargs)
        return self._updated(
            {REGULARIZATION: regularization, MIXTURE: mixture},
            engine_options,
            fresh=fresh,
        )

    def update_merged(
        self,
        regularization: Any = MISSING,
        mixture: Any = MISSING,
        engine_options: Mapping[str, Any] | None = None,
        *args: Any,
        **kwargs: Any,
    ) -> LinearReg:
        """Key-wise overlay; same as ``update(..., fresh=False)``."""
        check_no_extra_args(args, kwargs)
        return self._updated(
            {REGULARIZATION: regularization, MIXTURE: mixture},
            engine_options,
            fresh=False,
        )

    def update_replaced(
        self,
        regularization: Any = MISSING,
        mixture: Any = MISSING,
        engine_options: Mapping[str, Any] | None = None,
        *args: Any,
        **kwargs: Any,
    ) -> LinearReg:
        """Wholesale replacement; same as ``update(..., fresh=True)``."""
        check_no_extra_args(args, kwargs)
        return self._updated(
            {REGULARIZATION: regularization, MIXTURE: mixture},
            engine_options,
            fresh=True,
        )
