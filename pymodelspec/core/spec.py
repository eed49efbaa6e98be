"""
Model specification base class.

A specification records what model is wanted without fitting anything:
a mode, canonical hyperparameters and pass-through engine options. Each
specification type (linear regression, and in future its siblings) is a
frozen subclass of ModelSpec that declares its legal modes, its
hyperparameter names and its per-value range checks.

All edits are copy-on-write. ``_updated`` builds a new value and never
touches ``self``, so a failing update leaves the original intact.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, TypeVar

from pymodelspec.core.args import MISSING, drop_unset, format_arg
from pymodelspec.core.engine import EngineBinding, render_call
from pymodelspec.core.exceptions import UsageError, ValidationError
from pymodelspec.core.validation import (
    check_engine_options,
    check_hyperparameter_kind,
    check_mode,
)

S = TypeVar('S', bound='ModelSpec')


@dataclass(frozen=True, repr=False)
class ModelSpec(ABC):
    """
    Immutable model specification.

    Do not construct the base class; use a subclass factory such as
    ``LinearReg.create``.

    Attributes:
        mode: Predictive task, one of ``VALID_MODES``
        hyperparameters: Read-only mapping with every name in
            ``HYPERPARAMETERS``; None means "use the engine default"
        engine_options: Read-only mapping of unevaluated engine arguments,
            never containing None values
        engine_binding: Attached engine, or None while unbound
    """
    mode: str
    hyperparameters: Mapping[str, Any] = field(default_factory=dict)
    engine_options: Mapping[str, Any] = field(default_factory=dict)
    engine_binding: EngineBinding | None = None

    VALID_MODES: ClassVar[tuple[str, ...]] = ()
    HYPERPARAMETERS: ClassVar[tuple[str, ...]] = ()
    TITLE: ClassVar[str] = "Model Specification"

    def __post_init__(self) -> None:
        check_mode(self.mode, self.VALID_MODES)

        unknown = sorted(set(self.hyperparameters) - set(self.HYPERPARAMETERS))
        if unknown:
            raise UsageError(
                f"Unknown hyperparameters for {type(self).__name__}: "
                f"{', '.join(unknown)}",
                arguments=tuple(unknown),
            )
        args = {}
        for name in self.HYPERPARAMETERS:
            value = self.hyperparameters.get(name)
            args[name] = None if value is MISSING else value
        self._check_hyperparameters(args)

        check_engine_options(self.engine_options)
        if self.engine_binding is not None and not isinstance(self.engine_binding, EngineBinding):
            raise ValidationError(
                f"engine_binding: expected EngineBinding or None, "
                f"got {type(self.engine_binding).__name__}"
            )

        object.__setattr__(self, 'hyperparameters', MappingProxyType(args))
        object.__setattr__(
            self, 'engine_options', MappingProxyType(drop_unset(dict(self.engine_options)))
        )

    # === Validation ===

    @classmethod
    def _check_hyperparameters(cls, values: Mapping[str, Any]) -> None:
        """Validate each value in ``HYPERPARAMETERS`` order, kind before range."""
        for name in cls.HYPERPARAMETERS:
            if name not in values:
                continue
            value = values[name]
            check_hyperparameter_kind(value, name)
            cls._check_range(name, value)

    @classmethod
    @abstractmethod
    def _check_range(cls, name: str, value: Any) -> None:
        """Range check for one hyperparameter. Non-numeric values pass."""
        ...

    def __hash__(self) -> int:
        # Order-insensitive, matching mapping equality in __eq__
        return hash((
            type(self),
            self.mode,
            frozenset(self.hyperparameters.items()),
            frozenset(self.engine_options.items()),
            self.engine_binding,
        ))

    # === State ===

    @property
    def is_bound(self) -> bool:
        """True once an engine has been attached."""
        return self.engine_binding is not None

    @property
    def engine(self) -> str | None:
        """Identifier of the bound engine, or None."""
        if self.engine_binding is None:
            return None
        return self.engine_binding.engine

    # === Update ===

    def _updated(
        self: S,
        hyperparameters: Mapping[str, Any],
        engine_options: Mapping[str, Any] | None,
        fresh: bool,
    ) -> S:
        """
        Return a copy with hyperparameters and engine options edited.

        Args:
            hyperparameters: Name -> value, where MISSING means "not
                mentioned in this call"
            engine_options: Options to apply; None or empty means no change
            fresh: Replace wholesale (True) or overlay key-wise (False)
        """
        if not isinstance(fresh, bool):
            raise ValidationError(f"fresh: expected bool, got {type(fresh).__name__}")
        self._check_hyperparameters(hyperparameters)
        if engine_options is None:
            engine_options = {}
        check_engine_options(engine_options)

        if fresh:
            args = {
                name: (None if hyperparameters.get(name, MISSING) is MISSING
                       else hyperparameters[name])
                for name in self.HYPERPARAMETERS
            }
        else:
            # Only supplied values overlay; MISSING and None leave entries alone
            args = dict(self.hyperparameters)
            args.update(
                (name, value) for name, value in hyperparameters.items()
                if value is not MISSING and value is not None
            )

        options = dict(self.engine_options)
        if engine_options:
            if fresh:
                options = dict(engine_options)
            else:
                options.update(engine_options)

        return dataclasses.replace(self, hyperparameters=args, engine_options=options)

    # === Formatting ===

    def describe(self) -> str:
        """
        Human-readable summary.

        Produces output like:
            Linear Regression Model Specification (regression)

            Main Arguments:
              regularization = 10
              mixture = 0.1

            Engine-Specific Arguments:
              nlambda = 50

            Computational engine: glmnet

            Model fit template:
            glmnet::glmnet(x = missing_arg(), y = missing_arg(), lambda = 10, ...)
        """
        lines = [f"{self.TITLE} ({self.mode})", ""]

        main = [(name, value) for name, value in self.hyperparameters.items()
                if value is not None]
        if main:
            lines.append("Main Arguments:")
            lines.extend(f"  {name} = {format_arg(value)}" for name, value in main)
            lines.append("")

        if self.engine_options:
            lines.append("Engine-Specific Arguments:")
            lines.extend(
                f"  {name} = {format_arg(value)}"
                for name, value in self.engine_options.items()
            )
            lines.append("")

        if self.engine_binding is not None:
            lines.append(f"Computational engine: {self.engine_binding.engine}")
            lines.append("")
            lines.append("Model fit template:")
            lines.append(render_call(self))
            lines.append("")

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        args = ", ".join(
            f"{name}={format_arg(value)}" for name, value in self.hyperparameters.items()
        )
        engine = f", engine={self.engine!r}" if self.is_bound else ""
        return f"{type(self).__name__}(mode={self.mode!r}, {args}{engine})"
