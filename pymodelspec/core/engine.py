"""
Engine bindings.

An EngineBinding describes how a specification maps onto one fitting
backend: the function that will be called, the native names of the
canonical hyperparameters, and the leading arguments of the call. The
fitting backends themselves live in other libraries; nothing here calls
them.

Binding is the only transition from the Unbound to the Bound state:

    spec = linear_reg(regularization=10, mixture=0.1)
    spec = set_engine(spec, EngineBinding(engine="glmnet", func="glmnet::glmnet"))
    print(render_call(spec))
"""

from __future__ import annotations

import dataclasses
import warnings
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, TYPE_CHECKING, TypeVar

from pymodelspec.core.args import format_arg, is_numeric
from pymodelspec.core.exceptions import EngineError, ValidationError
from pymodelspec.core.modes import ALL_MODES, MODE_REGRESSION

if TYPE_CHECKING:
    from pymodelspec.core.spec import ModelSpec

S = TypeVar('S', bound='ModelSpec')


@dataclass(frozen=True)
class EngineBinding:
    """
    Binding of a specification to a fitting backend.

    Attributes:
        engine: Engine identifier, e.g. 'lm' or 'glmnet'
        func: Name of the fit function, used as the call template head
        arg_names: Canonical hyperparameter name -> native argument name.
            Names not listed are passed through unchanged.
        fixed_args: Leading template arguments, rendered verbatim
        modes: Modes the engine supports
        zero_only: Hyperparameters that must be zero or unset
        ignored: Hyperparameters the engine does not use; setting one to a
            number warns at bind time and it is left out of the template
    """
    engine: str
    func: str
    arg_names: Mapping[str, str] = field(default_factory=dict)
    fixed_args: Mapping[str, str] = field(default_factory=dict)
    modes: frozenset[str] = frozenset({MODE_REGRESSION})
    zero_only: frozenset[str] = frozenset()
    ignored: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        unknown = sorted(set(self.modes) - ALL_MODES)
        if unknown:
            raise ValidationError(
                f"modes: unknown mode(s) {unknown}; expected a subset of {sorted(ALL_MODES)}"
            )
        object.__setattr__(self, 'arg_names', MappingProxyType(dict(self.arg_names)))
        object.__setattr__(self, 'fixed_args', MappingProxyType(dict(self.fixed_args)))
        object.__setattr__(self, 'modes', frozenset(self.modes))
        object.__setattr__(self, 'zero_only', frozenset(self.zero_only))
        object.__setattr__(self, 'ignored', frozenset(self.ignored))

    def __hash__(self) -> int:
        return hash((
            self.engine,
            self.func,
            frozenset(self.arg_names.items()),
            frozenset(self.fixed_args.items()),
            self.modes,
            self.zero_only,
            self.ignored,
        ))

    def native_name(self, name: str) -> str:
        """Translate a canonical hyperparameter name to the engine's name."""
        return self.arg_names.get(name, name)

    def template_args(
        self,
        hyperparameters: Mapping[str, Any],
        engine_options: Mapping[str, Any],
    ) -> dict[str, str]:
        """
        Assemble the rendered arguments of the fit call.

        Order: fixed arguments, then set hyperparameters under their native
        names, then engine options. Later entries win on name clashes.
        """
        rendered: dict[str, str] = dict(self.fixed_args)
        for name, value in hyperparameters.items():
            if value is None or name in self.ignored:
                continue
            rendered[self.native_name(name)] = format_arg(value)
        for name, value in engine_options.items():
            rendered[name] = format_arg(value)
        return rendered


def set_engine(spec: S, binding: EngineBinding) -> S:
    """
    Bind ``spec`` to an engine.

    Args:
        spec: Specification to bind
        binding: Engine binding to attach

    Returns:
        A new specification in the Bound state. ``spec`` is unchanged.

    Raises:
        TypeError: If binding is not an EngineBinding
        EngineError: If the engine does not support the spec's mode, or a
            zero-only hyperparameter is set to a non-zero number
    """
    if not isinstance(binding, EngineBinding):
        raise TypeError(
            f"binding must be an EngineBinding, got {type(binding).__name__}"
        )

    if spec.mode not in binding.modes:
        supported = ", ".join(f"'{m}'" for m in sorted(binding.modes))
        raise EngineError(
            f"Engine '{binding.engine}' does not support mode '{spec.mode}'; "
            f"supported modes: {supported}",
            engine=binding.engine,
        )

    for name in sorted(binding.zero_only):
        value = spec.hyperparameters.get(name)
        if is_numeric(value) and value != 0:
            raise EngineError(
                f"Engine '{binding.engine}' requires {name} to be zero or unset, "
                f"got {format_arg(value)}",
                engine=binding.engine,
            )

    for name in sorted(binding.ignored):
        if is_numeric(spec.hyperparameters.get(name)):
            warnings.warn(
                f"{name} is ignored by engine '{binding.engine}'",
                UserWarning,
                stacklevel=2,
            )

    return dataclasses.replace(spec, engine_binding=binding)


def render_call(spec: ModelSpec) -> str:
    """
    Render the fit call a bound specification would produce.

    Engine option values are shown unevaluated.

    Raises:
        EngineError: If spec has no engine binding
    """
    binding = spec.engine_binding
    if binding is None:
        raise EngineError("No engine has been set for this model specification")
    args = binding.template_args(spec.hyperparameters, spec.engine_options)
    joined = ", ".join(f"{name} = {value}" for name, value in args.items())
    return f"{binding.func}({joined})"
