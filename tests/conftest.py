"""
pytest configuration and shared fixtures.

Engine bindings here mirror the four kinds of backend a linear regression
specification is bound to: ordinary least squares, penalized regression,
a Bayesian sampler and a distributed engine.
"""

import pytest

from pymodelspec.core.engine import EngineBinding
from pymodelspec.core.modes import MIXTURE, REGULARIZATION
from pymodelspec.linear_reg import linear_reg


@pytest.fixture
def lm_engine():
    """Ordinary least squares: no penalty, mixture unused."""
    return EngineBinding(
        engine='lm',
        func='stats::lm',
        fixed_args={'formula': 'missing_arg()', 'data': 'missing_arg()'},
        zero_only={REGULARIZATION},
        ignored={MIXTURE},
    )


@pytest.fixture
def glmnet_engine():
    """Penalized regression with native names lambda/alpha."""
    return EngineBinding(
        engine='glmnet',
        func='glmnet::glmnet',
        arg_names={REGULARIZATION: 'lambda', MIXTURE: 'alpha'},
        fixed_args={'x': 'missing_arg()', 'y': 'missing_arg()'},
    )


@pytest.fixture
def stan_engine():
    """Bayesian sampler: no penalty, mixture unused."""
    return EngineBinding(
        engine='stan',
        func='rstanarm::stan_glm',
        fixed_args={'formula': 'missing_arg()', 'data': 'missing_arg()'},
        zero_only={REGULARIZATION},
        ignored={MIXTURE},
    )


@pytest.fixture
def spark_engine():
    """Distributed engine with its own names for both hyperparameters."""
    return EngineBinding(
        engine='spark',
        func='sparklyr::ml_linear_regression',
        arg_names={REGULARIZATION: 'reg_param', MIXTURE: 'elastic_net_param'},
        fixed_args={'x': 'missing_arg()', 'formula': 'missing_arg()'},
    )


@pytest.fixture
def penalized_spec():
    """regularization=10, mixture=0.1 with no engine options."""
    return linear_reg(regularization=10, mixture=0.1)
