"""
Mode and hyperparameter name constants for pymodelspec.

This module is the SINGLE SOURCE OF TRUTH for mode strings and canonical
hyperparameter names. Import from here, never use raw strings.

Usage:
    from pymodelspec.core.modes import MODE_REGRESSION, REGULARIZATION

    if spec.mode == MODE_REGRESSION:
        penalty = spec.hyperparameters[REGULARIZATION]
"""

# Predict a continuous outcome
MODE_REGRESSION = 'regression'

# Predict a class label (reserved for sibling specification types)
MODE_CLASSIFICATION = 'classification'

# All modes as a frozenset for validation
ALL_MODES = frozenset({
    MODE_REGRESSION,
    MODE_CLASSIFICATION,
})

# Total amount of regularization (non-negative)
REGULARIZATION = 'regularization'

# Proportion of the penalty that is L2 rather than L1, in [0, 1]
MIXTURE = 'mixture'

# Canonical hyperparameters of the linear regression specification, in
# display order
HYPERPARAMETER_NAMES = (REGULARIZATION, MIXTURE)

__all__ = [
    'MODE_REGRESSION',
    'MODE_CLASSIFICATION',
    'ALL_MODES',
    'REGULARIZATION',
    'MIXTURE',
    'HYPERPARAMETER_NAMES',
]
