"""Utility functions for the Lloyd clustering engine."""

from .convergence import AssignmentStability, IterationBudget
from .validation import ConfigurationError, validate_config, validate_points
from .device import get_default_device, parse_device

__all__ = [
    # Convergence
    'AssignmentStability',
    'IterationBudget',

    # Validation
    'ConfigurationError',
    'validate_config',
    'validate_points',

    # Device
    'get_default_device',
    'parse_device'
]
