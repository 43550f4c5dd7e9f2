"""Configuration options of the Youbora media analytics plugin."""

from .options import ConfigurationOptions, merge
from .activation import ActivationError, validate_for_activation

__all__ = [
    "ConfigurationOptions",
    "merge",
    "ActivationError",
    "validate_for_activation",
]
