"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ActionError,
    ConfigurationError,
    DispatchError,
    PolicyError,
    ValidationError,
)
from .raising import raise_logged

__all__ = [
    "ActionError",
    "ConfigurationError",
    "DispatchError",
    "PolicyError",
    "ValidationError",
    "raise_logged",
]
