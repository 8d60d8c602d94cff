"""
Domain layer - Core models of dependency injection.

This layer contains tokens, factories, lifetimes and errors.
It has no dependencies on other layers.
"""

from .enums import Lifetime, RegistrationStatus, SingletonState
from .exceptions import (
    CircularDependencyError,
    DIException,
    DuplicateRegistrationError,
    InvalidFactoryError,
    UnregisteredTokenError,
)
from .interfaces import IContainer, IResolver, Registry
from .models import Factory, RegistrationResult, Token

__all__ = [
    # Enums
    "Lifetime",
    "RegistrationStatus",
    "SingletonState",
    # Exceptions
    "DIException",
    "CircularDependencyError",
    "DuplicateRegistrationError",
    "InvalidFactoryError",
    "UnregisteredTokenError",
    # Interfaces
    "IContainer",
    "IResolver",
    "Registry",
    # Models
    "Factory",
    "RegistrationResult",
    "Token",
]
