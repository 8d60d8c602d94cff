"""
token-di: Lightweight asynchronous dependency injection with typed tokens.

Public API exports for the token-di package.
"""

# Application exports
from token_di.application.container import DIContainer
from token_di.application.default_container import (
    get_default_container,
    is_registered,
    register,
    resolve,
)

# Domain exports
from token_di.domain.enums import Lifetime, RegistrationStatus
from token_di.domain.exceptions import (
    CircularDependencyError,
    DIException,
    DuplicateRegistrationError,
    InvalidFactoryError,
    UnregisteredTokenError,
)
from token_di.domain.models import Factory, RegistrationResult, Token

__version__ = "0.1.0"

__all__ = [
    # Container
    "DIContainer",
    # Default container
    "get_default_container",
    "is_registered",
    "register",
    "resolve",
    # Models
    "Token",
    "Factory",
    "RegistrationResult",
    # Enums
    "Lifetime",
    "RegistrationStatus",
    # Exceptions
    "DIException",
    "CircularDependencyError",
    "DuplicateRegistrationError",
    "InvalidFactoryError",
    "UnregisteredTokenError",
]
