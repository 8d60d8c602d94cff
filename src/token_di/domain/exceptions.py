from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from token_di.domain.models import Token


class DIException(Exception):
    """Base exception for DI-related errors."""


class UnregisteredTokenError(DIException):
    """Raised when resolving a token that has no registered factory.

    The token may be the one requested directly or any token reached while
    walking the dependency graph.

    Attributes:
        token: The token that could not be resolved.
    """

    def __init__(self, token: "Token") -> None:
        self.token = token
        super().__init__(f"Unregistered token: '{token.name}'.")


class DuplicateRegistrationError(DIException):
    """Describes a rejected attempt to register a token twice.

    Attributes:
        token: The token that is already registered.
    """

    def __init__(self, token: "Token") -> None:
        self.token = token
        super().__init__(f"Token '{token.name}' is already registered.")


class CircularDependencyError(DIException):
    """Describes a rejected registration that would close a dependency cycle.

    Attributes:
        token: The token whose registration was rejected.
        dependency_chain: Tokens from the first dependency back to ``token``.
    """

    def __init__(self, token: "Token", dependency_chain: Sequence["Token"]) -> None:
        self.token = token
        self.dependency_chain = list(dependency_chain)
        path = " -> ".join(f"'{other.name}'" for other in self.dependency_chain)
        super().__init__(f"Cycle detected: '{token.name}' -> {path}.")


class InvalidFactoryError(DIException):
    """Raised when an object cannot be used as a factory.

    This occurs when:
    - The object has no ``requires`` attribute.
    - The object has neither a ``create`` callable nor is callable itself.
    """
