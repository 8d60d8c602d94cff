from abc import ABC, abstractmethod
from typing import Any, Dict, TypeVar, Union

from token_di.domain.models import Factory, RegistrationResult, Token

T = TypeVar("T")


class IResolver(ABC):
    """Abstract interface for a lifetime strategy bound to one registered factory."""

    @property
    @abstractmethod
    def factory(self) -> Factory:
        """The factory managed by the resolver."""

    @abstractmethod
    async def resolve(self, registry: "Registry") -> Any:
        """Resolve an instance from the factory.

        Args:
            registry: The registry used to look up nested dependencies.
        """


Registry = Dict[Token, IResolver]


class IContainer(ABC):
    """Abstract interface for dependency injection container operations."""

    @abstractmethod
    def is_registered(self, token: Token) -> bool:
        """Test whether a token is registered with the container.

        Args:
            token: The token of interest.
        """

    @abstractmethod
    def register(self, token: Token[T], factory: Any) -> RegistrationResult:
        """Register a factory for the specified token.

        Args:
            token: The token to bind.
            factory: A ``Factory`` or any provider accepted by ``Factory.from_provider``.
        """

    @abstractmethod
    async def resolve(self, value: Union[Token[T], Any]) -> T:
        """Resolve an instance for a token or an unregistered factory.

        Args:
            value: The token or factory to resolve.
        """
