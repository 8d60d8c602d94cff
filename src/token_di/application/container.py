import logging
from typing import Any, TypeVar, Union

from token_di.application.circular_detector import CircularDependencyDetector
from token_di.application.lifetime_resolvers import create_resolver
from token_di.application.resolver import DependencyResolver
from token_di.domain import (
    Factory,
    IContainer,
    Registry,
    RegistrationResult,
    RegistrationStatus,
    Token,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DIContainer(IContainer):
    """Main dependency injection container.

    Registers factories against tokens and resolves instances asynchronously.
    Supports singleton and transient lifetimes, and rejects registrations
    which would introduce a circular dependency.

    Attributes:
        _registry: Dictionary mapping tokens to their lifetime resolvers.
        _dependency_resolver: Component building factories from their dependencies.
        _circular_detector: Component detecting cycles at registration time.
    """

    def __init__(self) -> None:
        """Initialize the DI container with an empty registry."""
        self._registry: Registry = {}
        self._dependency_resolver = DependencyResolver()
        self._circular_detector = CircularDependencyDetector()

    def is_registered(self, token: Token) -> bool:
        """Test whether a token is registered with the container.

        Args:
            token: The token of interest.

        Returns:
            True if the token is registered, False otherwise.
        """
        return token in self._registry

    def register(self, token: Token[T], factory: Any) -> RegistrationResult:
        """Register a factory for the specified token.

        A token already registered, or a factory which would close a cycle
        back to ``token``, is not an error: the registration is ignored, the
        rejection is logged and reported in the returned result.

        Args:
            token: The token to bind.
            factory: A ``Factory`` or any provider accepted by ``Factory.from_provider``.

        Returns:
            The outcome of the registration.

        Raises:
            TypeError: If ``token`` is not a ``Token``.
            InvalidFactoryError: If ``factory`` cannot describe a factory.

        Example:
            >>> IConfig = Token[Config]("app.IConfig")
            >>> container.register(IConfig, Factory(create=Config.from_env))
            >>> container.register(IDatabase, Factory(requires=[IConfig], create=Database))
        """
        if not isinstance(token, Token):
            raise TypeError(f"Expected a Token, got {type(token).__name__}")

        if token in self._registry:
            result = RegistrationResult(token=token, status=RegistrationStatus.DUPLICATE)
            logger.error(result.message)
            return result

        factory = Factory.from_provider(factory)
        cycle = self._circular_detector.find_cycle(self._registry, token, factory)
        if cycle:
            result = RegistrationResult(token=token, status=RegistrationStatus.CYCLE, cycle=cycle)
            logger.error(result.message)
            return result

        self._registry[token] = create_resolver(factory, self._dependency_resolver)
        logger.debug("Registered token '%s' with %s lifetime", token.name, factory.lifetime)
        return RegistrationResult(token=token, status=RegistrationStatus.REGISTERED)

    async def resolve(self, value: Union[Token[T], Any]) -> T:
        """Resolve an instance for a token or an unregistered factory.

        Registered tokens follow their lifetime. A factory passed directly is
        built fresh every time, with its dependencies resolved from the
        registry.

        Args:
            value: The token or factory to resolve.

        Returns:
            The resolved instance.

        Raises:
            UnregisteredTokenError: If a token along the way is not registered.
            InvalidFactoryError: If ``value`` is neither a token nor a factory.
            Exception: Any error raised by a factory's ``create``, unchanged.

        Example:
            >>> database = await container.resolve(IDatabase)
        """
        return await self._dependency_resolver.resolve(self._registry, value)
