import asyncio
import inspect
import logging
from typing import Any, TypeVar

from token_di.domain import Factory, Registry, Token, UnregisteredTokenError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DependencyResolver:
    """Resolves tokens and factories against a registry.

    Tokens are delegated to their registered resolver, which applies the
    lifetime policy. Factories are built directly: their dependencies are
    resolved concurrently, then passed positionally to ``create``.
    """

    async def resolve(self, registry: Registry, value: Any) -> Any:
        """Resolve a token or an ad hoc factory.

        Ad hoc factories are never cached, whatever their declared lifetime.
        Their registered dependencies still follow their own lifetimes.

        Args:
            registry: The registry to resolve dependencies from.
            value: A ``Token`` or any provider accepted by ``Factory.from_provider``.

        Returns:
            The resolved instance.

        Raises:
            UnregisteredTokenError: If a token along the way is not registered.
            InvalidFactoryError: If ``value`` is neither a token nor a factory.
        """
        if isinstance(value, Token):
            return await self.resolve_token(registry, value)
        return await self.resolve_factory(registry, Factory.from_provider(value))

    async def resolve_token(self, registry: Registry, token: Token[T]) -> T:
        """Resolve a token through its registered resolver.

        Raises:
            UnregisteredTokenError: If the token is not registered.
        """
        resolver = registry.get(token)
        if resolver is None:
            raise UnregisteredTokenError(token)
        return await resolver.resolve(registry)

    async def resolve_factory(self, registry: Registry, factory: Factory) -> Any:
        """Resolve the dependencies of a factory and create the instance.

        All dependency resolutions are started before waiting on any of them.
        The first failure is propagated as is; the remaining resolutions run
        to completion but their results are discarded.

        Args:
            registry: The registry to resolve dependencies from.
            factory: The factory to build.

        Returns:
            The value returned by ``factory.create``, awaited if needed.
        """
        dependencies = await asyncio.gather(*(self.resolve_token(registry, other) for other in factory.requires))

        logger.debug("Creating instance with %d dependencies via %r", len(dependencies), factory.create)
        result = factory.create(*dependencies)
        if inspect.isawaitable(result):
            result = await result
        return result
