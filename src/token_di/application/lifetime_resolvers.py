import asyncio
import logging
from typing import Any, Optional

from token_di.application.resolver import DependencyResolver
from token_di.domain import Factory, IResolver, Lifetime, Registry, SingletonState

logger = logging.getLogger(__name__)


class BaseResolver(IResolver):
    """Common state for the lifetime resolvers.

    Attributes:
        _factory: The registered factory.
        _dependency_resolver: Component resolving the factory's dependencies.
    """

    def __init__(self, factory: Factory, dependency_resolver: DependencyResolver) -> None:
        self._factory = factory
        self._dependency_resolver = dependency_resolver

    @property
    def factory(self) -> Factory:
        return self._factory


class TransientResolver(BaseResolver):
    """Resolver which creates a new instance on every request."""

    async def resolve(self, registry: Registry) -> Any:
        return await self._dependency_resolver.resolve_factory(registry, self._factory)


class SingletonResolver(BaseResolver):
    """Resolver which creates one instance and shares it.

    Concurrent requests made while the instance is being created all wait on
    the same task, so ``create`` runs at most once. A failed creation is not
    cached: the resolver returns to ``UNRESOLVED`` and the next request
    starts over.

    Attributes:
        _value: The cached instance once resolved.
        _state: Current cache state.
        _pending: The shared creation task while pending.
    """

    def __init__(self, factory: Factory, dependency_resolver: DependencyResolver) -> None:
        super().__init__(factory, dependency_resolver)
        self._value: Any = None
        self._state = SingletonState.UNRESOLVED
        self._pending: Optional["asyncio.Task[Any]"] = None

    @property
    def state(self) -> SingletonState:
        return self._state

    async def resolve(self, registry: Registry) -> Any:
        """Return the cached instance, or wait for the shared creation.

        The state switch to ``PENDING`` happens before the first suspension,
        so overlapping callers always find the task started by the first one.
        Waiters are shielded: cancelling one of them leaves the creation and
        the other waiters untouched.
        """
        if self._state == SingletonState.RESOLVED:
            return self._value

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._create(registry))
            self._state = SingletonState.PENDING

        return await asyncio.shield(self._pending)

    async def _create(self, registry: Registry) -> Any:
        try:
            value = await self._dependency_resolver.resolve_factory(registry, self._factory)
        except BaseException:
            self._pending = None
            self._state = SingletonState.UNRESOLVED
            logger.debug("Singleton creation via %r failed, state reset", self._factory.create)
            raise

        self._value = value
        self._pending = None
        self._state = SingletonState.RESOLVED
        return value


def create_resolver(factory: Factory, dependency_resolver: DependencyResolver) -> IResolver:
    """Create the resolver matching the factory's lifetime.

    Args:
        factory: The factory being registered.
        dependency_resolver: Component shared by all resolvers of a container.

    Returns:
        A ``TransientResolver`` for transient factories, otherwise a
        ``SingletonResolver``.
    """
    if factory.lifetime == Lifetime.TRANSIENT:
        return TransientResolver(factory, dependency_resolver)
    return SingletonResolver(factory, dependency_resolver)
