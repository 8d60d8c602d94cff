from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, GetCoreSchemaHandler, ValidationError
from pydantic_core import core_schema

from token_di.domain.enums import Lifetime, RegistrationStatus
from token_di.domain.exceptions import (
    CircularDependencyError,
    DuplicateRegistrationError,
    InvalidFactoryError,
)

T = TypeVar("T")


class Token(Generic[T]):
    """A run-time key which stands for a resolvable capability.

    The type parameter documents the type of the resolved value and exists
    for static type checkers only. Tokens compare and hash by identity, so
    two tokens with the same name are still distinct keys.

    Example:
        >>> IDatabase = Token[Database]("my-package.IDatabase")
        >>> IDatabase.name
        'my-package.IDatabase'
    """

    def __init__(self, name: str) -> None:
        """Initialize the token.

        Args:
            name: A human readable name used in diagnostics.
        """
        self._name = name

    @property
    def name(self) -> str:
        """The human readable name of the token."""
        return self._name

    def __repr__(self) -> str:
        return f"Token({self._name!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.is_instance_schema(cls)


class Factory(BaseModel, Generic[T]):
    """Value object describing how to build an instance.

    Attributes:
        requires: Tokens resolved and passed positionally to ``create``.
        create: Callable receiving the resolved dependencies and returning an
            instance or an awaitable of an instance.
        lifetime: How long an instance produced for a registered token lives.
    """

    model_config = ConfigDict(frozen=True)

    requires: Tuple[Token, ...] = Field(
        default=(),
        description="Tokens of the dependencies, in the order passed to create.",
    )
    create: Callable[..., Any] = Field(..., description="Callable producing the instance.")
    lifetime: Lifetime = Field(
        default=Lifetime.SINGLETON,
        description="The lifetime applied when the factory is registered.",
    )

    @classmethod
    def from_provider(cls, provider: Any) -> "Factory":
        """Build a factory from any object declaring its dependencies.

        Accepts a ``Factory`` as is, or an object with a ``requires`` attribute
        plus either a ``create`` callable or being callable itself. The latter
        lets a class act as its own factory:

        Example:
            >>> class Foo:
            ...     requires = [IBar]
            ...     lifetime = Lifetime.TRANSIENT
            ...     def __init__(self, bar): ...
            >>> Factory.from_provider(Foo).create is Foo
            True

        Raises:
            InvalidFactoryError: If the object cannot describe a factory.
        """
        if isinstance(provider, Factory):
            return provider

        if not hasattr(provider, "requires"):
            raise InvalidFactoryError(f"{provider!r} does not declare 'requires'.")

        create = getattr(provider, "create", None)
        if create is None:
            if not callable(provider):
                raise InvalidFactoryError(f"{provider!r} has no 'create' callable and is not callable.")
            create = provider

        try:
            return cls(
                requires=provider.requires,
                create=create,
                lifetime=getattr(provider, "lifetime", Lifetime.SINGLETON),
            )
        except ValidationError as e:
            raise InvalidFactoryError(f"{provider!r} is not a valid factory: {e}") from e


class RegistrationResult(BaseModel):
    """Outcome of a registration attempt.

    Rejected registrations do not raise. Callers wanting an exception can
    call ``raise_for_status()``.

    Attributes:
        token: The token passed to ``register``.
        status: Whether the token was registered or why it was rejected.
        cycle: The cycle path found, from the first dependency to ``token``.
    """

    model_config = ConfigDict(frozen=True)

    token: Token = Field(..., description="The token passed to register.")
    status: RegistrationStatus = Field(..., description="The outcome of the registration.")
    cycle: Tuple[Token, ...] = Field(
        default=(),
        description="The discovered cycle path when status is CYCLE.",
    )

    @property
    def ok(self) -> bool:
        return self.status == RegistrationStatus.REGISTERED

    @property
    def message(self) -> str:
        error = self.error()
        if error is None:
            return f"Token '{self.token.name}' registered."
        return str(error)

    def error(self) -> Optional[Exception]:
        """Return the exception describing a rejection, or None."""
        if self.status == RegistrationStatus.DUPLICATE:
            return DuplicateRegistrationError(self.token)
        if self.status == RegistrationStatus.CYCLE:
            return CircularDependencyError(self.token, self.cycle)
        return None

    def raise_for_status(self) -> None:
        """Raise the exception describing a rejected registration.

        Raises:
            DuplicateRegistrationError: If the token was already registered.
            CircularDependencyError: If the factory would close a cycle.
        """
        error = self.error()
        if error is not None:
            raise error
