from enum import Enum


class Lifetime(str, Enum):
    """Defines the lifetime of a registered dependency.

    Attributes:
        SINGLETON: Single instance created once per container and shared.
        TRANSIENT: New instance created on each resolution.
    """

    SINGLETON = "singleton"
    TRANSIENT = "transient"

    def __str__(self) -> str:
        return self.value


class RegistrationStatus(str, Enum):
    """Outcome of a registration attempt."""

    REGISTERED = "registered"
    DUPLICATE = "duplicate"
    CYCLE = "cycle"

    def __str__(self) -> str:
        return self.value


class SingletonState(str, Enum):
    """Cache state of a singleton resolver.

    Attributes:
        UNRESOLVED: No instance yet, or the last creation attempt failed.
        PENDING: A creation is in flight and shared by all callers.
        RESOLVED: The instance is cached. This state is terminal.
    """

    UNRESOLVED = "unresolved"
    PENDING = "pending"
    RESOLVED = "resolved"

    def __str__(self) -> str:
        return self.value
