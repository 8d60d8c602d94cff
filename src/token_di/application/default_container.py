"""Process-wide default container.

The module functions forward to one ``DIContainer`` created on first use and
kept for the life of the process. Code wanting isolation, such as tests,
should construct its own ``DIContainer`` instead.
"""

import threading
from typing import Any, Optional, TypeVar, Union

from token_di.application.container import DIContainer
from token_di.domain import RegistrationResult, Token

T = TypeVar("T")

_default_container: Optional[DIContainer] = None
_lock = threading.Lock()


def get_default_container() -> DIContainer:
    """Return the process-wide container, creating it on first call."""
    global _default_container
    if _default_container is None:
        with _lock:
            if _default_container is None:
                _default_container = DIContainer()
    return _default_container


def is_registered(token: Token) -> bool:
    """Test whether a token is registered with the default container."""
    return get_default_container().is_registered(token)


def register(token: Token[T], factory: Any) -> RegistrationResult:
    """Register a factory for the token with the default container."""
    return get_default_container().register(token, factory)


async def resolve(value: Union[Token[T], Any]) -> T:
    """Resolve a token or factory with the default container."""
    return await get_default_container().resolve(value)
