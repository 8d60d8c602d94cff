from typing import Any, Awaitable, Callable, TypeVar, Union

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from token_di.domain import IContainer, Token

T = TypeVar("T")


def create_fastapi_dependency(container: IContainer, value: Union[Token[T], Any]) -> Callable[[], Awaitable[T]]:
    """Create a FastAPI Depends() callable that resolves from the DI container.

    The returned coroutine function awaits ``container.resolve(value)``, so
    the resolved instance follows the registration's lifetime.

    Args:
        container: The DI container to resolve dependencies from.
        value: The token or factory to resolve when the dependency is called.

    Returns:
        An async callable that FastAPI can use with Depends().

    Example:
        >>> get_user_repo = create_fastapi_dependency(container, IUserRepository)
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return await repo.get_all()
    """

    async def dependency() -> T:
        """Resolve the dependency from the container."""
        return await container.resolve(value)

    return dependency


def create_request_dependency(value: Union[Token[T], Any]) -> Callable[[Request], Awaitable[T]]:
    """Create a FastAPI dependency resolving from the request's container.

    Requires the ContainerMiddleware to be installed.

    Args:
        value: The token or factory to resolve.

    Returns:
        An async callable resolving from ``request.state.di_container``.

    Example:
        >>> app.add_middleware(ContainerMiddleware, container=container)
        >>>
        >>> get_settings = create_request_dependency(ISettings)
        >>>
        >>> @app.get("/settings")
        >>> async def read_settings(settings: Settings = Depends(get_settings)):
        ...     return settings.public()
    """

    async def request_dependency(request: Request) -> T:
        """Resolve from the container attached to the request."""
        if not hasattr(request.state, "di_container"):
            raise RuntimeError(
                "Request does not have a DI container. Did you forget to add ContainerMiddleware?"
            )
        container: IContainer = request.state.di_container
        return await container.resolve(value)

    return request_dependency


class ContainerMiddleware(BaseHTTPMiddleware):
    """Middleware that exposes a DI container on every request.

    The container is accessible via `request.state.di_container`.

    Attributes:
        container: The DI container attached to requests.

    Example:
        >>> app = FastAPI()
        >>> app.add_middleware(ContainerMiddleware, container=container)
    """

    def __init__(self, app: FastAPI, container: IContainer):
        """Initialize the middleware with a container.

        Args:
            app: The FastAPI/Starlette application.
            container: The DI container to attach to requests.
        """
        super().__init__(app)
        self.container = container

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        request.state.di_container = self.container
        return await call_next(request)
