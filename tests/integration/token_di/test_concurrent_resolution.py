"""Integration tests for concurrent resolution through the container."""

import asyncio

import pytest

from token_di import DIContainer, Factory, Lifetime, Token


class TestConcurrentResolution:
    """Test overlapping resolutions on one event loop."""

    @pytest.mark.asyncio
    async def test_concurrent_singleton_requests_create_once(self):
        """Test that two overlapping requests get the same instance."""
        container = DIContainer()
        token = Token("ISlow")
        calls = []

        async def create():
            calls.append(1)
            await asyncio.sleep(0.01)
            return object()

        container.register(token, Factory(create=create))

        first, second = await asyncio.gather(container.resolve(token), container.resolve(token))

        assert first is second
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_shared_singleton_dependency_created_once(self):
        """Test that a singleton required by siblings is created once."""
        container = DIContainer()
        shared = Token("IShared")
        left = Token("ILeft")
        right = Token("IRight")
        calls = []

        async def create_shared():
            calls.append(1)
            await asyncio.sleep(0)
            return object()

        container.register(shared, Factory(create=create_shared))
        container.register(left, Factory(requires=[shared], create=lambda value: value, lifetime=Lifetime.TRANSIENT))
        container.register(right, Factory(requires=[shared], create=lambda value: value, lifetime=Lifetime.TRANSIENT))

        a, b = await container.resolve(Factory(requires=[left, right], create=lambda a, b: (a, b)))

        assert a is b
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_transient_requests_are_independent(self):
        """Test that sequential transient requests each call create."""
        container = DIContainer()
        token = Token("ITransient")
        calls = []

        def create():
            calls.append(1)
            return object()

        container.register(token, Factory(create=create, lifetime=Lifetime.TRANSIENT))

        first = await container.resolve(token)
        assert len(calls) == 1
        second = await container.resolve(token)
        assert len(calls) == 2
        assert first is not second

    @pytest.mark.asyncio
    async def test_first_failure_wins(self):
        """Test that one failing sibling fails the whole resolution."""
        container = DIContainer()
        ok = Token("IOk")
        broken = Token("IBroken")
        release = asyncio.Event()

        async def slow_ok():
            await release.wait()
            return "ok"

        def fail():
            raise ValueError("broken dependency")

        container.register(ok, Factory(create=slow_ok))
        container.register(broken, Factory(create=fail))

        with pytest.raises(ValueError, match="broken dependency"):
            await container.resolve(Factory(requires=[ok, broken], create=lambda a, b: (a, b)))

        release.set()
        assert await container.resolve(ok) == "ok"

    @pytest.mark.asyncio
    async def test_failed_singleton_can_be_retried(self):
        """Test that a failed singleton is created again on the next request."""
        container = DIContainer()
        token = Token("IFlaky")
        attempts = []

        async def create():
            attempts.append(1)
            await asyncio.sleep(0)
            if len(attempts) == 1:
                raise RuntimeError("transient outage")
            return "connected"

        container.register(token, Factory(create=create))

        results = await asyncio.gather(container.resolve(token), container.resolve(token), return_exceptions=True)
        assert all(isinstance(result, RuntimeError) for result in results)
        assert len(attempts) == 1

        assert await container.resolve(token) == "connected"
        assert await container.resolve(token) == "connected"
        assert len(attempts) == 2
