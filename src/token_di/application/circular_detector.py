"""Application layer - Circular dependency detection."""

from typing import List

from token_di.domain import Factory, Registry, Token


class CircularDependencyDetector:
    """Detects dependency cycles before a factory is registered.

    Walks the ``requires`` edges of already registered factories, depth first
    and in declaration order, looking for a path back to the token being
    registered. Unregistered tokens are dead ends since they declare no edges.
    """

    def find_cycle(self, registry: Registry, token: Token, factory: Factory) -> List[Token]:
        """Find a cycle that registering ``factory`` for ``token`` would close.

        Args:
            registry: The registry before insertion.
            token: The token about to be registered.
            factory: The candidate factory for ``token``.

        Returns:
            The path of tokens from the first dependency up to and including
            ``token``, or an empty list if there is no cycle. ``token`` itself
            is the implicit start of the path.

        Example:
            >>> # A requires [B] is registered, B requires [A] is a candidate
            >>> detector.find_cycle(registry, B, Factory(requires=[A], create=make_b))
            [A, B]
        """
        trace: List[Token] = []

        def visit(current: Factory) -> bool:
            for other in current.requires:
                trace.append(other)
                if other is token:
                    return True
                resolver = registry.get(other)
                if resolver is not None and visit(resolver.factory):
                    return True
                trace.pop()
            return False

        visit(factory)
        return trace
