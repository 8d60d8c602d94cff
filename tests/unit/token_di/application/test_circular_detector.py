"""Unit tests for CircularDependencyDetector."""

from token_di.application.circular_detector import CircularDependencyDetector
from token_di.application.lifetime_resolvers import create_resolver
from token_di.application.resolver import DependencyResolver
from token_di.domain import Factory, Token


def make_registry(*bindings):
    """Build a registry from (token, requires) pairs."""
    dependency_resolver = DependencyResolver()
    return {
        token: create_resolver(Factory(requires=requires, create=lambda *args: None), dependency_resolver)
        for token, requires in bindings
    }


def candidate(*requires):
    return Factory(requires=requires, create=lambda *args: None)


class TestCircularDependencyDetector:
    """Test cases for CircularDependencyDetector class."""

    def test_no_dependencies_no_cycle(self):
        """Test that a factory without dependencies has no cycle."""
        detector = CircularDependencyDetector()
        token = Token("A")

        assert detector.find_cycle({}, token, candidate()) == []

    def test_direct_self_reference(self):
        """Test that a factory requiring its own token is a cycle."""
        detector = CircularDependencyDetector()
        token = Token("A")

        assert detector.find_cycle({}, token, candidate(token)) == [token]

    def test_two_token_cycle(self):
        """Test A requires [B] registered, then B requires [A]."""
        detector = CircularDependencyDetector()
        a = Token("A")
        b = Token("B")
        registry = make_registry((a, (b,)))

        assert detector.find_cycle(registry, b, candidate(a)) == [a, b]

    def test_long_cycle(self):
        """Test that a cycle through several registered tokens is traced."""
        detector = CircularDependencyDetector()
        a, b, c, d = (Token(name) for name in "ABCD")
        registry = make_registry((a, (b,)), (b, (c,)), (c, (d,)))

        assert detector.find_cycle(registry, d, candidate(a)) == [a, b, c, d]

    def test_unregistered_dependencies_are_dead_ends(self):
        """Test that unregistered tokens cannot contribute to a cycle."""
        detector = CircularDependencyDetector()
        a = Token("A")
        b = Token("B")
        c = Token("C")
        registry = make_registry((a, (c,)))

        assert detector.find_cycle(registry, b, candidate(a, c)) == []

    def test_acyclic_diamond(self):
        """Test that shared dependencies do not count as cycles."""
        detector = CircularDependencyDetector()
        top, left, right, bottom = (Token(name) for name in ("top", "left", "right", "bottom"))
        registry = make_registry((bottom, ()), (left, (bottom,)), (right, (bottom,)))

        assert detector.find_cycle(registry, top, candidate(left, right)) == []

    def test_first_cycle_in_declaration_order(self):
        """Test that the first cycle found in declaration order is reported."""
        detector = CircularDependencyDetector()
        target, long1, long2, short = (Token(name) for name in ("target", "long1", "long2", "short"))
        registry = make_registry((long1, (long2,)), (long2, (target,)), (short, (target,)))

        cycle = detector.find_cycle(registry, target, candidate(long1, short))

        assert cycle == [long1, long2, target]

    def test_sibling_branches_are_popped(self):
        """Test that dead branches do not leak into the reported trace."""
        detector = CircularDependencyDetector()
        target, dead, leaf, live = (Token(name) for name in ("target", "dead", "leaf", "live"))
        registry = make_registry((dead, (leaf,)), (live, (target,)))

        cycle = detector.find_cycle(registry, target, candidate(dead, live))

        assert cycle == [live, target]

    def test_identity_not_name(self):
        """Test that a token with the same name is not mistaken for the target."""
        detector = CircularDependencyDetector()
        token = Token("A")
        namesake = Token("A")

        assert detector.find_cycle({}, token, candidate(namesake)) == []

    def test_duplicate_requires_entries(self):
        """Test that repeated dependencies are not a cycle on their own."""
        detector = CircularDependencyDetector()
        a = Token("A")
        b = Token("B")
        registry = make_registry((b, ()))

        assert detector.find_cycle(registry, a, candidate(b, b)) == []
