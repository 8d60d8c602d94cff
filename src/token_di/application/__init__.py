"""
Application layer - Registration and resolution.

This layer orchestrates domain objects into a working container.
It depends only on the Domain layer.
"""

from .circular_detector import CircularDependencyDetector
from .container import DIContainer
from .lifetime_resolvers import SingletonResolver, TransientResolver, create_resolver
from .resolver import DependencyResolver

__all__ = [
    "DIContainer",
    "DependencyResolver",
    "CircularDependencyDetector",
    "SingletonResolver",
    "TransientResolver",
    "create_resolver",
]
