"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a swappable implementation (prod vs in-memory)
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base of every provider in PROVIDERS.

    Attributes:
        __mock_component__: Name of the swappable component this provider
            implements, None for providers with a single implementation
        __is_mock__: True on the test implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
