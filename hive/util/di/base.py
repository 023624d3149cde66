"""Provider metadata shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests swap for in-process fakes
Component = Literal["payments", "persistence"]


class ProviderBase(Provider):
    """A dishka provider that may stand in for a mockable component.

    A provider class with subclasses is a component base: exactly one
    subclass per ``__is_mock__`` value implements it. A provider class
    without subclasses is used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
