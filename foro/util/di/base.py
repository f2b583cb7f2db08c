"""Provider base class and component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for in-memory versions
Component = Literal["persistence", "storage"]


class ProviderBase(Provider):
    """Base for every provider in ``PROVIDERS``.

    A mockable component is a direct subclass that sets ``__mock_component__``
    and has two subclasses of its own, one per value of ``__is_mock__``.
    Providers without subclasses are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
