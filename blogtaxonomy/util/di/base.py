"""Provider metadata shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that can be swapped for test doubles
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Dishka provider carrying swap metadata.

    A provider base that sets ``__mock_component__`` names a swappable
    component; its subclasses are the interchangeable implementations, told
    apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementations(cls) -> list[type["ProviderBase"]]:
        """Subclasses registered so far (imported implementations only)."""
        return list(cls.__subclasses__())

    @classmethod
    def is_swappable(cls) -> bool:
        return bool(cls.implementations())
