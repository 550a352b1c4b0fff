"""Provider base class and mock selection."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and an in-process test implementation
Component = Literal["clock", "persistence", "realtime"]


class ProviderBase(Provider):
    """dishka provider that knows whether it has swappable implementations.

    A provider with no subclasses is used as-is. A provider that names a
    ``__mock_component__`` is abstract: exactly one subclass sets
    ``__is_mock__ = True`` and one leaves it False, and ``implementation``
    picks between them.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """The subclass to instantiate for this provider.

        Raises:
            ValueError: If a mockable provider lacks the requested variant
        """
        if not cls.is_mockable():
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == use_mock:
                return subclass

        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
