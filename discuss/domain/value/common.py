"""Single-value wrapper shared by the string value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one validated primitive.

    The primitive is ``.root``; ``model_dump()`` and ``str()`` both yield
    it unwrapped, so value objects serialize like the plain value.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
