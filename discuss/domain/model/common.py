"""Shared base for domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic model that entities derive from.

    Entities never change in place. ``evolve`` builds the next version and
    runs the field and model validators again, which ``model_copy`` skips.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def evolve(self, **changes: Any) -> Self:
        return self.model_validate({**self.model_dump(), **changes})
