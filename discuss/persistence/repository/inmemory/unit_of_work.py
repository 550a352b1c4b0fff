"""In-memory unit of work."""

from discuss.domain.repository import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory writes are visible at once; this only counts commits."""

    def __init__(self) -> None:
        super().__init__()
        self.commits = 0

    async def _commit(self) -> None:
        self.commits += 1
