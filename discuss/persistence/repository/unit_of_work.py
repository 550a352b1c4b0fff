"""PostgreSQL unit of work."""

from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Commits the request's session."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__()
        self.session = session

    async def _commit(self) -> None:
        await self.session.commit()
