import logging

from sqlalchemy.ext.asyncio import AsyncSession, AsyncSessionTransaction

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Границы одной транзакции над AsyncSession.

    При выходе без исключения — commit, при исключении — rollback,
    исключение пробрасывается дальше.

    Если у сессии уже есть открытая транзакция (autobegin после чтения
    или сессия запроса из DI), открывается SAVEPOINT: откатывается только
    то, что было сделано внутри блока.

    Example:
        ```python
        async with UnitOfWork(session):
            vacancy = await vacancy_repo.create(**data)
            await skill_repo.create(skill="Python", vacancy_id=vacancy.id)
        ```
    """

    def __init__(self, session: AsyncSession):
        self._session = session
        self._transaction: AsyncSessionTransaction | None = None

    async def __aenter__(self) -> AsyncSession:
        if self._session.in_transaction():
            self._transaction = self._session.begin_nested()
            logger.debug("Begin nested transaction (savepoint)")
        else:
            self._transaction = self._session.begin()
            logger.debug("Begin transaction")
        await self._transaction.__aenter__()
        return self._session

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._transaction.__aexit__(exc_type, exc_val, exc_tb)
        logger.debug(
            "Exit transaction with param: exc_type=%s, exc_val=%s",
            exc_type,
            exc_val,
        )
        self._transaction = None
