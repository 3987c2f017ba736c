"""PostgreSQL implementation of Confession repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Text, func, insert, literal, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from confess.domain.model import Confession
from confess.domain.repository import ConfessionRepository
from confess.domain.value import ConfessionId, ReactionType
from confess.persistence.error import StorageError
from confess.persistence.mappers import confession_to_dict, row_to_confession
from confess.persistence.tables import confessions_table


class PostgresConfessionRepository(ConfessionRepository):
    """PostgreSQL implementation of ConfessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, confession: Confession) -> Confession:
        """Insert a new confession."""
        with logfire.span(
            "confession_repository.save", confession_id=str(confession.id)
        ):
            stmt = insert(confessions_table).values(**confession_to_dict(confession))
            try:
                await self.session.execute(stmt)
                # Commit before the response is built so a failed commit
                # reaches the caller as StorageError
                await self.session.commit()
            except SQLAlchemyError as e:
                raise StorageError("save", e) from e
            return confession

    async def find_by_id(self, confession_id: ConfessionId) -> Optional[Confession]:
        """Find a confession by ID."""
        stmt = select(confessions_table).where(confessions_table.c.id == confession_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError("find_by_id", e) from e
        row = result.fetchone()
        return row_to_confession(row._asdict()) if row else None

    async def sample(self, size: int) -> List[Confession]:
        """Pick up to ``size`` confessions at random."""
        with logfire.span("confession_repository.sample", size=size):
            stmt = select(confessions_table).order_by(func.random()).limit(size)
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise StorageError("sample", e) from e
            return [row_to_confession(row._asdict()) for row in result.fetchall()]

    async def find_by_tag(self, tag: str) -> List[Confession]:
        """Find all confessions carrying a tag."""
        with logfire.span("confession_repository.find_by_tag", tag=tag):
            stmt = select(confessions_table).where(
                confessions_table.c.tags.contains([tag])
            )
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise StorageError("find_by_tag", e) from e
            return [row_to_confession(row._asdict()) for row in result.fetchall()]

    async def add_reaction(
        self,
        confession_id: ConfessionId,
        reaction_type: ReactionType,
        user_id: str,
    ) -> Optional[Confession]:
        """Atomically increment a counter and record the reactor.

        Single conditional UPDATE: the row lock serializes concurrent
        reactions on the same confession, and the predicate is re-checked
        against the latest row version, so a user can never be added twice.
        The update is committed here, releasing the row lock.
        """
        with logfire.span(
            "confession_repository.add_reaction",
            confession_id=str(confession_id),
            reaction_type=reaction_type.value,
        ):
            counter = confessions_table.c[reaction_type.value]
            reactors = confessions_table.c.user_reactions
            stmt = (
                update(confessions_table)
                .where(confessions_table.c.id == confession_id)
                .where(~reactors.contains([user_id]))
                .values(
                    {
                        counter: counter + 1,
                        reactors: func.array_append(reactors, literal(user_id, Text)),
                    }
                )
                .returning(confessions_table)
            )
            try:
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.commit()
            except SQLAlchemyError as e:
                raise StorageError("add_reaction", e) from e

            if row is None:
                logfire.info(
                    "Reaction not applied",
                    confession_id=str(confession_id),
                )
                return None

            return row_to_confession(row._asdict())
