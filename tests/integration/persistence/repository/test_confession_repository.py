"""Integration tests for PostgresConfessionRepository.

Require a running PostgreSQL reachable through DATABASE__URL. Enable with
CONFESS_INTEGRATION=1.
"""

import asyncio
import os

import pytest
import pytest_asyncio
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from confess.domain.repository import ConfessionRepository
from confess.domain.value import ReactionType
from confess.persistence.database import create_schema
from confess.persistence.repository import PostgresConfessionRepository
from confess.persistence.tables import confessions_table
from tests.conftest import make_confession
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    os.environ.get("CONFESS_INTEGRATION") != "1",
    reason="set CONFESS_INTEGRATION=1 to run against PostgreSQL",
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def session_factory(integration_env):
    """Fresh confessions table and a session factory on the same engine."""
    engine = await integration_env.get(AsyncEngine)
    await create_schema(engine)
    async with engine.begin() as conn:
        await conn.execute(delete(confessions_table))
    return await integration_env.get(async_sessionmaker[AsyncSession])


class TestConfessionRepositoryIntegration:
    """Integration tests for PostgresConfessionRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_round_trip(self, integration_env, session_factory):
        """A saved confession reads back unchanged."""
        repo = await integration_env.get(ConfessionRepository)
        confession = make_confession(tags=["b", "a"])

        await repo.save(confession)
        found = await repo.find_by_id(confession.id)

        assert found.id == confession.id
        assert found.tags == ["b", "a"]
        assert found.reactions.user_reactions == []

    @pytest.mark.asyncio
    async def test_find_by_tag_and_sample(self, integration_env, session_factory):
        """Tag filtering uses array containment; sampling caps the size."""
        repo = await integration_env.get(ConfessionRepository)
        tagged = make_confession(tags=["secret"])
        await repo.save(tagged)
        for _ in range(6):
            await repo.save(make_confession(tags=["other"]))

        assert [c.id for c in await repo.find_by_tag("secret")] == [tagged.id]
        assert len(await repo.sample(5)) == 5

    @pytest.mark.asyncio
    async def test_add_reaction_is_conditional(self, integration_env, session_factory):
        """The update applies once per user."""
        repo = await integration_env.get(ConfessionRepository)
        confession = await repo.save(make_confession())

        updated = await repo.add_reaction(confession.id, ReactionType.LOVE, "u1")
        repeated = await repo.add_reaction(confession.id, ReactionType.SAD, "u1")

        assert updated.reactions.love == 1
        assert updated.reactions.user_reactions == ["u1"]
        assert repeated is None

    @pytest.mark.asyncio
    async def test_concurrent_reactions_on_separate_sessions(self, session_factory):
        """Concurrent transactions lose no updates and admit no duplicates."""
        async with session_factory() as session:
            confession = await PostgresConfessionRepository(session).save(
                make_confession()
            )
            await session.commit()

        async def react(user_id: str):
            async with session_factory() as session:
                repo = PostgresConfessionRepository(session)
                result = await repo.add_reaction(
                    confession.id, ReactionType.LAUGH, user_id
                )
                await session.commit()
                return result

        users = [f"user-{i}" for i in range(10)]
        results = await asyncio.gather(*(react(u) for u in [*users, "user-0"]))

        assert sum(r is None for r in results) == 1

        async with session_factory() as session:
            stored = await PostgresConfessionRepository(session).find_by_id(
                confession.id
            )
        assert stored.reactions.laugh == len(users)
        assert sorted(stored.reactions.user_reactions) == sorted(users)
