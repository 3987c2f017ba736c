"""Unit tests for ConfessionService."""

import pytest

from confess.domain.error import ValidationError
from confess.domain.repository import ConfessionRepository
from confess.domain.service import ConfessionService
from tests.conftest import make_confession
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateConfession:
    """Tests for create_confession method."""

    @pytest.mark.asyncio
    async def test_create_persists_with_empty_reactions(self, unit_env):
        """A created confession resolves to a record with zeroed reactions."""
        # Arrange
        service = await unit_env.get(ConfessionService)
        repo = await unit_env.get(ConfessionRepository)

        # Act
        created = await service.create_confession(
            title="T", body="B", tags=["x", "y"]
        )

        # Assert
        stored = await repo.find_by_id(created.id)
        assert stored is not None
        assert stored.title == "T"
        assert stored.body == "B"
        assert stored.tags == ["x", "y"]
        assert stored.reactions.love == 0
        assert stored.reactions.sad == 0
        assert stored.reactions.laugh == 0
        assert stored.reactions.user_reactions == []

    @pytest.mark.asyncio
    async def test_create_without_tags_defaults_to_empty(self, unit_env):
        """Tags are optional."""
        service = await unit_env.get(ConfessionService)

        created = await service.create_confession(title="T", body="B")

        assert created.tags == []

    @pytest.mark.asyncio
    async def test_create_drops_empty_tags(self, unit_env):
        """Empty tag labels are not stored; order is preserved."""
        service = await unit_env.get(ConfessionService)

        created = await service.create_confession(
            title="T", body="B", tags=["b", "", "a"]
        )

        assert created.tags == ["b", "a"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("title", "body"),
        [("", "B"), ("T", ""), (None, "B"), ("T", None), ("   ", "B")],
    )
    async def test_missing_title_or_body_raises_and_persists_nothing(
        self, unit_env, title, body
    ):
        """Missing title or body fails validation before anything is saved."""
        service = await unit_env.get(ConfessionService)
        repo = await unit_env.get(ConfessionRepository)

        with pytest.raises(ValidationError):
            await service.create_confession(title=title, body=body)

        assert await repo.sample(10) == []


class TestQueries:
    """Tests for sampling and tag filtering."""

    @pytest.mark.asyncio
    async def test_get_by_tag_returns_only_tagged(self, unit_env):
        """Filtering by a tag on 2 of 5 confessions returns exactly those 2."""
        # Arrange
        service = await unit_env.get(ConfessionService)
        repo = await unit_env.get(ConfessionRepository)

        tagged = [
            make_confession(title="First", tags=["secret", "work"]),
            make_confession(title="Second", tags=["secret"]),
        ]
        others = [
            make_confession(title="Third", tags=["work"]),
            make_confession(title="Fourth", tags=[]),
            make_confession(title="Fifth", tags=["secrets"]),
        ]
        for confession in [tagged[0], others[0], tagged[1], *others[1:]]:
            await repo.save(confession)

        # Act
        result = await service.get_confessions_by_tag("secret")

        # Assert
        assert {c.id for c in result} == {c.id for c in tagged}
        assert {c.title for c in result} == {"First", "Second"}

    @pytest.mark.asyncio
    async def test_get_by_unknown_tag_returns_empty(self, unit_env):
        """No match is an empty list, not an error."""
        service = await unit_env.get(ConfessionService)
        await service.create_confession(title="T", body="B", tags=["x"])

        assert await service.get_confessions_by_tag("nope") == []

    @pytest.mark.asyncio
    async def test_sample_caps_at_requested_size(self, unit_env):
        """Sampling never returns more than asked for, without repeats."""
        service = await unit_env.get(ConfessionService)
        for i in range(8):
            await service.create_confession(title=f"T{i}", body="B")

        sampled = await service.sample_confessions(5)

        assert len(sampled) == 5
        assert len({c.id for c in sampled}) == 5

    @pytest.mark.asyncio
    async def test_sample_returns_fewer_when_store_is_small(self, unit_env):
        """Sampling a small store returns everything it has."""
        service = await unit_env.get(ConfessionService)
        for i in range(3):
            await service.create_confession(title=f"T{i}", body="B")

        sampled = await service.sample_confessions(5)

        assert len(sampled) == 3

    @pytest.mark.asyncio
    async def test_get_confession_by_id_missing_returns_none(self, unit_env):
        """Unknown IDs resolve to None."""
        service = await unit_env.get(ConfessionService)

        assert await service.get_confession_by_id(make_confession().id) is None
