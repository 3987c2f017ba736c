"""Unit tests for the Confession and Reactions domain models."""

import pytest
from pydantic import ValidationError

from confess.domain.model import Reactions
from confess.domain.value import ReactionType
from tests.conftest import make_confession


class TestReactions:
    """Tests for the Reactions value."""

    def test_defaults_are_zero_and_empty(self):
        """A fresh tally has zero counters and no reactors."""
        reactions = Reactions()

        assert reactions.love == 0
        assert reactions.sad == 0
        assert reactions.laugh == 0
        assert reactions.user_reactions == []

    def test_with_reaction_increments_only_matching_counter(self):
        """Reacting bumps the chosen counter and records the user."""
        reactions = Reactions()

        updated = reactions.with_reaction(ReactionType.SAD, "u1")

        assert updated.sad == 1
        assert updated.love == 0
        assert updated.laugh == 0
        assert updated.user_reactions == ["u1"]

    def test_with_reaction_leaves_original_untouched(self):
        """Tallies are immutable; a new one is returned."""
        reactions = Reactions()

        reactions.with_reaction(ReactionType.LOVE, "u1")

        assert reactions.love == 0
        assert reactions.user_reactions == []

    def test_with_reaction_rejects_repeat_user(self):
        """The same user cannot react twice, even with another type."""
        reactions = Reactions().with_reaction(ReactionType.LOVE, "u1")

        with pytest.raises(ValueError, match="only react once"):
            reactions.with_reaction(ReactionType.LAUGH, "u1")

    def test_count_matches_each_type(self):
        """count() reads the counter for every reaction type."""
        reactions = Reactions(
            love=3, sad=2, laugh=1, user_reactions=[f"u{i}" for i in range(6)]
        )

        assert reactions.count(ReactionType.LOVE) == 3
        assert reactions.count(ReactionType.SAD) == 2
        assert reactions.count(ReactionType.LAUGH) == 1

    def test_negative_counter_rejected(self):
        """Counters are never negative."""
        with pytest.raises(ValidationError):
            Reactions(love=-1)

    def test_duplicate_reactors_rejected(self):
        """A reactor list with repeats is invalid."""
        with pytest.raises(ValidationError):
            Reactions(love=2, user_reactions=["u1", "u1"])

    def test_counts_must_match_reactors(self):
        """Every recorded reactor contributes exactly one counted reaction."""
        with pytest.raises(ValidationError, match="do not match reactors"):
            Reactions(love=2, user_reactions=["u1"])

        with pytest.raises(ValidationError, match="do not match reactors"):
            Reactions(user_reactions=["u1"])

    def test_counts_stay_consistent_after_reactions(self):
        """Applying reactions keeps the sum equal to the reactor count."""
        reactions = (
            Reactions()
            .with_reaction(ReactionType.LOVE, "u1")
            .with_reaction(ReactionType.LAUGH, "u2")
            .with_reaction(ReactionType.LOVE, "u3")
        )

        assert reactions.love + reactions.sad + reactions.laugh == 3
        assert len(reactions.user_reactions) == 3
        assert Reactions.model_validate(reactions.model_dump()) == reactions


class TestConfession:
    """Tests for the Confession aggregate."""

    def test_new_confession_has_zeroed_reactions(self):
        """Reactions are fully initialized from creation."""
        confession = make_confession(tags=["work"])

        assert confession.reactions == Reactions()
        assert confession.tags == ["work"]

    def test_blank_title_rejected(self):
        """Whitespace-only titles are invalid."""
        with pytest.raises(ValidationError, match="Title is required"):
            make_confession(title="   ")

    def test_empty_body_rejected(self):
        """Empty bodies are invalid."""
        with pytest.raises(ValidationError):
            make_confession(body="")

    def test_reaction_type_values(self):
        """The reaction set is exactly love, sad and laugh."""
        assert {r.value for r in ReactionType} == {"love", "sad", "laugh"}
