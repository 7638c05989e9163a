"""
Unit tests for the priority ranking model.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from adoptmatch.models.compatibility_model import CompatibilityScorer
from adoptmatch.models.priority_model import (
    PriorityRanker,
    PriorityWeights,
    calculate_priority_score,
    conversations_by_adopter,
    rank_adopters,
    unique_adopter_ids,
)
from adoptmatch.repository import InMemoryMatchRepository
from adoptmatch.schemas.pet_preferences import PetTutorPreferences
from adoptmatch.schemas.records import AdopterRecord, ConversationRecord, FavoriteRecord, PetRecord


class TestPriorityScore:
    """Unit tests for the composite priority score."""

    @pytest.mark.parametrize(
        "match_score,completeness,has_conversation,expected",
        [
            (100, 100, True, 100),
            (None, 0, False, 0),
            (0, 0, True, 20),
            (80, 50, False, 55),
            (50, 50, True, 60),
            (100, 24, False, 57),
        ],
    )
    def test_formula(self, match_score, completeness, has_conversation, expected):
        assert calculate_priority_score(match_score, completeness, has_conversation) == expected

    def test_custom_weights(self):
        weights = PriorityWeights(match=1.0, completeness=0.0, conversation=0.0)
        assert calculate_priority_score(73, 100, True, weights) == 73

    def test_weights_from_settings(self):
        weights = PriorityWeights.from_settings()
        assert weights == PriorityWeights(match=0.5, completeness=0.3, conversation=0.2)


class TestRankingInputs:
    """Favorite de-duplication and conversation lookup."""

    def test_unique_adopter_ids(self):
        base = datetime(2024, 5, 1)
        favorites = [
            FavoriteRecord(user_id="b", pet_id="p", created_at=base + timedelta(hours=2)),
            FavoriteRecord(user_id="a", pet_id="p", created_at=base + timedelta(hours=1)),
            FavoriteRecord(user_id="tutor", pet_id="p", created_at=base),
            FavoriteRecord(user_id="a", pet_id="p", created_at=base + timedelta(hours=3)),
        ]

        assert unique_adopter_ids(favorites, "tutor") == ["a", "b"]

    def test_conversations_by_adopter(self):
        conversations = [
            ConversationRecord(id="c1", pet_id="p", adopter_id="a", tutor_id="tutor"),
            ConversationRecord(id="c2", pet_id="p", adopter_id="b", type="SUPPORT"),
            ConversationRecord(id="c3", pet_id="other", adopter_id="c"),
            ConversationRecord(id="c4", pet_id="p", adopter_id="d", tutor_id="someone_else"),
            ConversationRecord(id="c5", pet_id="p", adopter_id=None),
            ConversationRecord(id="c6", pet_id="p", adopter_id="e"),
        ]

        assert conversations_by_adopter(conversations, "p", "tutor") == {"a": "c1", "e": "c6"}


    def test_mixed_naive_and_aware_timestamps(self):
        favorites = [
            FavoriteRecord(user_id="late", pet_id="p", created_at=datetime(2024, 1, 2, tzinfo=timezone.utc)),
            FavoriteRecord(user_id="early", pet_id="p", created_at=datetime(2024, 1, 1)),
        ]

        assert unique_adopter_ids(favorites, "tutor") == ["early", "late"]

    def test_naive_timestamp_is_utc(self):
        favorite = FavoriteRecord(user_id="a", pet_id="p", created_at=datetime(2024, 1, 1, 9))

        assert favorite.created_at == datetime(2024, 1, 1, 9, tzinfo=timezone.utc)
        assert FavoriteRecord(user_id="a", pet_id="p").created_at.tzinfo is not None


class TestRankAdopters:
    """Unit tests for rank_adopters over loaded data."""

    @pytest.fixture
    def preferences(self):
        return PetTutorPreferences(preferred_tutor_housing_type="CASA")

    def test_sorted_by_priority(self, preferences):
        adopters = [
            AdopterRecord(id="low", name="Low", housing_type="APARTAMENTO"),
            AdopterRecord(id="high", name="High", housing_type="CASA", city="Recife"),
            AdopterRecord(id="mid", name="Mid"),
        ]

        items = rank_adopters(preferences, adopters, {"mid": "conv_1"})

        scores = [item.priority_score for item in items]
        assert scores == sorted(scores, reverse=True)
        assert [item.adopter_id for item in items] == ["high", "mid", "low"]
        mid = items[1]
        assert mid.has_conversation is True
        assert mid.conversation_id == "conv_1"
        assert mid.match_score == 50

    def test_ties_keep_input_order(self, preferences):
        adopters = [AdopterRecord(id=f"u{i}", name=f"User {i}") for i in range(5)]

        items = rank_adopters(preferences, adopters, {})

        assert len({item.priority_score for item in items}) == 1
        assert [item.adopter_id for item in items] == ["u0", "u1", "u2", "u3", "u4"]

    def test_scoring_failure_keeps_ranking(self, preferences):
        scorer = Mock(spec=CompatibilityScorer)
        real = CompatibilityScorer()

        def flaky(profile, prefs):
            if profile.housing_type == "APARTAMENTO":
                raise RuntimeError("broken record")
            return real.score(profile, prefs)

        scorer.score.side_effect = flaky
        adopters = [
            AdopterRecord(id="broken", name="Broken", housing_type="APARTAMENTO"),
            AdopterRecord(id="ok", name="Ok", housing_type="CASA"),
        ]

        items = rank_adopters(preferences, adopters, {}, scorer=scorer)

        assert [item.adopter_id for item in items] == ["ok", "broken"]
        assert items[1].match_score is None
        assert items[0].match_score == 100

    def test_pet_without_preferences(self):
        items = rank_adopters(PetTutorPreferences(), [AdopterRecord(id="a", name="A")], {"a": "c"})

        assert items[0].match_score is None
        assert items[0].priority_score == 20

    def test_empty_input(self, preferences):
        assert rank_adopters(preferences, [], {}) == []


class TestPriorityRanker:
    """Unit tests for PriorityRanker over a repository."""

    def test_ranks_repository_data(self, repository):
        items = PriorityRanker(repository).rank("pet_1", "tutor_1")

        assert [item.adopter_id for item in items] == ["ana", "bruno", "carla"]
        ana, bruno, carla = items
        assert (ana.match_score, ana.profile_completeness, ana.priority_score) == (100, 24, 57)
        assert (bruno.match_score, bruno.profile_completeness, bruno.priority_score) == (50, 0, 45)
        assert (carla.match_score, carla.profile_completeness, carla.priority_score) == (0, 100, 30)
        assert bruno.conversation_id == "conv_bruno"
        assert carla.has_conversation is False
        assert ana.avatar_url == "https://img.example/ana.png"

    def test_non_increasing_scores(self, repository):
        items = PriorityRanker(repository).rank("pet_1", "tutor_1")

        for earlier, later in zip(items, items[1:]):
            assert earlier.priority_score >= later.priority_score

    def test_no_favorites(self, repository):
        assert PriorityRanker(repository).rank("pet_2", "tutor_1") == []

    def test_unknown_pet(self, repository):
        assert PriorityRanker(repository).rank("missing", "tutor_1") == []

    def test_only_tutor_favorited(self):
        repo = InMemoryMatchRepository()
        repo.add_pet(PetRecord(id="p", owner_id="t"))
        repo.add_adopter(AdopterRecord(id="t", name="Tutor"))
        repo.add_favorite(FavoriteRecord(user_id="t", pet_id="p"))

        assert PriorityRanker(repo).rank("p", "t") == []

    def test_mixed_timestamps_rank(self):
        repo = InMemoryMatchRepository()
        repo.add_pet(PetRecord(id="p", owner_id="t"))
        repo.add_adopter(AdopterRecord(id="a", name="A"))
        repo.add_adopter(AdopterRecord(id="b", name=""))
        repo.add_favorite(FavoriteRecord(user_id="b", pet_id="p", created_at=datetime(2024, 1, 1)))
        repo.add_favorite(
            FavoriteRecord(user_id="a", pet_id="p", created_at=datetime(2024, 1, 2, tzinfo=timezone.utc))
        )

        items = PriorityRanker(repo).rank("p", "t")

        assert [item.adopter_id for item in items] == ["b", "a"]
        assert items[0].name == ""

    def test_favorite_order_breaks_ties(self):
        repo = InMemoryMatchRepository()
        repo.add_pet(PetRecord(id="p", owner_id="t"))
        base = datetime(2024, 3, 1)
        for offset, user_id in enumerate(["z", "m", "a"]):
            repo.add_adopter(AdopterRecord(id=user_id, name=user_id.upper()))
            repo.add_favorite(FavoriteRecord(user_id=user_id, pet_id="p", created_at=base + timedelta(days=offset)))

        items = PriorityRanker(repo).rank("p", "t")

        assert [item.adopter_id for item in items] == ["z", "m", "a"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
