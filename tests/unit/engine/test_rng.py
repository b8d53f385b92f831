"""Tests for random sources and name-derived seeds."""

from __future__ import annotations

import pytest

from gamerena.core.exceptions import InvalidArgumentError
from gamerena.engine.rng import RandomSource, name_seed, team_id_for


class TestSeeds:
    """Tests for name and team digests."""

    def test_name_seed_is_stable(self) -> None:
        """Test the same name always yields the same seed."""
        assert name_seed("Alice") == name_seed("Alice")
        assert name_seed("Alice") != name_seed("Bob")

    def test_team_id_independent_of_name_seed(self) -> None:
        """Test team ids and name seeds use separate digests."""
        assert team_id_for("Alice") != name_seed("Alice")
        assert team_id_for("red") == team_id_for("red")

    def test_seeds_are_non_negative(self) -> None:
        """Test digests fit in an unsigned 64-bit integer."""
        for text in ("", "a", "~@Default", "名前"):
            assert 0 <= name_seed(text) < 2**64
            assert 0 <= team_id_for(text) < 2**64


class TestRandomSource:
    """Tests for RandomSource draws."""

    def test_for_name_is_reproducible(self) -> None:
        """Test two sources for one name produce the same stream."""
        first = RandomSource.for_name("Alice")
        second = RandomSource.for_name("Alice")

        assert [first.random() for _ in range(5)] == [second.random() for _ in range(5)]

    def test_below_range(self, seeded_rng: RandomSource) -> None:
        """Test below stays within [0, n)."""
        draws = {seeded_rng.below(3) for _ in range(200)}
        assert draws == {0, 1, 2}

    def test_below_rejects_non_positive(self, seeded_rng: RandomSource) -> None:
        """Test an empty range is rejected."""
        with pytest.raises(InvalidArgumentError):
            seeded_rng.below(0)

    def test_between_range(self, seeded_rng: RandomSource) -> None:
        """Test between stays within [low, high)."""
        for _ in range(200):
            assert 30 <= seeded_rng.between(30, 100) < 100

    def test_between_rejects_empty(self, seeded_rng: RandomSource) -> None:
        """Test between with low >= high is rejected."""
        with pytest.raises(InvalidArgumentError):
            seeded_rng.between(5, 5)

    def test_override_random(self, constant_rng) -> None:
        """Test subclasses pin every derived draw."""
        rng = constant_rng(0.5)

        assert rng.below(100) == 50
        assert rng.between(10, 20) == 15
        assert rng.pick(["a", "b", "c", "d"]) == "c"

    def test_below_clamps_top_edge(self, constant_rng) -> None:
        """Test a draw at the top edge still lands inside the range."""
        rng = constant_rng(0.9999999999)
        assert rng.below(7) == 6
