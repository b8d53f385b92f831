"""Tests for the Entity handle."""

from __future__ import annotations

from typing import Callable

from gamerena.models.entity import Entity
from gamerena.models.stats import Modifier


class TestEntity:
    """Tests for Entity accessors."""

    def test_reads_blueprint(self, make_entity: Callable[..., Entity]) -> None:
        """Test accessors mirror the blueprint and fresh state."""
        entity = make_entity("Alice", "red", hp=240, speed=80)

        assert entity.name == "Alice"
        assert entity.team_name == "red"
        assert entity.team_id == entity.blueprint.team_id
        assert entity.hp == entity.max_hp == 240
        assert entity.active
        assert entity.score == 0
        assert entity.base_stats.speed == 80

    def test_effective_stats_recomputed(self, make_entity: Callable[..., Entity]) -> None:
        """Test effective stats follow modifier changes immediately."""
        entity = make_entity("Alice", attack=60)

        entity.add_modifier(Modifier(name="rage", attack=15))
        assert entity.effective_stats().attack == 75

        entity.remove_modifier("rage")
        assert entity.effective_stats().attack == 60
        assert entity.base_stats.attack == 60

    def test_removing_hp_modifier_clamps_hp(self, make_entity: Callable[..., Entity]) -> None:
        """Test current HP never exceeds the recomputed max."""
        entity = make_entity("Alice", hp=200)
        entity.add_modifier(Modifier(name="vigor", hp=50))
        assert entity.hp == 250

        entity.remove_modifier("vigor")

        assert entity.max_hp == 200
        assert entity.hp == 200

    def test_expire_modifiers_clamps_hp(self, make_entity: Callable[..., Entity]) -> None:
        """Test expiry also clamps HP to the new max."""
        entity = make_entity("Alice", hp=200)
        entity.add_modifier(Modifier(name="vigor", hp=50, max_rounds=1))

        expired = entity.expire_modifiers(now=10)

        assert [m.name for m in expired] == ["vigor"]
        assert entity.hp == 200


class TestClone:
    """Tests for Entity.clone."""

    def test_clone_shares_blueprint(self, make_entity: Callable[..., Entity]) -> None:
        """Test the clone shares the blueprint but not the state."""
        entity = make_entity("Alice")
        entity.state.on_deactivate.append(lambda _s: None)

        clone = entity.clone()
        clone.state.take_damage(50)

        assert clone.blueprint is entity.blueprint
        assert clone.state is not entity.state
        assert entity.hp == 200
        assert clone.hp == 150
        assert clone.state.on_deactivate == []

    def test_repr(self, make_entity: Callable[..., Entity]) -> None:
        """Test the repr names the entity and its team."""
        text = repr(make_entity("Alice", "red"))
        assert "Alice" in text
        assert "red" in text
