"""Tests for RuntimeState and modifier lifetimes."""

from __future__ import annotations

import pytest

from gamerena.core.exceptions import InvalidArgumentError
from gamerena.models.state import AppliedModifier, RuntimeState
from gamerena.models.stats import Modifier


@pytest.fixture
def state() -> RuntimeState:
    return RuntimeState(hp=200, team_id=1)


class TestDamageAndHealing:
    """Tests for HP changes."""

    def test_take_damage(self, state: RuntimeState) -> None:
        """Test damage reduces HP without deactivating."""
        assert state.take_damage(50) is False
        assert state.hp == 150
        assert state.active

    def test_lethal_damage_clamps_and_deactivates(self, state: RuntimeState) -> None:
        """Test lethal damage clamps HP at zero and reports the kill."""
        assert state.take_damage(500) is True
        assert state.hp == 0
        assert not state.active

    def test_damage_after_deactivation_is_ignored(self, state: RuntimeState) -> None:
        """Test an inactive state does not react to damage."""
        state.take_damage(500)

        assert state.take_damage(10) is False
        assert state.hp == 0

    def test_restore(self, state: RuntimeState) -> None:
        """Test restore adds HP and reports the amount."""
        state.take_damage(50)
        assert state.restore(20) == 20
        assert state.hp == 170

    def test_restore_inactive(self, state: RuntimeState) -> None:
        """Test an inactive state cannot be restored."""
        state.deactivate()
        assert state.restore(20) == 0
        assert state.hp == 200


class TestDeactivation:
    """Tests for the deactivation callbacks."""

    def test_callbacks_run_once(self, state: RuntimeState) -> None:
        """Test callbacks fire exactly once across repeated deactivation."""
        calls: list[RuntimeState] = []
        state.on_deactivate.append(calls.append)

        state.deactivate()
        state.deactivate()
        state.take_damage(1000)

        assert calls == [state]


class TestModifiers:
    """Tests for attaching and expiring modifiers."""

    def test_add_rejects_non_modifier(self, state: RuntimeState) -> None:
        """Test None or foreign objects are rejected."""
        with pytest.raises(InvalidArgumentError, match="invalid modifier"):
            state.add_modifier(None)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            state.add_modifier({"attack": 5})  # type: ignore[arg-type]
        assert state.modifiers == []

    def test_hp_delta_applies_to_current_hp(self, state: RuntimeState) -> None:
        """Test an HP modifier shifts current HP once."""
        state.add_modifier(Modifier(hp=30))
        assert state.hp == 230

    def test_negative_hp_delta_can_deactivate(self, state: RuntimeState) -> None:
        """Test a draining modifier can knock the owner out."""
        state.add_modifier(Modifier(hp=-250))

        assert state.hp == 0
        assert not state.active

    def test_remove_by_name(self, state: RuntimeState) -> None:
        """Test removal drops every modifier with that name."""
        state.add_modifier(Modifier(name="haste", speed=10))
        state.add_modifier(Modifier(name="haste", speed=5))
        state.add_modifier(Modifier(name="shield", defense=10))

        assert state.remove_modifier("haste") == 2
        assert [m.name for m in state.active_modifiers] == ["shield"]

    def test_round_budget(self, state: RuntimeState) -> None:
        """Test a round-limited modifier expires after its owner's turns."""
        state.add_modifier(Modifier(name="haste", speed=10, max_rounds=2))

        assert state.advance_modifiers(100) == []
        expired = state.advance_modifiers(200)

        assert [m.name for m in expired] == ["haste"]
        assert state.modifiers == []

    def test_tick_budget(self, state: RuntimeState) -> None:
        """Test a tick-limited modifier expires once enough clock has passed."""
        state.add_modifier(Modifier(name="stun", speed=-10, max_ticks=150), now=100)

        assert state.advance_modifiers(200) == []
        assert [m.name for m in state.advance_modifiers(250)] == ["stun"]

    def test_permanent_modifier_never_expires(self, state: RuntimeState) -> None:
        """Test unlimited budgets keep the modifier forever."""
        state.add_modifier(Modifier(name="blessing", attack=1))
        for now in range(0, 10_000, 100):
            state.advance_modifiers(now)
        assert len(state.modifiers) == 1

    def test_applied_modifier_expired(self) -> None:
        """Test the expired flag checks either budget."""
        applied = AppliedModifier(modifier=Modifier(max_rounds=3, max_ticks=100))

        applied.rounds = 3
        assert applied.expired
        applied.rounds, applied.ticks = 0, 100
        assert applied.expired
        applied.ticks = 99
        assert not applied.expired


class TestCopy:
    """Tests for state copying."""

    def test_copy_is_independent(self, state: RuntimeState) -> None:
        """Test modifier lists are duplicated and callbacks dropped."""
        state.add_modifier(Modifier(name="haste", speed=10, max_rounds=5))
        state.on_deactivate.append(lambda _s: None)

        clone = state.copy()
        clone.advance_modifiers(10)

        assert clone.on_deactivate == []
        assert state.modifiers[0].rounds == 0
        assert clone.modifiers[0].rounds == 1
