"""Tests for text rendering."""

from __future__ import annotations

from gamerena.core.config import Settings
from gamerena.engine.arena import Arena
from gamerena.engine.combat import CombatEvent, Outcome
from gamerena.engine.rng import RandomSource
from gamerena.host.report import health_bar, render_entity, render_event, render_teams
from gamerena.models.blueprint import SkillKind
from gamerena.models.stats import Modifier


class TestHealthBar:
    """Tests for health_bar."""

    def test_full(self) -> None:
        """Test a full bar has one cell per 20 HP."""
        assert health_bar(200, 200) == "<##########>"

    def test_partial(self) -> None:
        """Test cells round to the nearest 20 HP."""
        assert health_bar(150, 200) == "<########..>"
        assert health_bar(9, 200) == "<" + "." * 10 + ">"

    def test_over_max(self) -> None:
        """Test HP above max extends the bar instead of overflowing."""
        assert health_bar(260, 200) == "<" + "#" * 13 + ">"


class TestRenderEntity:
    """Tests for render_entity."""

    def test_level_zero(self, make_entity) -> None:
        """Test the compact form is a single line."""
        text = render_entity(make_entity("Alice"))

        assert text == "Name: Alice  HP: 200 / 200  <##########>"

    def test_indent(self, make_entity) -> None:
        """Test every line is indented."""
        lines = render_entity(make_entity("Alice"), indent=2, level=2).splitlines()
        assert all(line.startswith("  ") for line in lines)

    def test_stat_lines(self, make_entity) -> None:
        """Test level 1 adds effective stats."""
        entity = make_entity("Alice", attack=60)
        entity.add_modifier(Modifier(attack=5))

        lines = render_entity(entity, level=1).splitlines()

        assert len(lines) == 3
        assert lines[1].startswith("Atk: 65")
        assert "Int: 50" in lines[2]

    def test_score_line(self, make_entity) -> None:
        """Test level 2 adds the score."""
        entity = make_entity("Alice")
        entity.state.score = 87

        lines = render_entity(entity, level=2).splitlines()

        assert lines[1] == "Score: 87"
        assert len(lines) == 4

    def test_defeated(self, make_entity) -> None:
        """Test inactive entities show a marker instead of stats."""
        entity = make_entity("Bob")
        entity.state.take_damage(1000)

        lines = render_entity(entity, level=1).splitlines()

        assert lines[0] == "Name: Bob  HP: 0 / 200  <..........>"
        assert "defeated" in lines[1]
        assert len(lines) == 2


class TestRenderTeams:
    """Tests for render_teams."""

    def test_groups_by_team(self, settings: Settings) -> None:
        """Test members follow their team header."""
        arena = Arena(settings, rng=RandomSource(seed=1))
        arena.register("red", "Alice")
        arena.register("blue", "Bob")
        arena.register("red", "Amy")

        lines = render_teams(arena).splitlines()

        assert lines[0] == "Team: red"
        assert lines[1].strip().startswith("Name: Alice")
        assert lines[3].strip().startswith("Name: Amy")
        assert "Team: blue" in lines


class TestRenderEvent:
    """Tests for render_event."""

    def test_hit_and_kill(self) -> None:
        """Test a killing blow is narrated on two lines."""
        event = CombatEvent(
            actor="Alice",
            target="Bob",
            skill=SkillKind.STRIKE,
            outcome=Outcome.HIT,
            amount=57,
            killed=True,
        )

        assert render_event(event) == (
            "Alice attacks Bob for 57 damage.\nBob was defeated by Alice."
        )

    def test_dodge(self) -> None:
        """Test a dodge names the dodger."""
        event = CombatEvent(
            actor="Alice", target="Bob", skill=SkillKind.FIREBALL, outcome=Outcome.DODGED
        )
        assert render_event(event) == "Alice hurls a fireball at Bob, but Bob dodged."

    def test_heal(self) -> None:
        """Test heals report the restored amount."""
        event = CombatEvent(
            actor="Cleo", target="Amy", skill=SkillKind.CURE, outcome=Outcome.HEALED, amount=12
        )
        assert render_event(event) == "Cleo casts cure on Amy: Amy recovers 12 HP."
