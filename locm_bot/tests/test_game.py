"""
Test suite for the turn dispatcher - validates routing between draft and
battle logic, reply lines, configuration and verbose logging.
"""
import pytest

from ..ai.agent import AIAgent, RandomAI, SimpleAI
from ..engine.actions import AttackFace, Pass, PickCard, Summon
from ..engine.game import Bot, BotConfig
from ..engine.types import BOARD_LIMIT, Location
from .mocks import mock_creature, mock_snapshot


class RecordingAI(AIAgent):
    """Agent that records which entry point was used."""

    def __init__(self):
        self.calls = []

    def choose_draft_pick(self, snapshot):
        self.calls.append("draft")
        return PickCard(0)

    def plan_battle(self, snapshot):
        self.calls.append("battle")
        return [Pass()]


# =============================================================================
# CONFIGURATION TESTS
# =============================================================================

class TestBotConfig:
    """Tests for default configuration."""

    def test_defaults(self):
        config = BotConfig()
        assert config.board_limit == BOARD_LIMIT == 6
        assert config.verbose is False
        assert config.echo_input is False

    def test_default_agent_is_simple_ai(self):
        assert isinstance(Bot().agent, SimpleAI)

    def test_board_limit_reaches_default_agent(self):
        bot = Bot(config=BotConfig(board_limit=1))
        hand = [mock_creature(attack=1, cost=1, instance_id=i) for i in (1, 2)]
        assert bot.decide(mock_snapshot(hand, mana=5)) == [Summon(1)]

    @pytest.mark.parametrize("agent", [SimpleAI(), RandomAI(seed=3)])
    def test_board_limit_reaches_explicit_agent(self, agent):
        bot = Bot(agent=agent, config=BotConfig(board_limit=1))
        hand = [mock_creature(attack=1, cost=1, instance_id=i) for i in (1, 2)]
        actions = bot.decide(mock_snapshot(hand, mana=5))
        assert len([a for a in actions if isinstance(a, Summon)]) == 1

    def test_explicit_agent_keeps_its_limit_without_config(self):
        bot = Bot(agent=SimpleAI(board_limit=1))
        hand = [mock_creature(attack=1, cost=1, instance_id=i) for i in (1, 2)]
        assert bot.decide(mock_snapshot(hand, mana=5)) == [Summon(1)]


# =============================================================================
# DISPATCH TESTS
# =============================================================================

class TestDispatch:
    """Tests for routing a snapshot to the right logic."""

    def test_zero_mana_is_draft(self):
        agent = RecordingAI()
        Bot(agent=agent).decide(mock_snapshot([mock_creature()], mana=0))
        assert agent.calls == ["draft"]

    def test_mana_is_battle(self):
        agent = RecordingAI()
        Bot(agent=agent).decide(mock_snapshot([], mana=1))
        assert agent.calls == ["battle"]

    def test_draft_returns_one_pick(self, bot, draft_snapshot):
        assert bot.decide(draft_snapshot) == [PickCard(1)]

    def test_battle_returns_plan(self, bot):
        cards = [mock_creature(attack=2, location=Location.MY_SIDE, instance_id=3)]
        assert bot.decide(mock_snapshot(cards, mana=2)) == [AttackFace(3)]

    def test_respond_formats_line(self, bot, draft_snapshot, battle_snapshot):
        assert bot.respond(draft_snapshot) == "PICK 1"
        assert bot.respond(battle_snapshot) == (
            "SUMMON 2;SUMMON 1;ATTACK 4 5;ATTACK 3 5;ATTACK 1 -1;USE 7 -1"
        )

    def test_nothing_to_do_passes(self, bot):
        assert bot.decide(mock_snapshot([], mana=3)) == []
        assert bot.respond(mock_snapshot([], mana=3)) == "PASS"

    def test_same_snapshot_same_reply(self, bot, battle_snapshot):
        assert bot.respond(battle_snapshot) == bot.respond(battle_snapshot)

    def test_turn_counter(self, bot, draft_snapshot):
        bot.decide(draft_snapshot)
        bot.decide(draft_snapshot)
        assert bot.turn_number == 2

    def test_random_agent_plugs_in(self, draft_snapshot):
        bot = Bot(agent=RandomAI(seed=5))
        assert bot.respond(draft_snapshot).startswith("PICK ")


# =============================================================================
# LOGGING TESTS
# =============================================================================

class TestLogging:
    """Tests for verbose diagnostics."""

    def test_quiet_by_default(self, bot, battle_snapshot, capsys):
        bot.respond(battle_snapshot)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_verbose_logs_to_stderr_only(self, verbose_bot, draft_snapshot, capsys):
        verbose_bot.respond(draft_snapshot)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[DEBUG] Turn 1: me: hp=30 mana=0" in captured.err
        assert "[INFO] Turn 1: -> PICK 1" in captured.err

    def test_log_levels(self, verbose_bot, capsys):
        verbose_bot.log("careful", level="warning")
        verbose_bot.log("broken", level="error")
        verbose_bot.log("odd", level="unknown")
        err = capsys.readouterr().err
        assert "[WARN] Turn 0: careful" in err
        assert "[ERROR] Turn 0: broken" in err
        assert "[INFO] Turn 0: odd" in err
