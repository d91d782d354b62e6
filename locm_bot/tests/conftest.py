"""
Shared pytest fixtures for LOCM Bot tests.

This module provides reusable fixtures for common test scenarios including:
- Configured bots and agents
- Draft offers and battle snapshots
- Raw protocol text for parser and runner tests
"""

import pytest

from ..ai.agent import BattleAI, DraftAI, SimpleAI
from ..engine.game import Bot, BotConfig
from ..engine.types import Ability, Location
from .mocks import mock_creature, mock_item, mock_snapshot


# =============================================================================
# Agent and Bot Fixtures
# =============================================================================

@pytest.fixture
def draft_ai():
    """Draft evaluator."""
    return DraftAI()


@pytest.fixture
def battle_ai():
    """
    Battle planner with the standard board limit of 6.

    Usage:
        def test_plan(battle_ai):
            actions = battle_ai.plan_turn(mock_snapshot([...]))
    """
    return BattleAI()


@pytest.fixture
def bot():
    """Bot with the default SimpleAI and quiet configuration."""
    return Bot(agent=SimpleAI(), config=BotConfig())


@pytest.fixture
def verbose_bot():
    """Bot that logs every decision to stderr."""
    return Bot(config=BotConfig(verbose=True))


# =============================================================================
# Snapshot Fixtures
# =============================================================================

@pytest.fixture
def draft_snapshot():
    """
    A draft turn offering three cards.

    Scores (attack + my hp - opp hp - cost): 1, 4, 2, so index 1 wins.
    """
    offer = [
        mock_creature(attack=3, defense=2, cost=2, instance_id=-1),
        mock_creature(attack=6, defense=5, cost=3, my_health_change=1, instance_id=-1),
        mock_creature(attack=2, defense=2, cost=2, opponent_health_change=-2,
                      instance_id=-1),
    ]
    return mock_snapshot(offer, mana=0)


@pytest.fixture
def battle_snapshot():
    """
    A battle turn with a bit of everything.

    Me: 4 mana, hand 1/1 charge (1c) and 3/3 (3c), board 2/2 and 4/1.
    Opponent: a 1/5 guard and a 5/5 without abilities.
    """
    cards = [
        mock_creature(attack=1, defense=1, cost=1, abilities=Ability.CHARGE, instance_id=1),
        mock_creature(attack=3, defense=3, cost=3, instance_id=2),
        mock_creature(attack=2, defense=2, location=Location.MY_SIDE, instance_id=3),
        mock_creature(attack=4, defense=1, location=Location.MY_SIDE, instance_id=4),
        mock_creature(attack=1, defense=5, location=Location.OPPONENT_SIDE,
                      abilities=Ability.GUARD, instance_id=5),
        mock_creature(attack=5, defense=5, location=Location.OPPONENT_SIDE, instance_id=6),
        mock_item(cost=0, instance_id=7),
    ]
    return mock_snapshot(cards, mana=4)


# =============================================================================
# Protocol Fixtures
# =============================================================================

@pytest.fixture
def draft_turn_text():
    """One draft turn exactly as the referee sends it."""
    return "\n".join([
        "30 0 0 25",
        "30 0 0 25",
        "0",
        "3",
        "18 -1 0 0 4 7 4 ------ 0 0 0",
        "21 -1 0 0 5 5 6 ------ 0 0 0",
        "52 -1 0 0 4 2 5 --D-L- 0 0 0",
    ])


@pytest.fixture
def battle_turn_text():
    """One battle turn exactly as the referee sends it."""
    return "\n".join([
        "30 3 20 5",
        "28 3 21 5",
        "4",
        "4",
        "7 1 0 0 2 2 2 -C---- 0 0 0",
        "33 2 0 0 3 4 4 ------ 0 0 0",
        "12 3 1 0 3 2 3 ------ 0 0 0",
        "48 4 -1 0 2 1 3 ---G-- 0 0 0",
    ])
