"""LOCM Bot - Turn Snapshot and Dispatcher

This module ties one turn together:
- BotConfig: configuration for a bot instance
- TurnSnapshot: everything the referee told us this turn
- Bot: picks the draft or battle logic, asks the agent, formats the reply

The Bot keeps no game state between turns. Each call to ``decide`` works
only from the snapshot it is given.
"""
import sys
from dataclasses import dataclass, field
from typing import List, Tuple, TYPE_CHECKING

from .actions import Action, format_actions
from .objects import CardInstance
from .player import PlayerState
from .types import BOARD_LIMIT

if TYPE_CHECKING:
    from ..ai.agent import AIAgent


# Unknown levels log as info
LOG_PREFIXES = {
    "debug": "[DEBUG]",
    "info": "[INFO]",
    "warning": "[WARN]",
    "error": "[ERROR]",
}


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class BotConfig:
    """
    Configuration settings for a bot instance.

    Attributes:
        board_limit: Maximum creatures on my side of the board (default 6)
        verbose: Enable diagnostic output on stderr (default False)
        echo_input: Echo every raw input line to stderr (default False)
    """
    board_limit: int = BOARD_LIMIT
    verbose: bool = False
    echo_input: bool = False


# =============================================================================
# TURN SNAPSHOT
# =============================================================================

@dataclass(frozen=True)
class TurnSnapshot:
    """
    Read-only view of one turn.

    The card views below are filters over ``cards`` and keep the order
    the referee sent the cards in.

    Attributes:
        me: My resources
        opponent: The opponent's resources
        cards: Every card of the snapshot (the offer, during the draft)
        opponent_hand_count: Number of cards in the opponent's hand
    """
    me: PlayerState
    opponent: PlayerState
    cards: Tuple[CardInstance, ...] = field(default_factory=tuple)
    opponent_hand_count: int = 0

    @property
    def is_draft_phase(self) -> bool:
        return self.me.mana == 0

    @property
    def hand_creatures(self) -> List[CardInstance]:
        return [c for c in self.cards if c.in_hand and c.is_creature]

    @property
    def hand_items(self) -> List[CardInstance]:
        return [c for c in self.cards if c.in_hand and c.is_item]

    @property
    def my_creatures(self) -> List[CardInstance]:
        return [c for c in self.cards if c.on_my_side and c.is_creature]

    @property
    def opp_creatures(self) -> List[CardInstance]:
        return [c for c in self.cards if c.on_opponent_side and c.is_creature]

    @property
    def opp_guards(self) -> List[CardInstance]:
        return [c for c in self.opp_creatures if c.has_guard]


# =============================================================================
# DISPATCHER
# =============================================================================

class Bot:
    """
    Turn dispatcher.

    Routes each snapshot to the agent's draft or battle logic and turns
    the result into the reply line. Holds only configuration and a turn
    counter used for log prefixes.

    Attributes:
        agent: The decision maker (SimpleAI unless given)
        config: Bot configuration
        turn_number: Number of turns decided so far
    """

    def __init__(self, agent: 'AIAgent' = None, config: BotConfig = None):
        """
        Initialize a bot.

        Args:
            agent: AI agent to consult. Defaults to SimpleAI.
            config: Bot configuration. Uses defaults if not provided.
                An explicit config's board_limit is applied to the agent.
        """
        self.config = config or BotConfig()
        if agent is None:
            from ..ai.agent import SimpleAI
            agent = SimpleAI(board_limit=self.config.board_limit)
        elif config is not None and hasattr(agent, 'board_limit'):
            agent.board_limit = config.board_limit
        self.agent = agent
        self.turn_number = 0

    def decide(self, snapshot: TurnSnapshot) -> List[Action]:
        """
        Decide this turn's actions.

        Args:
            snapshot: The current turn

        Returns:
            A single PickCard during the draft, otherwise the ordered
            battle actions (possibly empty)
        """
        self.turn_number += 1
        self.log(f"me: {snapshot.me} | opponent: {snapshot.opponent} | "
                 f"cards: {len(snapshot.cards)}", level="debug")

        if snapshot.is_draft_phase:
            actions: List[Action] = [self.agent.choose_draft_pick(snapshot)]
        else:
            actions = list(self.agent.plan_battle(snapshot))
        return actions

    def respond(self, snapshot: TurnSnapshot) -> str:
        """Decide this turn and return the protocol line to send."""
        line = format_actions(self.decide(snapshot))
        self.log(f"-> {line}")
        return line

    # =========================================================================
    # LOGGING METHODS
    # =========================================================================

    def log(self, message: str, level: str = "info"):
        """
        Write a diagnostic line to stderr when verbose mode is on.

        The referee reads every stdout line as a command, so one stray
        print there would forfeit the turn.

        Args:
            message: The message to log
            level: Log level ("info", "debug", "warning", "error")
        """
        if not self.config.verbose:
            return
        prefix = LOG_PREFIXES.get(level, LOG_PREFIXES["info"])
        print(f"{prefix} Turn {self.turn_number}: {message}", file=sys.stderr)


__all__ = ['BotConfig', 'TurnSnapshot', 'Bot']
