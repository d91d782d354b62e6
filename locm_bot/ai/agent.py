"""
LOCM Bot - AI Decision-Making

Provides the AIAgent base class, the draft evaluator, the battle planner,
and two agents built on them:
- SimpleAI: greedy heuristics (draft score, summon by attack, clear guards,
  go face, use blue items)
- RandomAI: random decisions within mana and board limits, for sparring
"""

import random
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

from ..engine.actions import (
    Action, AttackCreature, AttackFace, PickCard, Summon, UseItem
)
from ..engine.objects import CardInstance
from ..engine.player import PlayerState
from ..engine.types import BOARD_LIMIT

if TYPE_CHECKING:
    from ..engine.game import TurnSnapshot


# =============================================================================
# DRAFT
# =============================================================================

class DraftAI:
    """Picks the offered card with the best draft score."""

    def choose_pick(self, offer: Sequence[CardInstance]) -> PickCard:
        """
        Choose a card from the draft offer.

        Score is ``attack + my_health_change - opponent_health_change - cost``.
        Ties keep the earliest card.

        Args:
            offer: The offered cards, in the order the referee sent them

        Returns:
            PickCard with the 0-based index of the chosen card

        Raises:
            ValueError: If the offer is empty
        """
        if not offer:
            raise ValueError("Draft offer is empty")

        best_index = 0
        best_score = offer[0].draft_score
        for index, card in enumerate(offer[1:], start=1):
            score = card.draft_score
            if score > best_score:
                best_index = index
                best_score = score

        return PickCard(best_index)


# =============================================================================
# BATTLE
# =============================================================================

class BattleAI:
    """
    Greedy single-turn battle planner.

    A turn is planned in four phases, in this order:
    1. Summon hand creatures, strongest attack first, while mana and
       board space allow
    2. Attack opponent guards, biggest defense first, with my strongest
       attackers until each guard's defense is covered
    3. Send every attacker left over at the opponent's face
    4. Use blue items from hand with the mana left

    Mana spend is simulated on a copy of my PlayerState; the snapshot is
    never changed, so planning the same snapshot twice gives the same actions.
    """

    def __init__(self, board_limit: int = BOARD_LIMIT):
        self.board_limit = board_limit

    def plan_turn(self, snapshot: 'TurnSnapshot') -> List[Action]:
        """
        Plan every action for one battle turn.

        Args:
            snapshot: The current turn

        Returns:
            Actions in execution order (empty if there is nothing to do)
        """
        actions: List[Action] = []
        budget = snapshot.me

        summons, chargers, budget = self._summon_creatures(snapshot, budget)
        actions.extend(summons)

        # My board first, then this turn's chargers
        attackers = snapshot.my_creatures + chargers

        actions.extend(self._attack_guards(snapshot.opp_guards, attackers))
        actions.extend(self._attack_face(attackers))

        item_actions, _ = self._use_items(snapshot, budget)
        actions.extend(item_actions)

        return actions

    def _summon_creatures(self, snapshot: 'TurnSnapshot', budget: PlayerState
                          ) -> Tuple[List[Action], List[CardInstance], PlayerState]:
        """Summon hand creatures by descending attack.

        Returns:
            (summon actions, summoned creatures with charge, budget left)
        """
        actions: List[Action] = []
        chargers: List[CardInstance] = []
        board_count = len(snapshot.my_creatures)

        # sorted() is stable, equal attacks keep snapshot order
        candidates = sorted(snapshot.hand_creatures, key=lambda c: c.attack, reverse=True)

        for creature in candidates:
            if not budget.can_afford(creature.cost):
                continue
            if board_count >= self.board_limit:
                continue

            actions.append(Summon(creature.instance_id))
            budget = budget.spend(creature.cost)
            board_count += 1
            if creature.has_charge:
                chargers.append(creature)

        return actions, chargers, budget

    def _attack_guards(self, guards: List[CardInstance],
                       attackers: List[CardInstance]) -> List[Action]:
        """Commit attackers to opponent guards.

        Committed attackers are removed from ``attackers`` in place.
        """
        actions: List[Action] = []
        ordered_guards = sorted(guards, key=lambda g: g.defense, reverse=True)

        for guard in ordered_guards:
            actions.extend(self._attack_creature(guard, attackers))

        return actions

    def _attack_creature(self, target: CardInstance,
                         attackers: List[CardInstance]) -> List[Action]:
        """Throw the strongest remaining attackers at one creature until its
        defense is covered or no attacker is left."""
        actions: List[Action] = []
        remaining_defense = target.defense

        for attacker in sorted(attackers, key=lambda c: c.attack, reverse=True):
            if remaining_defense <= 0:
                break
            actions.append(AttackCreature(attacker.instance_id, target.instance_id))
            remaining_defense -= attacker.attack
            attackers.remove(attacker)

        return actions

    def _attack_face(self, attackers: List[CardInstance]) -> List[Action]:
        return [AttackFace(attacker.instance_id) for attacker in attackers]

    def _use_items(self, snapshot: 'TurnSnapshot',
                   budget: PlayerState) -> Tuple[List[Action], PlayerState]:
        """Use untargeted blue items while mana allows.

        Returns:
            (item actions, budget left)
        """
        actions: List[Action] = []
        for item in snapshot.hand_items:
            if not item.is_blue_item:
                continue
            if not budget.can_afford(item.cost):
                continue
            actions.append(UseItem(item.instance_id))
            budget = budget.spend(item.cost)
        return actions, budget


# =============================================================================
# AGENTS
# =============================================================================

class AIAgent(ABC):
    """Abstract base class for AI agents."""

    @abstractmethod
    def choose_draft_pick(self, snapshot: 'TurnSnapshot') -> PickCard:
        """Choose one card of the draft offer."""
        pass

    @abstractmethod
    def plan_battle(self, snapshot: 'TurnSnapshot') -> List[Action]:
        """Plan the ordered actions for a battle turn."""
        pass


class SimpleAI(AIAgent):
    """Agent built on the greedy draft evaluator and battle planner."""

    def __init__(self, board_limit: int = BOARD_LIMIT):
        self.draft_ai = DraftAI()
        self.battle_ai = BattleAI(board_limit=board_limit)

    @property
    def board_limit(self) -> int:
        return self.battle_ai.board_limit

    @board_limit.setter
    def board_limit(self, value: int):
        self.battle_ai.board_limit = value

    def choose_draft_pick(self, snapshot: 'TurnSnapshot') -> PickCard:
        return self.draft_ai.choose_pick(snapshot.cards)

    def plan_battle(self, snapshot: 'TurnSnapshot') -> List[Action]:
        return self.battle_ai.plan_turn(snapshot)


class RandomAI(AIAgent):
    """AI that makes random decisions within mana and board limits.
    Useful for testing and as a sparring partner."""

    def __init__(self, seed: Optional[int] = None, board_limit: int = BOARD_LIMIT):
        self.rng = random.Random(seed)
        self.board_limit = board_limit

    def choose_draft_pick(self, snapshot: 'TurnSnapshot') -> PickCard:
        if not snapshot.cards:
            raise ValueError("Draft offer is empty")
        return PickCard(self.rng.randrange(len(snapshot.cards)))

    def plan_battle(self, snapshot: 'TurnSnapshot') -> List[Action]:
        """Summon affordable creatures in random order, then attack a random
        guard with each attacker, or the face when no guard is left."""
        actions: List[Action] = []
        budget = snapshot.me
        board_count = len(snapshot.my_creatures)
        attackers = list(snapshot.my_creatures)

        hand = list(snapshot.hand_creatures)
        self.rng.shuffle(hand)
        for creature in hand:
            if budget.can_afford(creature.cost) and board_count < self.board_limit:
                actions.append(Summon(creature.instance_id))
                budget = budget.spend(creature.cost)
                board_count += 1
                if creature.has_charge:
                    attackers.append(creature)

        guards = {g.instance_id: g.defense for g in snapshot.opp_guards}
        for attacker in attackers:
            alive = [gid for gid, defense in guards.items() if defense > 0]
            if alive:
                target = self.rng.choice(alive)
                actions.append(AttackCreature(attacker.instance_id, target))
                guards[target] -= attacker.attack
            else:
                actions.append(AttackFace(attacker.instance_id))

        return actions


__all__ = ['DraftAI', 'BattleAI', 'AIAgent', 'SimpleAI', 'RandomAI']
