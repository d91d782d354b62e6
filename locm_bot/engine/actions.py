"""LOCM Bot - Actions

The closed set of decisions the bot can send back to the referee. Each
variant is a frozen dataclass carrying only the ids its protocol line
needs, and ``str()`` renders that line:

    PASS
    PICK <index>
    SUMMON <id>
    ATTACK <attacker> <target>      (target -1 for the opponent's face)
    USE <item> <target>             (target -1 for untargeted items)

A battle turn is an ordered list of actions joined by ``;``.
"""
from dataclasses import dataclass
from typing import Iterable, Union

from .types import InstanceId, NO_TARGET


@dataclass(frozen=True, slots=True)
class Pass:
    """Do nothing this turn."""

    def __str__(self) -> str:
        return "PASS"


@dataclass(frozen=True, slots=True)
class PickCard:
    """Draft the card at ``index`` (0-based) of the offer."""
    index: int

    def __str__(self) -> str:
        return f"PICK {self.index}"


@dataclass(frozen=True, slots=True)
class Summon:
    """Play a creature from hand onto my side of the board."""
    creature_id: InstanceId

    def __str__(self) -> str:
        return f"SUMMON {self.creature_id}"


@dataclass(frozen=True, slots=True)
class AttackCreature:
    """Attack an opponent creature."""
    attacker_id: InstanceId
    target_id: InstanceId

    def __str__(self) -> str:
        return f"ATTACK {self.attacker_id} {self.target_id}"


@dataclass(frozen=True, slots=True)
class AttackFace:
    """Attack the opponent directly."""
    attacker_id: InstanceId

    def __str__(self) -> str:
        return f"ATTACK {self.attacker_id} {NO_TARGET}"


@dataclass(frozen=True, slots=True)
class UseItem:
    """Use an item that needs no target."""
    item_id: InstanceId

    def __str__(self) -> str:
        return f"USE {self.item_id} {NO_TARGET}"


@dataclass(frozen=True, slots=True)
class UseItemOnCreature:
    """Use an item on a creature."""
    item_id: InstanceId
    target_id: InstanceId

    def __str__(self) -> str:
        return f"USE {self.item_id} {self.target_id}"


Action = Union[Pass, PickCard, Summon, AttackCreature, AttackFace,
               UseItem, UseItemOnCreature]

# Variants whose first id is the attacking creature
ATTACK_ACTIONS = (AttackCreature, AttackFace)


def format_actions(actions: Iterable[Action]) -> str:
    """
    Render a turn's actions as one protocol line.

    Args:
        actions: Actions in execution order

    Returns:
        The actions joined by ``;``, or ``PASS`` when there are none
    """
    line = ";".join(str(action) for action in actions)
    return line or str(Pass())


__all__ = [
    'Action', 'Pass', 'PickCard', 'Summon', 'AttackCreature', 'AttackFace',
    'UseItem', 'UseItemOnCreature', 'ATTACK_ACTIONS', 'format_actions',
]
