"""LOCM Bot - Core Types and Enumerations

This module defines the fundamental types, enumerations, and type aliases
shared by the snapshot model, the protocol parser and the AI. The numeric
values of the enums are the codes used on the wire.
"""
from enum import Enum, Flag, auto


# =============================================================================
# Type Aliases
# =============================================================================

InstanceId = int
CardNumber = int
ManaValue = int
Health = int


# =============================================================================
# Constants
# =============================================================================

# Maximum number of creatures a player may have on their side of the board
BOARD_LIMIT = 6

# Target id used by the protocol when an attack or item aims at no creature
NO_TARGET = -1


# =============================================================================
# Card Location and Type
# =============================================================================

class Location(Enum):
    """
    Where a card sits in the current snapshot.

    Values match the location codes sent by the referee.
    """
    IN_HAND = 0
    MY_SIDE = 1
    OPPONENT_SIDE = -1


class CardType(Enum):
    """Card types as sent by the referee."""
    CREATURE = 0
    GREEN_ITEM = 1
    RED_ITEM = 2
    BLUE_ITEM = 3

    @property
    def is_item(self) -> bool:
        """Returns True for the three item colors."""
        return self is not CardType.CREATURE


# =============================================================================
# Abilities
# =============================================================================

class Ability(Flag):
    """
    Creature abilities.

    Uses Flag so a card's abilities combine into a single value,
    e.g. ``Ability.CHARGE | Ability.GUARD``.
    """
    NONE = 0
    BREAKTHROUGH = auto()
    CHARGE = auto()
    DRAIN = auto()
    GUARD = auto()
    LETHAL = auto()
    WARD = auto()

    @classmethod
    def ordered(cls) -> "tuple":
        """Abilities in the order the referee encodes them (``BCDGLW``)."""
        return (cls.BREAKTHROUGH, cls.CHARGE, cls.DRAIN,
                cls.GUARD, cls.LETHAL, cls.WARD)

    @property
    def letter(self) -> str:
        """Single-letter code of a single ability."""
        return self.name[0]


__all__ = [
    'InstanceId', 'CardNumber', 'ManaValue', 'Health',
    'BOARD_LIMIT', 'NO_TARGET',
    'Location', 'CardType', 'Ability',
]
