"""LOCM Bot - Player State

This module implements the per-turn PlayerState snapshot. A PlayerState is
built fresh from the referee's input every turn and never mutated; the
battle planner simulates mana spend on copies made with ``spend``.
"""

from dataclasses import dataclass, replace

from .types import Health, ManaValue


@dataclass(frozen=True, slots=True)
class PlayerState:
    """A player's resources for the current turn.

    Attributes:
        health: Remaining health
        mana: Mana available this turn (0 during the draft)
        deck_size: Cards left in the player's deck
        rune_count: Runes left; losing one draws an extra card
    """

    health: Health
    mana: ManaValue
    deck_size: int
    rune_count: int

    def can_afford(self, cost: ManaValue) -> bool:
        """Check if a card of the given cost fits in this turn's mana.

        Args:
            cost: The card's mana cost

        Returns:
            True if the cost does not exceed the available mana
        """
        return cost <= self.mana

    def spend(self, cost: ManaValue) -> 'PlayerState':
        """Return a copy of this state with ``cost`` mana spent."""
        return replace(self, mana=self.mana - cost)

    def __str__(self) -> str:
        return (f"hp={self.health} mana={self.mana} "
                f"deck={self.deck_size} runes={self.rune_count}")


__all__ = ['PlayerState']
