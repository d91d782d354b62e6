"""LOCM Bot - Card Instances

This module implements CardInstance, the read-only record describing one
card of the current snapshot: where it is, what it is, its stats and its
abilities. Abilities arrive already decoded into an ``Ability`` flag, so
nothing downstream looks at the referee's ability string.
"""

from dataclasses import dataclass

from .types import Ability, CardNumber, CardType, InstanceId, Location, ManaValue


@dataclass(frozen=True, slots=True)
class CardInstance:
    """
    A card in the current turn's snapshot.

    Attributes:
        card_number: Catalogue number of the card
        instance_id: Id unique within the battle, used by every action
        location: Hand, my side of the board or the opponent's side
        card_type: Creature or one of the three item colors
        cost: Mana cost
        attack: Attack value (for items, the attack modifier)
        defense: Defense value (for items, the defense modifier)
        abilities: Ability flags
        my_health_change: Health gained by me when played
        opponent_health_change: Health change applied to the opponent
        card_draw: Extra cards drawn when played
    """
    card_number: CardNumber
    instance_id: InstanceId
    location: Location
    card_type: CardType
    cost: ManaValue
    attack: int
    defense: int
    abilities: Ability = Ability.NONE
    my_health_change: int = 0
    opponent_health_change: int = 0
    card_draw: int = 0

    # -------------------------------------------------------------------------
    # Type and location
    # -------------------------------------------------------------------------

    @property
    def is_creature(self) -> bool:
        return self.card_type is CardType.CREATURE

    @property
    def is_item(self) -> bool:
        return self.card_type.is_item

    @property
    def is_blue_item(self) -> bool:
        return self.card_type is CardType.BLUE_ITEM

    @property
    def in_hand(self) -> bool:
        return self.location is Location.IN_HAND

    @property
    def on_my_side(self) -> bool:
        return self.location is Location.MY_SIDE

    @property
    def on_opponent_side(self) -> bool:
        return self.location is Location.OPPONENT_SIDE

    # -------------------------------------------------------------------------
    # Abilities
    # -------------------------------------------------------------------------

    def has_ability(self, ability: Ability) -> bool:
        return ability in self.abilities

    @property
    def has_breakthrough(self) -> bool:
        return self.has_ability(Ability.BREAKTHROUGH)

    @property
    def has_charge(self) -> bool:
        return self.has_ability(Ability.CHARGE)

    @property
    def has_drain(self) -> bool:
        return self.has_ability(Ability.DRAIN)

    @property
    def has_guard(self) -> bool:
        return self.has_ability(Ability.GUARD)

    @property
    def has_lethal(self) -> bool:
        return self.has_ability(Ability.LETHAL)

    @property
    def has_ward(self) -> bool:
        return self.has_ability(Ability.WARD)

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    @property
    def draft_score(self) -> int:
        """Desirability of the card when offered in the draft."""
        return (self.attack + self.my_health_change
                - self.opponent_health_change - self.cost)

    def __repr__(self) -> str:
        return (f"CardInstance(#{self.instance_id} {self.card_type.name} "
                f"{self.location.name} {self.cost}c {self.attack}/{self.defense})")


__all__ = ['CardInstance']
