"""LOCM Bot - Turn Parser

This module turns the referee's per-turn text into a TurnSnapshot.

Turn format:
    <health> <mana> <deck> <rune>           (me)
    <health> <mana> <deck> <rune>           (opponent)
    <opponentHand>
    <cardCount>
    <cardNumber> <instanceId> <location> <cardType> <cost> <attack> <defense>
        <abilities> <myHealthChange> <opponentHealthChange> <cardDraw>
    ... one line per card

The abilities field is six characters, one per ability in ``BCDGLW``
order, with ``-`` where the card lacks that ability (e.g. ``-C-G--``).
It is decoded into an Ability flag here, once.
"""
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from ..engine.game import TurnSnapshot
from ..engine.objects import CardInstance
from ..engine.player import PlayerState
from ..engine.types import Ability, CardType, Location


PLAYER_FIELDS = 4
CARD_FIELDS = 11
ABILITY_PLACEHOLDER = '-'


# =============================================================================
# Field Parsers
# =============================================================================

def _split(line: str, expected: int, what: str) -> List[str]:
    tokens = line.split()
    if len(tokens) != expected:
        raise ValueError(
            f"Expected {expected} fields for {what}, got {len(tokens)}: {line!r}")
    return tokens


def _to_int(token: str, line: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Not an integer: {token!r} in {line!r}") from None


def parse_abilities(text: str) -> Ability:
    """
    Decode an ability string such as ``BC-G--``.

    Args:
        text: Six characters in ``BCDGLW`` order, ``-`` for absent

    Returns:
        The combined Ability flag

    Raises:
        ValueError: If the string has the wrong length or a letter sits
            in the wrong position
    """
    ordered = Ability.ordered()
    if len(text) != len(ordered):
        raise ValueError(f"Ability string must have {len(ordered)} characters: {text!r}")

    abilities = Ability.NONE
    for char, ability in zip(text, ordered):
        if char == ability.letter:
            abilities |= ability
        elif char != ABILITY_PLACEHOLDER:
            raise ValueError(
                f"Unexpected {char!r} in ability string {text!r}, "
                f"expected {ability.letter!r} or {ABILITY_PLACEHOLDER!r}")
    return abilities


def parse_player(line: str) -> PlayerState:
    """
    Parse a player line: ``<health> <mana> <deck> <rune>``.

    Raises:
        ValueError: On a wrong field count or a non-integer field
    """
    tokens = _split(line, PLAYER_FIELDS, "a player")
    health, mana, deck, rune = (_to_int(t, line) for t in tokens)
    return PlayerState(health=health, mana=mana, deck_size=deck, rune_count=rune)


def parse_card(line: str) -> CardInstance:
    """
    Parse one card line.

    Raises:
        ValueError: On a wrong field count, a non-integer field, an unknown
            location or card type code, or a bad ability string
    """
    tokens = _split(line, CARD_FIELDS, "a card")
    abilities = parse_abilities(tokens[7])
    values = [_to_int(t, line) for i, t in enumerate(tokens) if i != 7]
    (card_number, instance_id, location, card_type, cost, attack, defense,
     my_health_change, opponent_health_change, card_draw) = values

    try:
        location = Location(location)
    except ValueError:
        raise ValueError(f"Unknown location code {location} in {line!r}") from None
    try:
        card_type = CardType(card_type)
    except ValueError:
        raise ValueError(f"Unknown card type code {card_type} in {line!r}") from None

    return CardInstance(
        card_number=card_number,
        instance_id=instance_id,
        location=location,
        card_type=card_type,
        cost=cost,
        attack=attack,
        defense=defense,
        abilities=abilities,
        my_health_change=my_health_change,
        opponent_health_change=opponent_health_change,
        card_draw=card_draw,
    )


# =============================================================================
# Turn Reader
# =============================================================================

class TurnReader:
    """
    Reads whole turns from a stream of lines.

    Blank lines between turns are skipped. Every line consumed is passed
    to ``on_line`` if given, which the runner uses to echo raw input.

    Usage:
        reader = TurnReader(sys.stdin)
        for snapshot in reader:
            ...
    """

    def __init__(self, lines: Iterable[str],
                 on_line: Optional[Callable[[str], None]] = None):
        self._lines: Iterator[str] = iter(lines)
        self._on_line = on_line
        self.turns_read = 0

    def __iter__(self) -> Iterator[TurnSnapshot]:
        while True:
            snapshot = self.read_turn()
            if snapshot is None:
                return
            yield snapshot

    def read_turn(self) -> Optional[TurnSnapshot]:
        """
        Read the next turn.

        Returns:
            The snapshot, or None if the input ended before a new turn

        Raises:
            ValueError: If the turn is malformed or the input ends mid-turn
        """
        first = self._next_line(required=False)
        if first is None:
            return None

        me = parse_player(first)
        opponent = parse_player(self._next_line())
        hand_line = self._next_line()
        opponent_hand = _to_int(hand_line, hand_line)

        count_line = self._next_line()
        card_count = _to_int(count_line, count_line)
        if card_count < 0:
            raise ValueError(f"Negative card count: {card_count}")

        cards = tuple(parse_card(self._next_line()) for _ in range(card_count))
        # Draft offers carry placeholder ids
        if me.mana > 0:
            self._check_unique_ids(cards)

        self.turns_read += 1
        return TurnSnapshot(
            me=me,
            opponent=opponent,
            cards=cards,
            opponent_hand_count=opponent_hand,
        )

    def _next_line(self, required: bool = True) -> Optional[str]:
        for raw in self._lines:
            line = raw.strip()
            if not line:
                continue
            if self._on_line:
                self._on_line(line)
            return line
        if required:
            raise ValueError(f"Input ended in the middle of turn {self.turns_read + 1}")
        return None

    @staticmethod
    def _check_unique_ids(cards: Tuple[CardInstance, ...]) -> None:
        seen = set()
        for card in cards:
            if card.instance_id in seen:
                raise ValueError(f"Duplicate instance id {card.instance_id}")
            seen.add(card.instance_id)


def parse_turn(text: str) -> TurnSnapshot:
    """
    Parse a single turn from text.

    Convenience wrapper around TurnReader for tests and tooling.

    Raises:
        ValueError: If the text holds no turn or a malformed one
    """
    snapshot = TurnReader(text.splitlines()).read_turn()
    if snapshot is None:
        raise ValueError("No turn in input")
    return snapshot


__all__ = [
    'parse_abilities',
    'parse_player',
    'parse_card',
    'TurnReader',
    'parse_turn',
]
