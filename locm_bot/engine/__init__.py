"""Core engine components - lazy imports to avoid circular dependencies"""

# Core types can be imported directly
from .types import Location, CardType, Ability, BOARD_LIMIT, NO_TARGET


# Other imports are lazy to avoid circular dependencies
def __getattr__(name):
    """Lazy import for engine components."""
    if name == 'PlayerState':
        from .player import PlayerState
        return PlayerState
    elif name == 'CardInstance':
        from .objects import CardInstance
        return CardInstance
    elif name in ('Bot', 'BotConfig', 'TurnSnapshot'):
        from . import game
        return getattr(game, name)
    elif name in ('Action', 'Pass', 'PickCard', 'Summon', 'AttackCreature',
                  'AttackFace', 'UseItem', 'UseItemOnCreature', 'format_actions'):
        from . import actions
        return getattr(actions, name)
    raise AttributeError(f"module 'engine' has no attribute {name!r}")
