"""LOCM Bot - Draft and Battle Decision Engine"""
from .engine.game import Bot, BotConfig, TurnSnapshot
from .engine.actions import format_actions
from .ai.agent import SimpleAI, RandomAI
from .cards.parser import TurnReader, parse_turn

__version__ = "1.0.0"
__all__ = ["Bot", "BotConfig", "TurnSnapshot", "format_actions",
           "SimpleAI", "RandomAI", "TurnReader", "parse_turn"]
