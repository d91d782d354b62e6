"""Referee protocol parsing"""
from .parser import TurnReader, parse_turn, parse_card, parse_player, parse_abilities
