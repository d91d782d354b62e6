"""Draft and battle decision making"""
from .agent import AIAgent, SimpleAI, RandomAI, DraftAI, BattleAI
