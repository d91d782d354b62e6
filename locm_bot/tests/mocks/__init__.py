"""
Mock builders for LOCM Bot testing.

This package provides small builders for snapshot objects so tests can
describe a board in one line per card.

Modules:
- mock_objects: mock_creature, mock_item, mock_player, mock_snapshot
"""

from .mock_objects import mock_creature, mock_item, mock_player, mock_snapshot

__all__ = [
    'mock_creature',
    'mock_item',
    'mock_player',
    'mock_snapshot',
]
