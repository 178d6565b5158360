"""
Session Module - in-memory playthroughs of a story.

A playthrough holds one run state and applies actions to it through
the engine. Nothing is persisted; callers save states themselves.
"""

from .playthrough import Playthrough, TurnResult, GameDisplay, describe_changes

__all__ = [
    "Playthrough",
    "TurnResult",
    "GameDisplay",
    "describe_changes",
]
