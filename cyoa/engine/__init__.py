"""
Engine - Deterministic run-state transitions for a story.

The engine is the runtime that:
1. Checks that a chosen action is offered at the current location
2. Runs the action's triggers, then the story's events
3. Applies fired effects to a clone of the run state
4. Lists the actions offered from a run state
"""

from .state import GameState, GameStateLookup, GameEvent, RunState
from .content import (
    Action,
    ActionCondition,
    Effect,
    Location,
    Story,
    StoryContent,
    TriggerAction,
)
from .reducer import Reducer, apply_effect, handle_event
from .action_generator import ActionGenerator, possible_actions, is_legal

__all__ = [
    "GameState",
    "GameStateLookup",
    "GameEvent",
    "RunState",
    "Action",
    "ActionCondition",
    "Effect",
    "Location",
    "Story",
    "StoryContent",
    "TriggerAction",
    "Reducer",
    "apply_effect",
    "handle_event",
    "ActionGenerator",
    "possible_actions",
    "is_legal",
]
