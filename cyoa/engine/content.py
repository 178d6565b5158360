"""
Story Content - the read-only entities a story is built from.

- Story: story-wide settings and global triggers ("events")
- Location: a place, with the actions offered there
- Action: something the player can do, with its triggers
- TriggerAction: condition + effects + is_final
- Effect: an atomic change to the run state

Content is never mutated by the engine.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..logic.predicate import Predicate
from .state import RunState


@dataclass
class Effect:
    """
    A single change to the run state.

    Every field is optional; an Effect with nothing set is a no-op.
    tweak_amount is added to the value under tweak_key, not assigned.
    """
    new_location_id: str | None = None
    tweak_key: str | None = None
    tweak_amount: int = 0
    new_state: RunState = RunState.UNKNOWN

    @classmethod
    def move_to(cls, location_id: str) -> Effect:
        """Factory for a location change."""
        return cls(new_location_id=location_id)

    @classmethod
    def tweak(cls, key: str, amount: int) -> Effect:
        """Factory for a value adjustment."""
        return cls(tweak_key=key, tweak_amount=amount)

    @classmethod
    def set_state(cls, state: RunState) -> Effect:
        """Factory for a run-state change."""
        return cls(new_state=state)


@dataclass
class TriggerAction:
    """
    A conditional rule: when `condition` holds, apply `effects` in order.

    A fired trigger with is_final set stops the rest of its list.
    """
    effects: list[Effect] = field(default_factory=list)
    condition: Predicate | None = None
    is_final: bool = False


@dataclass
class ActionCondition:
    """An action offered at a location, optionally gated by a predicate."""
    action_id: str
    condition: Predicate | None = None


@dataclass
class Action:
    """Something the player can do. Triggers run in declaration order."""
    action_id: str
    title: str = ""
    description: str = ""
    triggers: list[TriggerAction] = field(default_factory=list)


@dataclass
class Location:
    """A place in the story and the actions offered there."""
    location_id: str
    title: str = ""
    description: str = ""
    possible_actions: list[ActionCondition] = field(default_factory=list)

    def get_condition(self, action_id: str) -> ActionCondition | None:
        """Get the offering for an action, if this location has one."""
        for cand in self.possible_actions:
            if cand.action_id == action_id:
                return cand
        return None


@dataclass
class Story:
    """Story-wide settings. `events` run after every action's triggers."""
    story_id: str
    title: str = ""
    description: str = ""
    start_location_id: str | None = None
    events: list[TriggerAction] = field(default_factory=list)


@dataclass
class StoryContent:
    """A story together with its locations and actions."""
    story: Story
    locations: list[Location] = field(default_factory=list)
    actions: list[Action] = field(default_factory=list)

    def get_location(self, location_id: str) -> Location | None:
        """Get location by ID."""
        for loc in self.locations:
            if loc.location_id == location_id:
                return loc
        return None

    def get_action(self, action_id: str) -> Action | None:
        """Get action by ID."""
        for act in self.actions:
            if act.action_id == action_id:
                return act
        return None
