"""
Game State - the run-state snapshot of one playthrough.

Design principles:
- Clone-then-modify: the reducer never mutates the caller's snapshot
- Serializable: plain fields, round-trips through the schema models
- Lookup-friendly: values are exposed to predicates via GameStateLookup
"""

from __future__ import annotations
from dataclasses import dataclass, field
from copy import deepcopy
from enum import Enum
from typing import TYPE_CHECKING

from ..errors import UnknownKeyError
from ..logic.lookup import Scoper

if TYPE_CHECKING:
    from .content import Action, Location, Story


class RunState(Enum):
    """Completion status of a playthrough. UNKNOWN doubles as "unspecified"."""
    UNKNOWN = "unknown"
    ACTIVE = "active"
    COMPLETE = "complete"


@dataclass
class GameState:
    """
    Run state at a point in time.

    This is the only mutable entity the engine works on, and it only
    ever mutates its own clones.
    """
    location_id: str
    values: dict[str, int] = field(default_factory=dict)
    run_state: RunState = RunState.UNKNOWN

    # Diagnostics only
    playthrough_id: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.run_state == RunState.COMPLETE

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)


class GameStateLookup(Scoper):
    """
    Exposes a GameState's values to predicates.

    Only integers are supported. The story context is reachable as a
    scope (named "story" by default); stories keep no variables of
    their own yet, so that scope is the run state itself.
    """

    def __init__(
        self,
        state: GameState,
        missing_as_zero: bool = False,
        story_scope: str = "story",
    ):
        super().__init__()
        self.state = state
        self.missing_as_zero = missing_as_zero
        self.set_scope(story_scope, self)

    def get_int(self, key: str) -> int:
        if key in self.state.values:
            return self.state.values[key]
        if self.missing_as_zero:
            return 0
        raise UnknownKeyError(key, "integer")


@dataclass
class GameEvent:
    """
    Everything the reducer needs for one step.

    `action` is None for a pure status query.
    """
    location: Location
    state: GameState
    story: Story | None = None
    action: Action | None = None
