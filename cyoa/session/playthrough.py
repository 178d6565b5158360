"""
Playthrough - drives one run of a story, turn by turn.

The playthrough:
1. Starts at the story's start location (or resumes a saved state)
2. Lists the actions offered from the current state
3. Performs an action by ID through the reducer
4. Reports what changed and what the player sees next

Playthroughs are in-memory only; saving a state is the caller's job
(see schema.dump_state).
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import uuid

from ..config import EngineConfig, DEFAULT_CONFIG
from ..engine.action_generator import ActionGenerator
from ..engine.content import Action, Location, StoryContent
from ..engine.reducer import Reducer
from ..engine.state import GameEvent, GameState, RunState
from ..errors import LegalityError, SessionError

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """
    Result of performing one action.

    On failure `state` is the unchanged state and `errors` says why.
    """
    success: bool
    state: GameState
    action_id: str | None = None
    changes: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass
class GameDisplay:
    """What the player sees: where they are and what they can do."""
    story_title: str
    location_id: str
    location_title: str
    location_description: str
    run_state: RunState
    values: dict[str, int]
    actions: list[tuple[str, str]] = field(default_factory=list)  # (id, title)


def describe_changes(before: GameState, after: GameState) -> list[str]:
    """Human-readable differences between two states."""
    changes = []
    if before.location_id != after.location_id:
        changes.append(f"Moved from {before.location_id} to {after.location_id}")
    for key in sorted(set(before.values) | set(after.values)):
        old, new = before.values.get(key, 0), after.values.get(key, 0)
        if old != new:
            changes.append(f"{key}: {old} -> {new} ({new - old:+d})")
    if before.run_state != after.run_state:
        changes.append(f"Run state {before.run_state.value} -> {after.run_state.value}")
    return changes


class Playthrough:
    """
    One player's run through a story.

    Usage:
        run = Playthrough.start(content)
        for action_id, title in run.display().actions:
            ...
        result = run.perform(action_id)
    """

    def __init__(
        self,
        content: StoryContent,
        state: GameState,
        config: EngineConfig | None = None,
    ):
        self.content = content
        self.state = state
        self.config = config or DEFAULT_CONFIG
        self.history: list[str] = []
        self._reducer = Reducer(config=self.config)
        self._generator = ActionGenerator(config=self.config)

    @classmethod
    def start(
        cls,
        content: StoryContent,
        config: EngineConfig | None = None,
        playthrough_id: str | None = None,
    ) -> Playthrough:
        """Begin a new run at the story's start location."""
        start_id = content.story.start_location_id
        if not start_id or content.get_location(start_id) is None:
            raise SessionError(
                f"story {content.story.story_id} has no usable start location",
                {"start_location_id": start_id},
            )
        state = GameState(
            location_id=start_id,
            run_state=RunState.ACTIVE,
            playthrough_id=playthrough_id or uuid.uuid4().hex,
        )
        return cls(content, state, config=config)

    @property
    def is_complete(self) -> bool:
        return self.state.is_complete

    @property
    def location(self) -> Location:
        """The location the run state is at."""
        loc = self.content.get_location(self.state.location_id)
        if loc is None:
            raise SessionError(
                f"run state is at unknown location {self.state.location_id}",
                {"story_id": self.content.story.story_id},
            )
        return loc

    def event(self, action: Action | None = None) -> GameEvent:
        """Bundle the current state for the engine."""
        return GameEvent(
            location=self.location,
            state=self.state,
            story=self.content.story,
            action=action,
        )

    def offered_actions(self) -> list[Action]:
        """Actions currently offered, in the location's order."""
        if self.is_complete:
            return []
        actions = []
        for action_id in self._generator.generate(self.event()):
            act = self.content.get_action(action_id)
            if act is None:
                logger.warning("Location %s offers unknown action %s", self.state.location_id, action_id)
                continue
            actions.append(act)
        return actions

    def perform(self, action_id: str) -> TurnResult:
        """
        Perform an action by ID.

        Illegal or unknown actions fail without changing the state.
        """
        if self.is_complete:
            return TurnResult(
                success=False,
                state=self.state,
                action_id=action_id,
                errors=["Playthrough is complete - no actions allowed"],
            )

        act = self.content.get_action(action_id)
        if act is None:
            return TurnResult(
                success=False,
                state=self.state,
                action_id=action_id,
                errors=[f"Unknown action ID {action_id}"],
            )

        try:
            new_state = self._reducer.handle_event(self.event(act))
        except LegalityError as e:
            return TurnResult(success=False, state=self.state, action_id=action_id, errors=[str(e)])

        changes = describe_changes(self.state, new_state)
        logger.info(
            "Playthrough %s: %s (%s) -> %s",
            new_state.playthrough_id, action_id, act.title, "; ".join(changes) or "no change",
        )
        self.state = new_state
        self.history.append(action_id)
        return TurnResult(success=True, state=new_state, action_id=action_id, changes=changes)

    def display(self) -> GameDisplay:
        """Summarize the current state for the player."""
        loc = self.location
        return GameDisplay(
            story_title=self.content.story.title,
            location_id=loc.location_id,
            location_title=loc.title,
            location_description=loc.description,
            run_state=self.state.run_state,
            values=dict(self.state.values),
            actions=[(act.action_id, act.title) for act in self.offered_actions()],
        )
