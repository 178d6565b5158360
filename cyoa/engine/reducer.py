"""
Reducer - Applies a player's action to the run state.

The reducer is the single point of state mutation.
All state changes go through handle_event().

Design principles:
- Pure function: event -> new state; the input snapshot is cloned first
- Validates before applying (location, offered action, offering condition)
- Action triggers run first, then story events, each in declaration order
- A fired final trigger stops its own list only
- A broken trigger condition is logged and the trigger skipped;
  a broken offering condition fails the whole call
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from ..config import EngineConfig, DEFAULT_CONFIG
from ..errors import (
    ActionNotOfferedError,
    ConditionFailedError,
    ConditionUnevaluableError,
    CyoaError,
    LocationMismatchError,
)
from ..logic.evaluator import PredicateEvaluator
from .content import Action, Effect, Location, Story, TriggerAction
from .state import GameEvent, GameState, GameStateLookup, RunState

logger = logging.getLogger(__name__)


def apply_effect(effect: Effect, state: GameState) -> None:
    """
    Apply one effect to a state, in place.

    Only call this on a state the caller owns (a clone).
    """
    if effect.new_location_id:
        state.location_id = effect.new_location_id
    if effect.tweak_key and effect.tweak_amount != 0:
        state.values[effect.tweak_key] = state.values.get(effect.tweak_key, 0) + effect.tweak_amount
    if effect.new_state != RunState.UNKNOWN:
        state.run_state = effect.new_state


@dataclass
class Reducer:
    """
    Reducer applies events to run state.

    Stateless - all state is in the GameState.
    Config decides how the run state is exposed to predicates.
    """
    config: EngineConfig = DEFAULT_CONFIG
    evaluator: PredicateEvaluator = field(default_factory=PredicateEvaluator)

    def lookup_for(self, state: GameState) -> GameStateLookup:
        """Wrap a state for predicate evaluation."""
        return GameStateLookup(
            state,
            missing_as_zero=self.config.missing_values_as_zero,
            story_scope=self.config.story_scope,
        )

    def handle_event(self, event: GameEvent) -> GameState:
        """
        Apply the event's action and the story's events.

        Returns a new GameState; event.state is left untouched.

        Raises:
            LocationMismatchError: state is not at event.location
            ActionNotOfferedError: action is not offered at the location
            ConditionFailedError: the offering condition is false
            ConditionUnevaluableError: the offering condition raised
        """
        game = event.state.clone()
        act, loc, story = event.action, event.location, event.story
        context = _identify(act, loc, story)

        if game.location_id != loc.location_id:
            raise LocationMismatchError(
                f"cannot apply action to location {loc.location_id} ({loc.title}) "
                f"when current location is {game.location_id}",
                context,
            )

        state_lookup = self.lookup_for(game)
        if act is not None:
            self._check_allowed(act, loc, state_lookup, context)
            self._run_triggers(act.triggers, game, state_lookup, f"action {act.action_id}")

        if story is not None:
            self._run_triggers(story.events, game, state_lookup, f"story {story.story_id}")

        return game

    def _check_allowed(
        self, act: Action, loc: Location, state_lookup: GameStateLookup, context: dict
    ) -> None:
        """Raise unless the action is offered at the location right now."""
        cand = loc.get_condition(act.action_id)
        if cand is None:
            raise ActionNotOfferedError(
                f"action ID {act.action_id} not in possible-actions list "
                f"of location {loc.location_id} ({loc.title})",
                context,
            )
        try:
            ok = self.evaluator.evaluate(cand.condition, state_lookup)
        except CyoaError as e:
            raise ConditionUnevaluableError(
                f"action {act.action_id} ({act.title}) not available: "
                f"could not evaluate condition: {e}",
                context,
            ) from e
        if not ok:
            raise ConditionFailedError(
                f"action {act.action_id} ({act.title}) not available: condition fails",
                context,
            )

    def _run_triggers(
        self,
        triggers: list[TriggerAction],
        game: GameState,
        state_lookup: GameStateLookup,
        owner: str,
    ) -> None:
        """Fire triggers in order, stopping after a fired final trigger."""
        for idx, trigger in enumerate(triggers):
            try:
                fired = self.evaluator.evaluate(trigger.condition, state_lookup)
            except CyoaError as e:
                logger.warning(
                    "Could not evaluate predicate for trigger %d of %s in playthrough %s: %s",
                    idx, owner, game.playthrough_id, e,
                )
                continue
            if not fired:
                continue

            logger.debug("Trigger %d of %s fired", idx, owner)
            for effect in trigger.effects:
                apply_effect(effect, game)
            if trigger.is_final:
                break


def _identify(act: Action | None, loc: Location, story: Story | None) -> dict:
    context = {"location_id": loc.location_id}
    if act is not None:
        context["action_id"] = act.action_id
    if story is not None:
        context["story_id"] = story.story_id
    return context


def handle_event(event: GameEvent, config: EngineConfig | None = None) -> GameState:
    """
    Convenience function to handle an event.

    Creates a Reducer and applies the event.
    """
    reducer = Reducer(config=config or DEFAULT_CONFIG)
    return reducer.handle_event(event)
