"""
Action Generator - Lists the actions offered from a run state.

The action generator is used by:
1. Sessions, to show the player what they can do
2. The CLI `actions` command

Read-only: the run state is never modified.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from ..config import EngineConfig, DEFAULT_CONFIG
from ..errors import CyoaError
from ..logic.evaluator import PredicateEvaluator
from .state import GameEvent, GameStateLookup

logger = logging.getLogger(__name__)


@dataclass
class ActionGenerator:
    """
    Generates the legal action IDs at the event's location.

    A candidate whose condition cannot be evaluated is logged and
    left out; it never affects the other candidates.
    """
    config: EngineConfig = DEFAULT_CONFIG
    evaluator: PredicateEvaluator = field(default_factory=PredicateEvaluator)

    def generate(self, event: GameEvent) -> list[str]:
        """Return offered action IDs, in the location's order."""
        state_lookup = GameStateLookup(
            event.state,
            missing_as_zero=self.config.missing_values_as_zero,
            story_scope=self.config.story_scope,
        )
        story_title = event.story.title if event.story else ""

        actions = []
        for idx, cand in enumerate(event.location.possible_actions):
            try:
                offered = self.evaluator.evaluate(cand.condition, state_lookup)
            except CyoaError as e:
                logger.warning(
                    "Could not evaluate predicate for possible action %d (%s) in story %r: %s",
                    idx, cand.action_id, story_title, e,
                )
                continue
            if offered:
                actions.append(cand.action_id)
        return actions


def possible_actions(event: GameEvent, config: EngineConfig | None = None) -> list[str]:
    """
    Convenience function to get legal action IDs.

    Creates an ActionGenerator and generates actions.
    """
    generator = ActionGenerator(config=config or DEFAULT_CONFIG)
    return generator.generate(event)


def is_legal(event: GameEvent, action_id: str, config: EngineConfig | None = None) -> bool:
    """Check if a specific action is currently offered."""
    return action_id in possible_actions(event, config)
