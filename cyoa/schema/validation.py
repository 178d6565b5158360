"""
Story Validation - reference checks for loaded story content.

Validates that:
1. Location and action IDs are unique
2. References are valid (offered action IDs, effect target locations,
   the start location)
3. Comparisons name both operands
4. Content is reachable (warnings only)
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine.content import StoryContent, TriggerAction
from ..logic.predicate import Predicate


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]


def validate_story(content: StoryContent) -> ValidationResult:
    """
    Validate a complete story.

    Returns ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []
    story = content.story

    location_ids = _collect_ids(
        [loc.location_id for loc in content.locations], "location", errors
    )
    action_ids = _collect_ids(
        [act.action_id for act in content.actions], "action", errors
    )

    if not story.start_location_id:
        warnings.append("No start location defined")
    elif story.start_location_id not in location_ids:
        errors.append(f"Story start location {story.start_location_id!r} does not exist")

    # Actions and story events may only move to known locations
    for act in content.actions:
        errors.extend(
            f"Action {act.title or act.action_id!r}: {e}"
            for e in _validate_triggers(act.triggers, location_ids)
        )
    errors.extend(
        f"Story events: {e}" for e in _validate_triggers(story.events, location_ids)
    )

    # Locations may only offer known actions
    offered: set[str] = set()
    for loc in content.locations:
        seen: set[str] = set()
        for idx, cand in enumerate(loc.possible_actions):
            if cand.action_id not in action_ids:
                errors.append(
                    f"Location {loc.title or loc.location_id!r} possible action {idx} "
                    f"has bad action ID {cand.action_id!r}"
                )
            if cand.action_id in seen:
                warnings.append(
                    f"Location {loc.title or loc.location_id!r} offers action "
                    f"{cand.action_id!r} more than once; only the first offering is used"
                )
            seen.add(cand.action_id)
            offered.add(cand.action_id)
            errors.extend(
                f"Location {loc.title or loc.location_id!r} possible action {idx}: {e}"
                for e in _validate_predicate(cand.condition)
            )

    for act in content.actions:
        if act.action_id not in offered:
            warnings.append(f"Action {act.title or act.action_id!r} is not offered anywhere")

    reachable = _reachable_locations(content)
    for loc in content.locations:
        if loc.location_id not in reachable:
            warnings.append(f"Location {loc.title or loc.location_id!r} is never reached")

    if not content.locations:
        warnings.append("No locations defined - story may be incomplete")

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _collect_ids(ids: list[str], kind: str, errors: list[str]) -> set[str]:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            errors.append(f"Duplicate {kind} ID {item_id!r}")
        seen.add(item_id)
    return seen


def _validate_triggers(triggers: list[TriggerAction], location_ids: set[str]) -> list[str]:
    """Validate trigger conditions and effect targets."""
    errors = []
    for tidx, trigger in enumerate(triggers):
        errors.extend(f"trigger {tidx}: {e}" for e in _validate_predicate(trigger.condition))
        for eidx, effect in enumerate(trigger.effects):
            if effect.new_location_id and effect.new_location_id not in location_ids:
                errors.append(
                    f"trigger {tidx}/{eidx} has bad location ID {effect.new_location_id!r}"
                )
            if effect.tweak_amount and not effect.tweak_key:
                errors.append(f"trigger {tidx}/{eidx} has a tweak amount but no tweak key")
    return errors


def _validate_predicate(pred: Predicate | None) -> list[str]:
    """Validate predicate structure (not key existence, which is only known at runtime)."""
    if pred is None:
        return []
    errors = []
    if pred.comp is not None:
        if not pred.comp.key_one or not pred.comp.key_two:
            errors.append("comparison is missing an operand key")
    if pred.comb is not None:
        for operand in pred.comb.operands:
            errors.extend(_validate_predicate(operand))
    return errors


def _reachable_locations(content: StoryContent) -> set[str]:
    """Locations that are the start or the target of some effect."""
    reachable = set()
    if content.story.start_location_id:
        reachable.add(content.story.start_location_id)
    all_triggers = list(content.story.events)
    for act in content.actions:
        all_triggers.extend(act.triggers)
    for trigger in all_triggers:
        for effect in trigger.effects:
            if effect.new_location_id:
                reachable.add(effect.new_location_id)
    return reachable
