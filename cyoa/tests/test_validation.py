"""
Tests for story validation.
"""

from ..engine.content import (
    Action,
    ActionCondition,
    Effect,
    Location,
    Story,
    StoryContent,
    TriggerAction,
)
from ..logic.predicate import Compare, CompareOp, Predicate
from ..schema import validate_story
from .conftest import ATTACK, OGRE_FIGHT


class TestValidStory:
    """The ogre story is clean."""

    def test_ogre_story(self, ogre_content):
        result = validate_story(ogre_content)
        assert result.valid
        assert result.errors == []
        assert result.warnings == []


class TestReferenceErrors:
    """Broken references are errors."""

    def test_bad_start_location(self, ogre_content):
        ogre_content.story.start_location_id = "loc-nowhere"
        result = validate_story(ogre_content)
        assert not result.valid
        assert any("start location" in e for e in result.errors)

    def test_bad_effect_location(self, ogre_content):
        ogre_content.get_action(ATTACK).triggers[1].effects.append(Effect.move_to("loc-nowhere"))
        result = validate_story(ogre_content)
        assert not result.valid
        assert any("trigger 1/1 has bad location ID 'loc-nowhere'" in e for e in result.errors)

    def test_bad_story_event_location(self, ogre_content):
        ogre_content.story.events.append(TriggerAction(effects=[Effect.move_to("loc-nowhere")]))
        result = validate_story(ogre_content)
        assert any(e.startswith("Story events: trigger 2/0") for e in result.errors)

    def test_bad_possible_action(self, ogre_content):
        ogre_content.get_location(OGRE_FIGHT).possible_actions.append(ActionCondition("act-fly"))
        result = validate_story(ogre_content)
        assert not result.valid
        assert any("possible action 2 has bad action ID 'act-fly'" in e for e in result.errors)

    def test_duplicate_ids(self, ogre_content):
        ogre_content.locations.append(Location(location_id=OGRE_FIGHT))
        ogre_content.actions.append(Action(action_id=ATTACK))
        result = validate_story(ogre_content)
        assert f"Duplicate location ID {OGRE_FIGHT!r}" in result.errors
        assert f"Duplicate action ID {ATTACK!r}" in result.errors

    def test_tweak_amount_without_key(self, ogre_content):
        ogre_content.story.events.append(TriggerAction(effects=[Effect(tweak_amount=3)]))
        result = validate_story(ogre_content)
        assert any("tweak amount but no tweak key" in e for e in result.errors)

    def test_comparison_missing_operand(self, ogre_content):
        nested = Predicate.all_of(Predicate(comp=Compare(key_one="", key_two="1", operation=CompareOp.EQ)))
        ogre_content.get_location(OGRE_FIGHT).possible_actions[0].condition = nested
        result = validate_story(ogre_content)
        assert any("missing an operand key" in e for e in result.errors)


class TestWarnings:
    """Suspicious but playable content produces warnings."""

    def test_no_start_location(self, ogre_content):
        ogre_content.story.start_location_id = None
        result = validate_story(ogre_content)
        assert result.valid
        assert "No start location defined" in result.warnings

    def test_unoffered_action(self, ogre_content):
        ogre_content.actions.append(Action(action_id="act-dance", title="Dance"))
        result = validate_story(ogre_content)
        assert result.valid
        assert any("'Dance' is not offered anywhere" in w for w in result.warnings)

    def test_unreachable_location(self, ogre_content):
        ogre_content.locations.append(Location(location_id="loc-island", title="Island"))
        result = validate_story(ogre_content)
        assert result.valid
        assert any("'Island' is never reached" in w for w in result.warnings)

    def test_duplicate_offering(self, ogre_content):
        ogre_content.get_location(OGRE_FIGHT).possible_actions.append(ActionCondition(ATTACK))
        result = validate_story(ogre_content)
        assert result.valid
        assert any("more than once" in w for w in result.warnings)

    def test_empty_story(self):
        result = validate_story(StoryContent(story=Story(story_id="s")))
        assert result.valid
        assert any("No locations" in w for w in result.warnings)
