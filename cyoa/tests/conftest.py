"""
Pytest fixtures for cyoa tests.

The ogre story: pick a Fighter (+5 Strength) or a Rogue (+5 Dexterity),
then attack the ogre or sneak past it. Winning sets ogre_defeated,
losing sets player_killed; either completes the story.
"""

import pytest

from ..engine.content import (
    Action,
    ActionCondition,
    Effect,
    Location,
    Story,
    StoryContent,
    TriggerAction,
)
from ..engine.state import GameState, RunState
from ..logic.lookup import MemoryLookup
from ..logic.predicate import CompareOp, Predicate

CHOOSE_CHAR = "loc-choose-character"
OGRE_FIGHT = "loc-ogre-encounter"

FIGHTER = "act-fighter"
ROGUE = "act-rogue"
ATTACK = "act-attack"
SNEAK = "act-sneak"


def _ogre_action(action_id: str, title: str, stat: str) -> Action:
    return Action(
        action_id=action_id,
        title=title,
        triggers=[
            TriggerAction(
                condition=Predicate.compare(stat, CompareOp.GT, "3"),
                effects=[Effect.tweak("ogre_defeated", 1)],
                is_final=True,
            ),
            TriggerAction(effects=[Effect.tweak("player_killed", 1)]),
        ],
    )


@pytest.fixture
def defaults() -> MemoryLookup:
    """A lookup with a few of each kind of value."""
    return (
        MemoryLookup()
        .with_int("one", 1)
        .with_int("en", 1)
        .with_int("two", 2)
        .with_str("string1", "yohoho")
        .with_str("string2", "yohoho")
        .with_str("string3", "bwahaha")
        .with_str_array("strarr1", ["yohoho", "bwahaha"])
    )


@pytest.fixture
def ogre_content() -> StoryContent:
    """The fighter/rogue/ogre story as engine entities."""
    fighter = Action(
        action_id=FIGHTER,
        title="Fighter",
        description="A mighty warrior!",
        triggers=[TriggerAction(effects=[
            Effect(new_location_id=OGRE_FIGHT, tweak_key="Strength", tweak_amount=5),
        ])],
    )
    rogue = Action(
        action_id=ROGUE,
        title="Rogue",
        description="A cunning thief!",
        triggers=[TriggerAction(effects=[
            Effect(new_location_id=OGRE_FIGHT, tweak_key="Dexterity", tweak_amount=5),
        ])],
    )
    attack = _ogre_action(ATTACK, "Attack!", "Strength")
    sneak = _ogre_action(SNEAK, "Slow and sneaky wins the race...", "Dexterity")

    choose_char = Location(
        location_id=CHOOSE_CHAR,
        title="Choose Character",
        description="Choose which character to play as.",
        possible_actions=[ActionCondition(FIGHTER), ActionCondition(ROGUE)],
    )
    ogre_fight = Location(
        location_id=OGRE_FIGHT,
        title="Ogre Encounter",
        description="Either fight the ogre or attempt to sneak past it.",
        possible_actions=[ActionCondition(ATTACK), ActionCondition(SNEAK)],
    )

    story = Story(
        story_id="story-ogre",
        title="E2E test story",
        description="Story for end-to-end testing",
        start_location_id=CHOOSE_CHAR,
        events=[
            TriggerAction(
                condition=Predicate.compare("ogre_defeated", CompareOp.GT, "0"),
                effects=[Effect.set_state(RunState.COMPLETE)],
            ),
            TriggerAction(
                condition=Predicate.compare("player_killed", CompareOp.GT, "0"),
                effects=[Effect.set_state(RunState.COMPLETE)],
            ),
        ],
    )
    return StoryContent(
        story=story,
        locations=[choose_char, ogre_fight],
        actions=[fighter, rogue, attack, sneak],
    )


@pytest.fixture
def ogre_state() -> GameState:
    """A run state standing in front of the ogre."""
    return GameState(location_id=OGRE_FIGHT, run_state=RunState.ACTIVE, playthrough_id="pt-1")


@pytest.fixture
def ogre_document() -> dict:
    """The ogre story as a JSON document."""
    def ogre_triggers(stat):
        return [
            {
                "condition": {"comp": {"key_one": stat, "key_two": "3", "operation": "CMP_GT"}},
                "effects": [{"tweak_key": "ogre_defeated", "tweak_amount": 1}],
                "is_final": True,
            },
            {"effects": [{"tweak_key": "player_killed", "tweak_amount": 1}]},
        ]

    def completes_when(key):
        return {
            "condition": {"comp": {"key_one": key, "key_two": "0", "operation": "GT"}},
            "effects": [{"new_state": "RS_COMPLETE"}],
        }

    return {
        "story": {
            "id": "story-ogre",
            "title": "E2E test story",
            "description": "Story for end-to-end testing",
            "start_location_id": CHOOSE_CHAR,
            "events": [completes_when("ogre_defeated"), completes_when("player_killed")],
        },
        "locations": [
            {
                "id": CHOOSE_CHAR,
                "title": "Choose Character",
                "possible_actions": [{"action_id": FIGHTER}, {"action_id": ROGUE}],
            },
            {
                "id": OGRE_FIGHT,
                "title": "Ogre Encounter",
                "possible_actions": [{"action_id": ATTACK}, {"action_id": SNEAK}],
            },
        ],
        "actions": [
            {
                "id": FIGHTER,
                "title": "Fighter",
                "triggers": [{"effects": [
                    {"new_location_id": OGRE_FIGHT, "tweak_key": "Strength", "tweak_amount": 5},
                ]}],
            },
            {
                "id": ROGUE,
                "title": "Rogue",
                "triggers": [{"effects": [
                    {"new_location_id": OGRE_FIGHT, "tweak_key": "Dexterity", "tweak_amount": 5},
                ]}],
            },
            {"id": ATTACK, "title": "Attack!", "triggers": ogre_triggers("Strength")},
            {"id": SNEAK, "title": "Slow and sneaky wins the race...", "triggers": ogre_triggers("Dexterity")},
        ],
    }
