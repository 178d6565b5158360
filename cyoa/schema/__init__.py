"""Story content schema - JSON documents, loading and validation."""

from .models import (
    PredicateModel,
    CompareModel,
    CombineModel,
    EffectModel,
    TriggerActionModel,
    ActionConditionModel,
    ActionModel,
    LocationModel,
    StoryModel,
    StoryDocument,
    GameStateModel,
)
from .validation import validate_story, ValidationResult
from .loader import load_story, load_story_file, load_state, dump_state, read_json

__all__ = [
    "PredicateModel",
    "CompareModel",
    "CombineModel",
    "EffectModel",
    "TriggerActionModel",
    "ActionConditionModel",
    "ActionModel",
    "LocationModel",
    "StoryModel",
    "StoryDocument",
    "GameStateModel",
    "validate_story",
    "ValidationResult",
    "load_story",
    "load_story_file",
    "load_state",
    "dump_state",
    "read_json",
]
