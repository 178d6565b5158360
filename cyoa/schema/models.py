"""
Pydantic Schemas for story content and run state.

These models define the JSON shape stories are authored and stored in,
and convert to and from the engine's dataclasses.

Enum fields accept member names in any case, with or without the
legacy prefixes (CMP_GT, IF_ALL, RS_COMPLETE), as well as the
lower-case values the models dump.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

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
from ..logic.predicate import Combine, CombineOp, Compare, CompareOp, Predicate

_ENUM_PREFIXES = ("CMP_", "IF_", "RS_")


def _coerce_enum(enum_cls: type[Enum], raw: Any) -> Any:
    """Map a name or value string onto an enum member; leave others to pydantic."""
    if not isinstance(raw, str):
        return raw
    name = raw.strip().upper()
    for prefix in _ENUM_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
            break
    if name in enum_cls.__members__:
        return enum_cls[name]
    return raw


# =============================================================================
# Predicates
# =============================================================================

class CompareModel(BaseModel):
    """A comparison between two key expressions."""
    key_one: str
    key_two: str
    operation: CompareOp = Field(description="GT, LT, EQ, GTE, LTE, NEQ, STREQ, STRIN")

    model_config = {"extra": "forbid"}

    @field_validator("operation", mode="before")
    @classmethod
    def parse_operation(cls, v):
        return _coerce_enum(CompareOp, v)


class CombineModel(BaseModel):
    """A logical combination of sub-predicates."""
    operation: CombineOp = Field(description="ALL, ANY, NONE")
    operands: list[PredicateModel] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @field_validator("operation", mode="before")
    @classmethod
    def parse_operation(cls, v):
        return _coerce_enum(CombineOp, v)


class PredicateModel(BaseModel):
    """Either `comp` or `comb`; neither means always true."""
    comp: Optional[CompareModel] = None
    comb: Optional[CombineModel] = None

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def check_single_variant(self):
        if self.comp is not None and self.comb is not None:
            raise ValueError("predicate has both comp and comb set")
        return self

    def to_domain(self) -> Predicate:
        if self.comp is not None:
            return Predicate(comp=Compare(
                key_one=self.comp.key_one,
                key_two=self.comp.key_two,
                operation=self.comp.operation,
            ))
        if self.comb is not None:
            return Predicate(comb=Combine(
                operation=self.comb.operation,
                operands=[p.to_domain() for p in self.comb.operands],
            ))
        return Predicate()


CombineModel.model_rebuild()
PredicateModel.model_rebuild()


def _predicate(model: PredicateModel | None) -> Predicate | None:
    return model.to_domain() if model is not None else None


# =============================================================================
# Triggers and Effects
# =============================================================================

class EffectModel(BaseModel):
    """A single change to the run state."""
    new_location_id: Optional[str] = None
    tweak_key: Optional[str] = None
    tweak_amount: int = 0
    new_state: RunState = RunState.UNKNOWN

    model_config = {"extra": "forbid"}

    @field_validator("new_state", mode="before")
    @classmethod
    def parse_state(cls, v):
        return _coerce_enum(RunState, v)

    def to_domain(self) -> Effect:
        return Effect(
            new_location_id=self.new_location_id,
            tweak_key=self.tweak_key,
            tweak_amount=self.tweak_amount,
            new_state=self.new_state,
        )


class TriggerActionModel(BaseModel):
    """Conditional effects; is_final stops the rest of the list when fired."""
    condition: Optional[PredicateModel] = None
    effects: list[EffectModel] = Field(default_factory=list)
    is_final: bool = False

    model_config = {"extra": "forbid"}

    def to_domain(self) -> TriggerAction:
        return TriggerAction(
            condition=_predicate(self.condition),
            effects=[e.to_domain() for e in self.effects],
            is_final=self.is_final,
        )


# =============================================================================
# Content
# =============================================================================

class ActionConditionModel(BaseModel):
    """An action offered at a location."""
    action_id: str
    condition: Optional[PredicateModel] = None

    model_config = {"extra": "forbid"}


class ActionModel(BaseModel):
    """Something the player can do."""
    id: str = Field(min_length=1)
    title: str = ""
    description: str = ""
    triggers: list[TriggerActionModel] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    def to_domain(self) -> Action:
        return Action(
            action_id=self.id,
            title=self.title,
            description=self.description,
            triggers=[t.to_domain() for t in self.triggers],
        )


class LocationModel(BaseModel):
    """A place in the story."""
    id: str = Field(min_length=1)
    title: str = ""
    description: str = ""
    possible_actions: list[ActionConditionModel] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    def to_domain(self) -> Location:
        return Location(
            location_id=self.id,
            title=self.title,
            description=self.description,
            possible_actions=[
                ActionCondition(action_id=c.action_id, condition=_predicate(c.condition))
                for c in self.possible_actions
            ],
        )


class StoryModel(BaseModel):
    """Story-wide settings and events."""
    id: str = Field(min_length=1)
    title: str = ""
    description: str = ""
    start_location_id: Optional[str] = None
    events: list[TriggerActionModel] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    def to_domain(self) -> Story:
        return Story(
            story_id=self.id,
            title=self.title,
            description=self.description,
            start_location_id=self.start_location_id,
            events=[t.to_domain() for t in self.events],
        )


class StoryDocument(BaseModel):
    """A complete story file: the story plus its locations and actions."""
    story: StoryModel
    locations: list[LocationModel] = Field(default_factory=list)
    actions: list[ActionModel] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    def to_domain(self) -> StoryContent:
        return StoryContent(
            story=self.story.to_domain(),
            locations=[loc.to_domain() for loc in self.locations],
            actions=[act.to_domain() for act in self.actions],
        )


# =============================================================================
# Run State
# =============================================================================

class GameStateModel(BaseModel):
    """A run-state snapshot."""
    location_id: str
    values: dict[str, int] = Field(default_factory=dict)
    run_state: RunState = RunState.UNKNOWN
    playthrough_id: Optional[str] = None

    model_config = {"extra": "forbid"}

    @field_validator("run_state", mode="before")
    @classmethod
    def parse_state(cls, v):
        return _coerce_enum(RunState, v)

    def to_domain(self) -> GameState:
        return GameState(
            location_id=self.location_id,
            values=dict(self.values),
            run_state=self.run_state,
            playthrough_id=self.playthrough_id,
        )

    @classmethod
    def from_domain(cls, state: GameState) -> GameStateModel:
        return cls(
            location_id=state.location_id,
            values=dict(state.values),
            run_state=state.run_state,
            playthrough_id=state.playthrough_id,
        )
