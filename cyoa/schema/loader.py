"""
Loading and dumping story content and run state.

Parsing failures and validation errors both surface as ContentError,
carrying one message per problem.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..engine.content import StoryContent
from ..engine.state import GameState
from ..errors import ContentError
from .models import GameStateModel, StoryDocument
from .validation import validate_story


def _messages(err: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}"
        for e in err.errors()
    ]


def load_story(data: dict[str, Any], validate: bool = True) -> StoryContent:
    """
    Build StoryContent from a story document.

    Args:
        data: Parsed JSON story document
        validate: Also run reference validation

    Raises:
        ContentError: If the document is malformed or fails validation
    """
    try:
        doc = StoryDocument.model_validate(data)
    except ValidationError as e:
        raise ContentError(_messages(e)) from e

    content = doc.to_domain()
    if validate:
        result = validate_story(content)
        if not result.valid:
            raise ContentError(result.errors)
    return content


def read_json(path: str | Path) -> Any:
    """Read a JSON file, reporting unreadable files as ContentError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ContentError([f"{path}: file not found"]) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError([f"{path}: cannot read file: {e}"]) from e
    except json.JSONDecodeError as e:
        raise ContentError([f"{path}: invalid JSON: {e}"]) from e


def load_story_file(path: str | Path, validate: bool = True) -> StoryContent:
    """Load a story document from a JSON file."""
    return load_story(read_json(path), validate=validate)


def load_state(data: dict[str, Any]) -> GameState:
    """Build a GameState from a run-state document."""
    try:
        return GameStateModel.model_validate(data).to_domain()
    except ValidationError as e:
        raise ContentError(_messages(e)) from e


def dump_state(state: GameState) -> dict[str, Any]:
    """Serialize a GameState to a JSON-ready dict."""
    return GameStateModel.from_domain(state).model_dump(mode="json")
