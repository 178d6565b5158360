"""
Tests for lookups and configuration.

Tests:
- MemoryLookup values and scopes
- GameStateLookup
- EngineConfig.from_env
"""

import pytest

from ..config import EngineConfig
from ..engine.state import GameState, GameStateLookup
from ..errors import CyoaError, UnknownKeyError, UnsupportedLookupError
from ..logic import CompareOp, MemoryLookup, Predicate, evaluate
from ..logic.lookup import Lookup


class TestMemoryLookup:
    """Tests for the dict-backed lookup."""

    def test_values(self, defaults):
        assert defaults.get_int("two") == 2
        assert defaults.get_str("string3") == "bwahaha"
        assert defaults.get_str_array("strarr1") == ["yohoho", "bwahaha"]

    def test_kinds_are_separate(self, defaults):
        """An integer key is not visible as a string."""
        with pytest.raises(UnknownKeyError) as exc:
            defaults.get_str("one")
        assert "string" in str(exc.value)

    def test_array_is_copied(self, defaults):
        arr = defaults.get_str_array("strarr1")
        arr.append("extra")
        assert defaults.get_str_array("strarr1") == ["yohoho", "bwahaha"]

    def test_scopes(self):
        child = MemoryLookup()
        lookup = MemoryLookup().with_scope("b", child).with_scope("a", MemoryLookup())
        assert lookup.get_scope("b") is child
        assert lookup.get_scope("c") is None
        assert lookup.list_scopes() == ["a", "b"]

    def test_set_scope_replaces(self):
        first, second = MemoryLookup(), MemoryLookup()
        lookup = MemoryLookup().with_scope("s", first)
        lookup.set_scope("s", second)
        assert lookup.get_scope("s") is second


class TestBareLookup:
    """A Lookup subclass only answers what it implements."""

    class IntsOnly(Lookup):
        def get_int(self, key):
            return 7

    def test_unsupported_kind(self):
        with pytest.raises(UnsupportedLookupError) as exc:
            self.IntsOnly().get_str("name")
        assert exc.value.kind == "string"

    def test_unsupported_kind_in_predicate(self):
        pred = Predicate.compare("name", CompareOp.STREQ, "'x")
        with pytest.raises(UnsupportedLookupError):
            evaluate(pred, self.IntsOnly())

    def test_no_scopes(self):
        lookup = self.IntsOnly()
        assert lookup.get_scope("anything") is None
        assert lookup.list_scopes() == []
        with pytest.raises(UnsupportedLookupError) as exc:
            lookup.set_scope("s", MemoryLookup())
        assert exc.value.kind == "scope"

    def test_binding_scope_is_an_engine_error(self):
        """Refusing a scope raises a CyoaError like every other lookup failure."""
        with pytest.raises(CyoaError):
            self.IntsOnly().set_scope("s", MemoryLookup())


class TestGameStateLookup:
    """Tests for the run-state lookup."""

    def test_reads_values(self):
        lookup = GameStateLookup(GameState(location_id="here", values={"gold": 4}))
        assert lookup.get_int("gold") == 4

    def test_missing_value_raises(self):
        lookup = GameStateLookup(GameState(location_id="here"))
        with pytest.raises(UnknownKeyError) as exc:
            lookup.get_int("gold")
        assert exc.value.key == "gold"

    def test_missing_value_as_zero(self):
        lookup = GameStateLookup(GameState(location_id="here"), missing_as_zero=True)
        assert lookup.get_int("gold") == 0

    def test_strings_unsupported(self):
        lookup = GameStateLookup(GameState(location_id="here"))
        with pytest.raises(UnsupportedLookupError):
            lookup.get_str("name")

    def test_story_scope(self):
        lookup = GameStateLookup(GameState(location_id="here", values={"gold": 4}))
        assert lookup.list_scopes() == ["story"]
        assert evaluate(Predicate.compare("story.gold", CompareOp.EQ, "gold"), lookup)

    def test_sees_later_changes(self):
        """The lookup reads the live state, not a snapshot."""
        state = GameState(location_id="here")
        lookup = GameStateLookup(state, missing_as_zero=True)
        state.values["gold"] = 9
        assert lookup.get_int("gold") == 9


class TestEngineConfig:
    """Tests for environment configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CYOA_LOG_LEVEL", raising=False)
        monkeypatch.delenv("CYOA_MISSING_VALUES_AS_ZERO", raising=False)
        monkeypatch.delenv("CYOA_STORY_SCOPE", raising=False)
        assert EngineConfig.from_env() == EngineConfig()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CYOA_LOG_LEVEL", "debug")
        monkeypatch.setenv("CYOA_MISSING_VALUES_AS_ZERO", "yes")
        monkeypatch.setenv("CYOA_STORY_SCOPE", "tale")

        config = EngineConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.missing_values_as_zero is True
        assert config.story_scope == "tale"

    def test_false_flag(self, monkeypatch):
        monkeypatch.setenv("CYOA_MISSING_VALUES_AS_ZERO", "0")
        assert EngineConfig.from_env().missing_values_as_zero is False
