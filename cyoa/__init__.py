"""
cyoa - Choose-Your-Own-Adventure Rule Engine

A deterministic engine for running branching stories. Given a story's
locations, actions and triggers, the engine provides:
- Predicate evaluation over scoped run-state variables
- Legal action enumeration
- Trigger evaluation and effect application
- Story content loading and validation
"""

__version__ = "0.1.0"
