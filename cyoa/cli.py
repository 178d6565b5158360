"""
cyoa CLI - Command-line interface for the engine.

Usage:
    cyoa validate <story_file>                     Validate a story
    cyoa actions <story_file> [--state FILE]       List offered actions
    cyoa play <story_file> <action_id>... [--state FILE] [--output FILE]
                                                   Perform actions in order
"""

import argparse
import json
import sys

from .config import EngineConfig
from .errors import CyoaError
from .logging_config import setup_logging
from .schema import dump_state, load_state, load_story_file, read_json, validate_story
from .session import GameDisplay, Playthrough


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="cyoa - Choose-Your-Own-Adventure Rule Engine",
        prog="cyoa",
    )
    parser.add_argument("--log-level", help="Logging level (default: $CYOA_LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a story file")
    validate_parser.add_argument("story_file", help="Path to story JSON file")

    # Actions command
    actions_parser = subparsers.add_parser("actions", help="List offered actions")
    actions_parser.add_argument("story_file", help="Path to story JSON file")
    actions_parser.add_argument("--state", help="Run-state JSON file (default: story start)")

    # Play command
    play_parser = subparsers.add_parser("play", help="Perform actions in order")
    play_parser.add_argument("story_file", help="Path to story JSON file")
    play_parser.add_argument("action_ids", nargs="+", help="Action IDs to perform")
    play_parser.add_argument("--state", help="Run-state JSON file (default: story start)")
    play_parser.add_argument("--output", "-o", help="Write the final run state here")

    args = parser.parse_args(argv)

    config = EngineConfig.from_env()
    setup_logging(args.log_level or config.log_level)

    commands = {
        "validate": lambda: cmd_validate(args),
        "actions": lambda: cmd_actions(args, config),
        "play": lambda: cmd_play(args, config),
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)

    try:
        command()
    except CyoaError as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_validate(args):
    """Validate a story file."""
    print(f"Validating: {args.story_file}")
    content = load_story_file(args.story_file, validate=False)

    result = validate_story(content)
    print(f"Story: {content.story.title or content.story.story_id}")
    print(f"Locations: {len(content.locations)}")
    print(f"Actions: {len(content.actions)}")

    if result.warnings:
        print("\nWarnings:")
        for w in result.warnings:
            print(f"  - {w}")

    if result.errors:
        print("\nErrors:")
        for e in result.errors:
            print(f"  - {e}")
        sys.exit(1)

    print("\nStory is valid")


def cmd_actions(args, config):
    """List the actions offered from a state."""
    run = _playthrough(args, config)
    _print_display(run.display())


def cmd_play(args, config):
    """Perform actions in order and report the final state."""
    run = _playthrough(args, config)

    for action_id in args.action_ids:
        result = run.perform(action_id)
        if not result.success:
            print(f"Action {action_id} failed:")
            for e in result.errors:
                print(f"  - {e}")
            sys.exit(1)
        print(f"> {action_id}")
        for change in result.changes:
            print(f"  {change}")

    print()
    _print_display(run.display())

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(dump_state(run.state), f, indent=2, sort_keys=True)
        print(f"\nState written to {args.output}")


def _playthrough(args, config):
    content = load_story_file(args.story_file)
    if args.state:
        return Playthrough(content, load_state(read_json(args.state)), config=config)
    return Playthrough.start(content, config=config)


def _print_display(display: GameDisplay):
    print(f"Story: {display.story_title}")
    print(f"Location: {display.location_title or display.location_id}")
    if display.location_description:
        print(f"  {display.location_description}")
    print(f"Run state: {display.run_state.value}")
    if display.values:
        print("Values:")
        for key in sorted(display.values):
            print(f"  {key} = {display.values[key]}")
    if display.actions:
        print("Actions:")
        for action_id, title in display.actions:
            print(f"  {action_id}  {title}")
    else:
        print("No actions available")


if __name__ == "__main__":
    main()
