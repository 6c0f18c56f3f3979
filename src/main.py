"""
Interactive word builder runner.

Usage:
    python -m src.main words.txt
    python -m src.main words.txt --config config.yaml --verbose

Commands (one per line):
    +x      prepend the letter x
    x+      append the letter x
    -N      remove the letter at index N
    reset   start over
    state   show the current state
    quit    exit
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Literal, Optional, TextIO

import yaml
from pydantic import BaseModel

from .engine import EngineConfig, StateSnapshot, WordBuilderError, WordBuilderSession
from .index import build_index, load_word_list


CommandAction = Literal["add", "remove", "reset", "state", "quit"]


class Command(BaseModel):
    """A parsed runner command."""
    action: CommandAction
    letter: Optional[str] = None
    position: Optional[Literal["prefix", "suffix"]] = None
    index: Optional[int] = None


def load_config(config_path: str) -> EngineConfig:
    """Load engine configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return EngineConfig(**data)


def parse_command(line: str) -> Command:
    """
    Parse one line of runner input.

    Raises:
        ValueError: If the line is not a recognised command
    """
    text = line.strip().lower()

    if text in ("reset", "state", "quit"):
        return Command(action=text)
    if len(text) == 2 and text[0] == "+" and text[1] != "+":
        return Command(action="add", letter=text[1], position="prefix")
    if len(text) == 2 and text[1] == "+" and text[0] != "+":
        return Command(action="add", letter=text[0], position="suffix")
    if text.startswith("-") and text[1:].isdigit():
        return Command(action="remove", index=int(text[1:]))

    raise ValueError(f"Unrecognised command: '{line.strip()}'")


def format_snapshot(snapshot: StateSnapshot) -> str:
    """Render a snapshot for the terminal."""
    lines = [
        f"Answer: {snapshot.answer or '(empty)'}  (step {snapshot.step})",
        f"Prefix letters: {' '.join(snapshot.prefix_set) or '-'}",
        f"Suffix letters: {' '.join(snapshot.suffix_set) or '-'}",
    ]
    if snapshot.valid_completions:
        lines.append(f"Completions: {', '.join(snapshot.valid_completions)}")
    if snapshot.suggestion:
        lines.append(f"Hint: {snapshot.suggestion}")
    return "\n".join(lines)


def run(session: WordBuilderSession, stdin: TextIO, stdout: TextIO) -> int:
    """Read commands from ``stdin`` until EOF or quit. Returns the step reached."""
    print(format_snapshot(session.snapshot()), file=stdout)

    for line in stdin:
        if not line.strip():
            continue
        try:
            command = parse_command(line)
        except ValueError as e:
            print(f"Error: {e}", file=stdout)
            continue

        if command.action == "quit":
            break
        if command.action == "state":
            print(format_snapshot(session.snapshot()), file=stdout)
            continue

        try:
            if command.action == "add":
                state = session.add_letter(command.letter, command.position)
            elif command.action == "remove":
                state = session.remove_letter(command.index)
            else:
                state = session.reset()
        except WordBuilderError as e:
            print(f"Error: {e.message}", file=stdout)
            continue

        print(state.message, file=stdout)
        print(format_snapshot(session.snapshot()), file=stdout)

    return session.state.step


def main():
    parser = argparse.ArgumentParser(
        description="Build words one letter at a time",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  workers: 4
  executor: thread
  index_kind: auto
  large_corpus_threshold: 200000
        """
    )
    parser.add_argument(
        "words",
        help="Path to the word list (one word per line)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML engine configuration"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log index building and scans"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else EngineConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        words = load_word_list(args.words)
        if not words:
            raise ValueError(f"word list is empty: {args.words}")
        index = build_index(
            words,
            index_kind=config.index_kind,
            large_corpus_threshold=config.large_corpus_threshold,
            alphabet=config.alphabet,
        )
    except Exception as e:
        print(f"Error loading word list: {e}", file=sys.stderr)
        sys.exit(1)

    session = WordBuilderSession.create(index, config)

    try:
        run(session, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        print("\nInterrupted by user")

    return 0


if __name__ == "__main__":
    sys.exit(main())
