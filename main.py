#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert}]
                        [--custom W H M] [--seed N]
    python main.py simulate [--games N] [--seed N]
"""
import argparse
import logging
import random
from typing import Optional, Tuple

import numpy as np

from src.minesweeper import (
    ConfigurationError,
    Difficulty,
    GameSession,
    Mismatch,
    MinesweeperEnv,
    MinesweeperError,
    PRESETS,
)
from src.minesweeper.environment import render_text
from src.minesweeper.outcomes import ChordOutcome

COMMANDS = {"r": "reveal", "f": "flag", "c": "chord"}


def resolve_difficulty(args: argparse.Namespace) -> Difficulty:
    """Pick the difficulty from --custom or --difficulty."""
    if args.custom:
        return Difficulty.custom(*args.custom)
    return PRESETS[args.difficulty]


def play(args: argparse.Namespace) -> None:
    """Play one game from the terminal."""
    difficulty = resolve_difficulty(args)
    rng = random.Random(args.seed)
    session = GameSession(difficulty.config, rng=rng, difficulty=difficulty)
    print(f"{difficulty.label}: {session.config.width}x{session.config.height}, "
          f"{session.config.mine_count} mines")
    print("Commands: r ROW COL (reveal), f ROW COL (flag), "
          "c ROW COL (chord), q (quit)")

    while not session.is_over:
        print()
        print(render_text(session.get_observation()))
        print(f"Mines: {session.mines_remaining}  Time: {session.elapsed:.1f}s")

        line = input("> ").strip().lower()
        if line in ("q", "quit"):
            return
        parts = line.split()
        if len(parts) != 3 or parts[0] not in COMMANDS:
            print("Expected: r|f|c ROW COL")
            continue
        try:
            position = (int(parts[1]), int(parts[2]))
        except ValueError:
            print("ROW and COL must be integers")
            continue

        try:
            outcome = run_command(session, COMMANDS[parts[0]], position)
        except MinesweeperError as error:
            print(error)
            continue
        if isinstance(outcome, Mismatch):
            print(f"Flags don't match: {outcome.flagged} of {outcome.expected}")

    print()
    print(render_text(session.get_observation()))
    if session.is_won:
        record = session.best_time_candidate
        print(f"\nYou won in {record.elapsed_seconds}s ({record.difficulty_key})")
    else:
        print(f"\nBoom! Mine at {session.losing_position}")


def run_command(
    session: GameSession, command: str, position: Tuple[int, int]
) -> Optional[ChordOutcome]:
    """Dispatch one parsed command to the session."""
    if command == "reveal":
        return session.reveal(position)
    if command == "chord":
        return session.chord(position)
    session.toggle_flag(position)
    return None


def simulate(args: argparse.Namespace) -> None:
    """Play random-clicking games through the environment."""
    difficulty = resolve_difficulty(args)
    env = MinesweeperEnv(config=difficulty.config)
    picker = np.random.default_rng(args.seed)

    wins = 0
    total_revealed = 0
    for game in range(args.games):
        env.reset(seed=None if args.seed is None else args.seed + game)
        done = False
        while not done:
            choices = np.flatnonzero(env.get_action_mask())
            action = int(picker.choice(choices))
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        total_revealed += info["revealed"]
        if info["game_state"] == "WON":
            wins += 1

    print(f"{difficulty.label}: {wins}/{args.games} wins "
          f"({wins / args.games:.1%}), "
          f"avg revealed {total_revealed / args.games:.1f}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for name, help_text in (
        ("play", "Play a game in the terminal"),
        ("simulate", "Run random-clicking games"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--difficulty",
            choices=sorted(PRESETS),
            default="beginner",
            help="Preset difficulty",
        )
        sub.add_argument(
            "--custom",
            type=int,
            nargs=3,
            metavar=("WIDTH", "HEIGHT", "MINES"),
            help="Custom board instead of a preset",
        )
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    subparsers.choices["simulate"].add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except ConfigurationError as error:
        parser.error(f"Invalid difficulty: {error}")


if __name__ == "__main__":
    main()
