#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py simulate [--games N] [--seed S]
"""
import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from game import (
    Board,
    BoardConfig,
    DEFAULT_CONFIG,
    InvalidConfiguration,
    MinesweeperEnv,
    OutOfBounds,
    render_text,
)
from agents import RandomAgent


PLAY_HELP = """Commands:
  r X Y   reveal cell at column X, row Y
  f X Y   toggle flag at column X, row Y
  c X Y   chord around a numbered cell
  n       new game
  q       quit"""


def _config_from_args(args: argparse.Namespace) -> BoardConfig:
    return BoardConfig(width=args.width, height=args.height, num_mines=args.mines)


def _print_board(board: Board) -> None:
    print()
    print(render_text(board))
    print(
        f"Mines left: {board.mines_remaining} | "
        f"State: {board.game_state.name}"
    )


def handle_command(board: Board, line: str) -> bool:
    """
    Apply one play command to the board.

    Returns:
        False when the player asked to quit, True otherwise.
    """
    parts = line.split()
    if not parts:
        return True

    command = parts[0].lower()
    if command == "q":
        return False
    if command == "n":
        board.reset()
        return True
    if command not in ("r", "f", "c") or len(parts) != 3:
        print(PLAY_HELP)
        return True

    try:
        x, y = int(parts[1]), int(parts[2])
    except ValueError:
        print("Coordinates must be integers")
        return True

    try:
        if command == "r":
            board.reveal(x, y)
        elif command == "f":
            board.toggle_flag(x, y)
        else:
            board.chord(x, y)
    except OutOfBounds as exc:
        print(exc)
    return True


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    board = Board(_config_from_args(args), rng=np.random.default_rng(args.seed))
    print(PLAY_HELP)

    while True:
        _print_board(board)
        if board.is_won:
            print("*** WIN! *** (n = new game, q = quit)")
        elif board.is_lost:
            print("*** LOST (hit mine) *** (n = new game, q = quit)")

        try:
            line = input("> ")
        except EOFError:
            break
        if not handle_command(board, line):
            break


def simulate(args: argparse.Namespace) -> None:
    """Play a batch of games with the random agent and report results."""
    config = _config_from_args(args)
    env = MinesweeperEnv(config=config)
    agent = RandomAgent(config.height, config.width, seed=args.seed)

    wins = 0
    total_steps = 0

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, _ = env.reset(seed=seed)
        agent.reset()
        done = False
        info = {}

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        total_steps += info["steps"]
        if info["game_state"] == "WON":
            wins += 1

    print(f"\nRandom agent over {args.games} games:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--width", type=int, default=DEFAULT_CONFIG.width, help="Board columns"
    )
    parser.add_argument(
        "--height", type=int, default=DEFAULT_CONFIG.height, help="Board rows"
    )
    parser.add_argument(
        "--mines", type=int, default=DEFAULT_CONFIG.num_mines,
        help="Number of mines",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    _add_board_arguments(play_parser)

    simulate_parser = subparsers.add_parser(
        "simulate", help="Run random-agent games"
    )
    _add_board_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except InvalidConfiguration as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
