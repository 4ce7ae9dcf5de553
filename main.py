#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {easy,normal,expert}] [--seed N]
    python main.py play --rows R --cols C --hazards H
    python main.py evaluate [--games N] [--seed N]
    python main.py watch [--games N] [--delay SECONDS] [--seed N]
"""
import argparse
import logging
import random
import time
from typing import Callable, Optional

from minesweeper.agents import RandomAgent
from minesweeper.evaluation import Evaluator
from minesweeper.game import (
    BoardConfig,
    EventKind,
    GameSession,
    GameState,
    InvalidConfiguration,
    MinesweeperEnv,
    OutOfBounds,
    PRESETS,
    SessionEvent,
    render_ansi,
)

HELP_TEXT = (
    "Commands: r X Y (reveal), f X Y (flag), "
    "n [easy|normal|expert] (new game), q (quit)"
)


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Pick a preset or build a custom configuration from CLI options."""
    preset = PRESETS[args.difficulty]
    if args.rows is None and args.cols is None and args.hazards is None:
        return preset
    return BoardConfig(
        rows=preset.rows if args.rows is None else args.rows,
        cols=preset.cols if args.cols is None else args.cols,
        hazard_count=(
            preset.hazard_count if args.hazards is None else args.hazards
        ),
    )


def print_event(event: SessionEvent) -> None:
    """Announce the end of a game."""
    if event.kind != EventKind.FINISHED:
        return
    outcome = "You won" if event.session.state == GameState.WON else "You lost"
    print(
        f"\n*** {outcome}! {event.session.elapsed_seconds:.0f}s, "
        f"{event.session.revealed_count} cells revealed ***"
    )


def print_board(session: GameSession) -> None:
    """Print counters and the board."""
    view = session.session_view()
    print(
        f"\n[{view.state.name}] flags left: {view.remaining_flags} | "
        f"revealed: {view.revealed_count}/{session.cells_to_reveal}"
    )
    print(render_ansi(session.board.get_observation()))


def handle_command(session: GameSession, line: str) -> bool:
    """
    Apply one command line to the session.

    Returns:
        False when the player asked to quit.
    """
    parts = line.split()
    if not parts:
        return True
    command = parts[0].lower()

    if command == "q":
        return False
    if command == "n":
        if len(parts) > 1 and parts[1] in PRESETS:
            session.new_session_from(PRESETS[parts[1]])
        else:
            session.new_session()
        return True
    if command in ("r", "f") and len(parts) == 3:
        try:
            x, y = int(parts[1]), int(parts[2])
        except ValueError:
            print(HELP_TEXT)
            return True
        action = session.reveal_request if command == "r" else session.flag_request
        try:
            if not action(x, y):
                print("Nothing to do there.")
        except OutOfBounds as error:
            print(error)
        return True

    print(HELP_TEXT)
    return True


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    try:
        config = build_config(args)
    except InvalidConfiguration as error:
        print(f"Invalid board: {error}")
        return

    rng = random.Random(args.seed)
    session = GameSession(config, rng=rng)
    session.subscribe(print_event)

    print(HELP_TEXT)
    while True:
        print_board(session)
        try:
            line = input("> ")
        except EOFError:
            break
        if not handle_command(session, line):
            break


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random agent."""
    try:
        config = build_config(args)
    except InvalidConfiguration as error:
        print(f"Invalid board: {error}")
        return

    agent = RandomAgent(config.rows, config.cols, seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def make_watcher(
    session: GameSession,
    delay: float,
    sleep: Callable[[float], None] = time.sleep,
) -> Callable[[SessionEvent], None]:
    """Build a listener that redraws the board after every reveal."""
    def watcher(event: SessionEvent) -> None:
        if event.kind == EventKind.CELLS_REVEALED:
            first = event.cells[0]
            print(
                f"\nRevealed {len(event.cells)} cell(s) from "
                f"({first.x}, {first.y})"
            )
            print_board(session)
            sleep(delay)
        elif event.kind == EventKind.FINISHED:
            print_event(event)

    return watcher


def watch(args: argparse.Namespace) -> None:
    """Watch the random agent play, one reveal at a time."""
    try:
        config = build_config(args)
    except InvalidConfiguration as error:
        print(f"Invalid board: {error}")
        return

    env = MinesweeperEnv(config)
    agent = RandomAgent(config.rows, config.cols, seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games)
    env.session.subscribe(make_watcher(env.session, args.delay))

    wins = 0
    for game in range(args.games):
        print(f"\n=== Game {game + 1}/{args.games} ===")
        stats = evaluator.run_episode(
            env, agent, seed=args.seed if game == 0 else None
        )
        wins += int(stats.won)

    env.close()
    print(f"\nRandom won {wins}/{args.games} games")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--difficulty", choices=sorted(PRESETS), default="easy",
        help="Preset board size and hazard count",
    )
    parser.add_argument("--rows", type=int, default=None, help="Custom rows")
    parser.add_argument("--cols", type=int, default=None, help="Custom columns")
    parser.add_argument(
        "--hazards", type=int, default=None, help="Custom hazard count"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for hazard placement"
    )


def main(argv: Optional[list] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal or evaluate agents"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show session debug logs"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    watch_parser = subparsers.add_parser(
        "watch", help="Watch the random agent play"
    )
    add_board_arguments(watch_parser)
    watch_parser.add_argument(
        "--games", type=int, default=3, help="Number of games to watch"
    )
    watch_parser.add_argument(
        "--delay", type=float, default=0.3, help="Seconds between moves"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    elif args.command == "watch":
        watch(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
