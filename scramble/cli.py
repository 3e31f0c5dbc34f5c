"""
Scramble CLI - Command-line interface for the engine.

Usage:
    scramble play                 Play in the terminal
    scramble serve                Run the HTTP API
    scramble pick                 Print a random root word
"""

import argparse
import logging
import random
import sys

from .config import ScrambleConfig
from .dictionary import create_dictionary, BACKENDS
from .errors import WordPoolError
from .session import GameSession
from .words import FileWordSource

NEW_GAME_COMMAND = ":new"
QUIT_COMMANDS = {":quit", ":q"}


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Scramble - Word scramble game",
        prog="scramble",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    _add_pool_arguments(play_parser)
    play_parser.add_argument(
        "--dictionary", choices=BACKENDS, help="Dictionary backend (default: wordfreq)"
    )
    play_parser.add_argument("--wordlist", help="Word list file for the wordlist backend")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")

    # Pick command
    pick_parser = subparsers.add_parser("pick", help="Print a random root word")
    _add_pool_arguments(pick_parser)

    args = parser.parse_args(argv)

    config = ScrambleConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        cmd_play(args, config)
    elif args.command == "serve":
        cmd_serve(args, config)
    elif args.command == "pick":
        cmd_pick(args, config)
    else:
        parser.print_help()
        sys.exit(1)


def _add_pool_arguments(subparser):
    subparser.add_argument("--pool", help="Root word pool file (default: bundled start.txt)")
    subparser.add_argument("--seed", type=int, help="Random seed for reproducible games")


def _word_source(args, config: ScrambleConfig) -> FileWordSource:
    rng = random.Random(args.seed) if args.seed is not None else None
    return FileWordSource(args.pool or config.word_pool_path, rng=rng)


def cmd_play(args, config: ScrambleConfig):
    """Interactive terminal game."""
    if args.dictionary:
        config.dictionary_backend = args.dictionary
    if args.wordlist:
        config.wordlist_path = args.wordlist

    try:
        dictionary = create_dictionary(config)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    game = GameSession(dictionary, _word_source(args, config), language=config.language)
    game.subscribe(render_state)

    try:
        game.start_game()
    except WordPoolError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Type words made from the root word. '{NEW_GAME_COMMAND}' for a new game, ':quit' to exit.")
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        command = line.strip().lower()
        if command in QUIT_COMMANDS:
            break
        if command == NEW_GAME_COMMAND:
            game.reset_game()
            continue

        result = game.submit_word(line)
        if result.title:
            print(f"{result.title}: {result.message}")

    print(f"Final score: {game.state.score}")


def render_state(state):
    """Print the game screen."""
    print()
    print(f"=== {state.root_word} ===    Score: {state.score}")
    for word in state.used_words:
        print(f"  ({len(word)}) {word}")


def cmd_serve(args, config: ScrambleConfig):
    """Run the HTTP API under uvicorn."""
    import uvicorn
    from .api import create_app

    try:
        app = create_app(config=config)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    uvicorn.run(app, host=args.host, port=args.port, log_level=config.log_level.lower())


def cmd_pick(args, config: ScrambleConfig):
    """Print one random root word."""
    try:
        print(_word_source(args, config).pick_random())
    except WordPoolError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
