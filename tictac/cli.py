"""
Tictac CLI - Terminal front-end for the engine.

Usage:
    tictac play [--games N]                 Interactive play
    tictac replay SQUARE... [--jump MOVE]   Play squares on one game, print result

Interactive commands:
    m <game> <square>   Mark square 0-8 on a game
    j <game> <move>     Jump to move number (0 = game start)
    q                   Quit

Environment:
    TICTAC_GAMES       Default number of games for `play` (1)
    TICTAC_LOG_LEVEL   Logging level (WARNING)
"""

import argparse
import logging
import os
import sys

from .engine_core.board import make_board, render_rows

# Environment configuration; converted and checked by argparse in main()
TICTAC_GAMES = os.getenv("TICTAC_GAMES", "1")
TICTAC_LOG_LEVEL = os.getenv("TICTAC_LOG_LEVEL", "WARNING")

logger = logging.getLogger(__name__)


def main(argv=None, stdin=None, stdout=None):
    """Main CLI entry point. Returns the process exit code."""
    parser = argparse.ArgumentParser(
        description="Tictac - Tic-tac-toe with time travel",
        prog="tictac",
    )
    parser.add_argument("--log-level", default=TICTAC_LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play interactively")
    play_parser.add_argument("--games", type=int, default=TICTAC_GAMES, help="Number of games")

    # Replay command
    replay_parser = subparsers.add_parser("replay", help="Apply marks to one game and print it")
    replay_parser.add_argument("squares", type=int, nargs="*", help="Squares to mark, in order")
    replay_parser.add_argument("--jump", type=int, default=None, help="Move number to jump to afterwards")

    args = parser.parse_args(argv)
    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        parser.error(f"unknown log level: {args.log_level}")
    logging.basicConfig(level=level)

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if args.command == "play":
        return cmd_play(args, stdin, stdout)
    elif args.command == "replay":
        return cmd_replay(args, stdout)
    else:
        parser.print_help(stdout)
        return 1


def format_game(view):
    """Text block for one GameView."""
    lines = [f"Game {view.game_index}  {view.status}"]
    lines.extend("  " + row for row in render_rows(make_board(view.squares)))
    moves = "  ".join(
        f"[{m.move}] {m.description}{' *' if m.is_current else ''}" for m in view.moves
    )
    lines.append(f"  {moves}")
    return "\n".join(lines)


def print_session(view, out):
    for game in view.games:
        print(format_game(game), file=out)


def cmd_play(args, stdin, stdout):
    """Interactive session reading commands line by line."""
    from .api import APIService, ErrorResponse

    if args.games < 1:
        print("Error: --games must be at least 1", file=stdout)
        return 1

    service = APIService()
    view = service.create_session(num_games=args.games)
    session_id = view.session_id
    print_session(view, stdout)

    for line in stdin:
        parts = line.split()
        if not parts:
            continue
        if parts[0] == "q":
            break

        request = parse_command(parts, service, session_id)
        if request is None:
            print("Commands: m <game> <square> | j <game> <move> | q", file=stdout)
            continue

        result = service.submit_intent(session_id, request)
        if isinstance(result, ErrorResponse):
            print(f"Error: {result.message}", file=stdout)
            continue
        print_session(result, stdout)

    service.end_session(session_id)
    return 0


def parse_command(parts, service, session_id):
    """Turn 'm 0 4' / 'j 0 2' into an IntentRequest, or None if malformed."""
    from pydantic import ValidationError
    from .api import IntentRequest, SessionView

    if parts[0] not in ("m", "j") or len(parts) != 3:
        return None
    try:
        game_index, value = int(parts[1]), int(parts[2])
    except ValueError:
        return None

    try:
        if parts[0] == "m":
            return IntentRequest(kind="mark_square", game_index=game_index, square=value)

        # Jumps are typed as move numbers; the engine works in history steps.
        view = service.get_view(session_id)
        if not isinstance(view, SessionView) or not 0 <= game_index < len(view.games):
            return None
        steps = {m.move: m.step for m in view.games[game_index].moves}
        if value not in steps:
            return None
        return IntentRequest(kind="jump_to_step", game_index=game_index, step=steps[value])
    except ValidationError as e:
        logger.debug("Rejected command %r: %s", parts, e)
        return None


def cmd_replay(args, stdout):
    """Mark squares on a fresh game, optionally jump, and print the result."""
    from .session import Session
    from .api import build_game_view

    session = Session.create(num_games=1)
    handle = session.game(0)
    try:
        for square in args.squares:
            handle.mark_square(square)
        if args.jump is not None:
            handle.jump_to_move(args.jump)
    except ValueError as e:
        print(f"Error: {e}", file=stdout)
        return 1

    print(format_game(build_game_view(0, handle.state)), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
