"""Play a game of islands from the command line"""

import argparse
import logging
import random
import sys

from islandgame import IslandGame, Player
from unionfind import EdgePolicy


def parse_move(text: str) -> tuple[int, int]:
    try:
        r, c = text.split(",")
        return int(r), int(c)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL but got {text!r}")


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Alternate WHITE and BLACK moves until one player connects",
    )
    parser.add_argument("size", type=int)
    parser.add_argument(
        "--moves",
        type=parse_move,
        nargs="+",
        help="moves as ROW,COL (default: every cell in random order)",
    )
    parser.add_argument("--seed", type=int)
    parser.add_argument(
        "--literal",
        action="store_true",
        help="compare edge roots as recorded instead of resolving them",
    )
    parser.add_argument("--verbose", action="store_true")
    return parser


def play(game: IslandGame, moves: list[tuple[int, int]]) -> Player | None:
    """Play moves alternately starting with WHITE, stop at the first win"""
    player = Player.WHITE
    for r, c in moves:
        if game.make_play(r, c, player):
            return player
        player = Player(-player)
    return None


def main(argv: list[str] | None = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    if args.verbose:
        print(args)

    policy = EdgePolicy.LITERAL if args.literal else EdgePolicy.RESOLVE
    try:
        game = IslandGame(args.size, policy)
    except ValueError as e:
        parser.error(str(e))

    if args.moves is None:
        moves = [game.rc(index) for index in range(args.size**2)]
        random.Random(args.seed).shuffle(moves)
    else:
        moves = args.moves

    try:
        winner = play(game, moves)
    except ValueError as e:
        print(game)
        parser.error(str(e))

    print(game)
    if winner is None:
        print("no winner")
    else:
        played = args.size**2 - len(game.legal_moves())
        print(f"{winner.name} wins after {played} moves")
    print(f"islands: WHITE {game.white_score()} BLACK {game.black_score()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
