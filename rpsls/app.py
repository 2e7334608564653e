import argparse
import logging
import random

from .utils.constants import TARGET_SCORE, WINDOW_NAME
from .game.game_logic import MatchController, RandomOpponent


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="rpsls", description=WINDOW_NAME)
    parser.add_argument("--console", action="store_true", help="play in the terminal instead of a window")
    parser.add_argument("--target", type=int, default=TARGET_SCORE, help="points needed to win a match")
    parser.add_argument("--seed", type=int, default=None, help="seed the bot for a repeatable session")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every round")
    args = parser.parse_args(argv)
    if args.target <= 0:
        parser.error("--target must be a positive integer")
    return args


def setup_logging(verbose=False):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')


def build_controller(args):
    rng = random.Random(args.seed) if args.seed is not None else None
    return MatchController(RandomOpponent(rng), target_score=args.target)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)
    controller = build_controller(args)

    if args.console:
        from .console import ConsoleGame
        ConsoleGame(controller).run()
    else:
        from .core.game_engine import GameEngine
        GameEngine(controller).run()
    return 0
