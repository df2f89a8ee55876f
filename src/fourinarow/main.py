from __future__ import annotations

import argparse
import logging
import random

from fourinarow import config
from fourinarow.log import configure_logging
from fourinarow.ui.menu import run_menu

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Four in a row against a friend or the computer.")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the first mover and the computer's tie-breaks")
    ap.add_argument("--depth", type=int, default=config.SEARCH_DEPTH, help="Computer search depth in plies")
    ap.add_argument("--no-color", action="store_true", help="Plain text board")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    ap.add_argument("--log-level", type=str, default=config.LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    if args.depth < 1:
        raise SystemExit("--depth must be at least 1")

    configure_logging(args.log_level)
    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    rng = random.Random(args.seed)
    logger.debug("seed=%s depth=%d", args.seed, args.depth)

    print("Welcome to Four in a Row!")
    try:
        run_menu(rng, depth=args.depth)
    except (KeyboardInterrupt, EOFError):
        print()
    print("Thank you for playing!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
