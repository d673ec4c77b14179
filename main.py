from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from tictactoe.app.controller_local import LocalConfig, LocalController


def setup_logging(level: str, log_file: Optional[str]) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        filename=log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_local(cfg: LocalConfig) -> None:
    ctrl = LocalController(config=cfg)
    ctrl.run()


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Two-player tic-tac-toe with move history.")
    ap.add_argument(
        "--clear",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Clear the screen before each render (default: True)",
    )
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    ap.add_argument("--log-file", default=None, help="Write logs to this file instead of stderr")

    args = ap.parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    run_local(LocalConfig(clear_screen=args.clear))


if __name__ == "__main__":
    main()
