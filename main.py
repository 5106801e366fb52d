"""
main.py — Entry point.

Run with:
    python main.py [--difficulty hard] [--mute] [--save-file PATH]

Requires:
    pip install pygame
"""

import argparse
import logging
from pathlib import Path

from neonsnake.config import DIFFICULTIES, SAVE_PATH
from neonsnake.controller import GameController
from neonsnake.storage import Preferences

DIFFICULTY_NAMES = {cfg["label"].lower(): key for key, cfg in DIFFICULTIES.items()}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Neon Snake")
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTY_NAMES, key=DIFFICULTY_NAMES.get),
        help="preselect a difficulty on the start screen",
    )
    parser.add_argument(
        "--save-file",
        type=Path,
        default=SAVE_PATH,
        help="where the high score and audio switches are kept",
    )
    parser.add_argument("--mute", action="store_true", help="no sound or music for this run")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    prefs = Preferences.load(args.save_file)
    difficulty = DIFFICULTY_NAMES[args.difficulty] if args.difficulty else None
    GameController(prefs, difficulty=difficulty, mute=args.mute).run()


if __name__ == "__main__":
    main()
