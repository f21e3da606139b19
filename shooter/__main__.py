"""
Launch the shooter in an arcade window

    python -m shooter --assets ./assets-root --log-level DEBUG
"""

import argparse
import logging

from shooter.configs.game_config import WINDOW_CONFIG


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Side-scrolling asteroid shooter")
    parser.add_argument("--width", type=int, default=WINDOW_CONFIG["width"], help="Window width")
    parser.add_argument("--height", type=int, default=WINDOW_CONFIG["height"], help="Window height")
    parser.add_argument("--assets", type=str, default=".",
                        help="Directory containing the assets/ folder")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # arcade is only imported once a window is actually wanted
    from shooter.game import MainMenuView
    from shooter.host import run

    run(MainMenuView, assets_root=args.assets, width=args.width, height=args.height)


if __name__ == "__main__":
    main()
