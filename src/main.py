"""Entry point kept minimal by delegating to Engine.

Command-line flags override the defaults in `config.py`.
"""

import argparse

import config
from core.engine import Engine
from textures.resoucepath import SPRITES_PATH


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="City Bike: race a car through the night.")
    ap.add_argument("--width", type=int, default=config.WIDTH, help="window width in pixels")
    ap.add_argument("--height", type=int, default=config.HEIGHT, help="window height in pixels")
    ap.add_argument(
        "--windowed",
        action="store_true",
        help="stay in a window instead of going fullscreen after loading",
    )
    ap.add_argument("--fps", type=int, default=config.FPS, help="frames per second")
    ap.add_argument("--assets", default=SPRITES_PATH, help="directory holding the sprite PNGs")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    engine = Engine(
        width=args.width,
        height=args.height,
        fullscreen=config.FULLSCREEN and not args.windowed,
        fps=args.fps,
        assets_path=args.assets,
    )
    return engine.run()


if __name__ == "__main__":
    raise SystemExit(main())
