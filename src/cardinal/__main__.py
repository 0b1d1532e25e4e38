from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m cardinal",
        description="Self-service tag roles for Discord.",
    )
    parser.add_argument(
        "-t",
        "--token",
        default=None,
        help="Bot token (defaults to the DISCORD_API_TOKEN environment variable).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.toml (defaults to ./config.toml).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    from cardinal import config
    from cardinal.clients import disc

    if args.config is not None:
        config.reload(args.config)

    return disc.run(args.token)


if __name__ == "__main__":
    raise SystemExit(main())
