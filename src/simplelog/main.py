import argparse
import sys

from pydantic import ValidationError

from simplelog.config import Settings, configure
from simplelog.facade import log
from simplelog.levels import InvalidLevel, parse_level


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="simplelog",
        description="Write one leveled log line to stderr",
    )
    p.add_argument(
        "--logging",
        default=None,
        help="Threshold as a level name or number (default: $SIMPLELOG_LEVEL or info)",
    )
    p.add_argument("level", help="Level of the line: debug, info, warning or error")
    p.add_argument("message", nargs="+", help="Message text, written literally")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.logging is None:
            configure()
        else:
            configure(Settings(level=args.logging))
        level = parse_level(args.level)
    except (InvalidLevel, ValidationError) as e:
        parser.error(str(e))

    log(level, "%s", " ".join(args.message))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
