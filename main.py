import argparse

from commands import home, schedule
from utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

COMMANDS = {
    "home": home,
    "schedule": schedule,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anime-schedule",
        description="Weekly anime schedule and rankings in the terminal.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available screens")
    subparsers.add_parser("home", help="Top airing carousel and popular anime (default)")
    subparsers.add_parser("schedule", help="Weekly broadcast schedule")

    parser.add_argument("--debug", "-d", action="store_true", help="Log DEBUG messages to the console")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the screen once after loading, without live refresh or navigation",
    )
    return parser


def cli(argv: list[str] | None = None) -> None:
    """Parse arguments and open the requested screen."""
    args = build_parser().parse_args(argv)

    if args.debug:
        configure_logging(debug=True)

    command = COMMANDS[args.command or "home"]
    try:
        command(args)
    except KeyboardInterrupt:
        logger.debug("Interrupted by user")


if __name__ == "__main__":
    cli()
