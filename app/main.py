#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import List, Optional

from pwgen.config import (
    APP_AUTHOR,
    APP_DESCRIPTION,
    APP_NAME,
    APP_VERSION,
    Settings,
    load_settings,
    parse_count,
)
from pwgen.errors import PasswordError
from pwgen.factory import GeneratorFactory

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_REQUEST = 2


def configure_logging(level: str = "WARNING") -> None:
    """Diagnostics go to stderr so stdout carries only passwords."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwgen",
        description=f"{APP_NAME}: {APP_DESCRIPTION}",
        epilog=f"Author: {APP_AUTHOR}",
    )
    parser.add_argument(
        "-a", "--abc",
        dest="alphabets",
        metavar="ALPHABET",
        nargs="+",
        action="extend",
        required=True,
        help="Alphabet to draw symbols from; every alphabet appears at least once in each password",
    )
    parser.add_argument(
        "-l", "--length",
        help=f"Password length (default: {settings.length})",
    )
    parser.add_argument(
        "-n", "--number",
        help=f"Number of passwords to generate (default: {settings.number})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="Seed for reproducible output",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    # before load_settings(), which may log warnings
    configure_logging()
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)
    logging.getLogger().setLevel("DEBUG" if args.verbose else settings.log_level)

    # Unparseable numbers fall back to the configured defaults.
    length = parse_count(args.length, settings.length, "length")
    number = parse_count(args.number, settings.number, "number")

    try:
        generator = GeneratorFactory.from_charsets(args.alphabets, length=length, seed=args.seed)
    except PasswordError as e:
        logger.error("%s", e)
        return EXIT_INVALID_REQUEST

    logger.debug("Producing %d password(s) of length %d from %d alphabet(s)",
                 number, length, len(generator.alphabets))
    for password in generator.iterator(number):
        print(password)
    return EXIT_OK


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
