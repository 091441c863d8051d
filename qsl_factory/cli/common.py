import logging
from argparse import ArgumentParser, Namespace


def add_common_args(parser: ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        help="Verbose mode",
        action="store_true",
    )


def setup_logging(args: Namespace) -> None:
    """
    Turn on debug logging in verbose mode
    """
    if args.v:
        logging.basicConfig(level=logging.DEBUG)
