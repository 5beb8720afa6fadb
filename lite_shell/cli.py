"""Command-line entry point for lite-shell."""

import argparse
import io
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ShellConfig, configure_logging, parse_log_level
from .exceptions import ConfigError, ShellIOError
from .shell import Shell

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lite-shell",
        description="Minimal interactive shell with built-ins and PATH lookup",
    )
    parser.add_argument("--log-level", dest="log_level", default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ShellConfig.from_env()
        if args.log_level:
            config.log_level = parse_log_level(args.log_level, "--log-level")
    except ConfigError as e:
        sys.stderr.write(f"lite-shell: {e}\n")
        return e.exit_code

    configure_logging(config.log_level)

    # Undecodable bytes become U+FFFD instead of failing the read
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")

    shell = Shell(config=config)
    try:
        shell.run_interactive(sys.stdin)
    except ShellIOError as e:
        logger.debug("session ended by I/O failure", exc_info=True)
        sys.stderr.write(f"lite-shell: {e}\n")
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
