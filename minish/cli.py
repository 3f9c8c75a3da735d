"""Command-line entry point for minish"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ShellConfig
from .path_manager import SearchPath
from .shell import Shell

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minish",
        description="A minimal interactive shell with exit, echo and type built-ins.",
    )
    parser.add_argument("-c", dest="command", metavar="LINE",
                        help="run a single command line and exit with its status")
    parser.add_argument("--prompt", help="prompt text (default: '$ ')")
    parser.add_argument("--histfile", dest="history_file",
                        help="file to load and save line history")
    parser.add_argument("--log-level", dest="log_level",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        type=str.upper,
                        help="logging level for diagnostics on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments and run the shell.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    config = ShellConfig.from_environ().override(
        prompt=args.prompt,
        history_file=args.history_file,
        log_level=args.log_level,
    )
    configure_logging(config.log_level)

    shell = Shell(config=config, search_path=SearchPath.from_environ())
    if args.command is not None:
        return shell.execute(args.command)
    return shell.repl()


if __name__ == "__main__":
    sys.exit(main())
