"""Command line entry point.

Run a program in a modified environment providing an optional .env file or
variables from stdin.

Usage:
    enve [options] [command [args...]]

Examples:
    # Print the merged environment
    enve -f app.env

    # Print only the file's variables as JSON
    enve -f app.env -n -o json

    # Run a command with variables from stdin, in another directory
    cat app.env | enve --stdin --chdir /srv/app ./server

Environment Variables:
    ENVE_LOG_LEVEL    Diagnostics level (default: WARNING)
    ENVE_LOG_JSON     "true" for JSON diagnostics
    ENVE_LOG_FILE     Also write diagnostics to this file
"""

import argparse
import os
import sys
from typing import BinaryIO, List, MutableMapping, NoReturn, Optional, Sequence, TextIO

from enve import __version__
from enve.config import DEFAULT_ENV_FILE, ResolutionConfig
from enve.env import DEFAULT_OUTPUT, EnvLoader, merge, render, validate_format
from enve.exceptions import EnveError, InvalidArgumentError
from enve.launcher import launch
from enve.logger import Logger, get_logger

SUMMARY = (
    "Run a program in a modified environment providing an optional .env file "
    "or variables from stdin"
)


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors like every other enve error."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"error: {message}\n")


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Create the argument parser for the enve command."""
    parser = ArgumentParser(
        prog=prog or "enve",
        description=SUMMARY,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -o json
  %(prog)s -f production.env -n ./server --port 8080
  cat vars.env | %(prog)s --stdin --overwrite env
        """,
    )

    parser.add_argument(
        "-f",
        "--file",
        default=None,
        help=f"Load environment variables from a file path (default: {DEFAULT_ENV_FILE})",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output environment variables using text, json or xml format (default: text)",
    )
    parser.add_argument(
        "-w",
        "--overwrite",
        action="store_true",
        help="Overwrite environment variables if already set",
    )
    parser.add_argument(
        "-c",
        "--chdir",
        default=None,
        help="Change current working directory",
    )
    parser.add_argument(
        "-n",
        "--new-environment",
        action="store_true",
        help="Start a new environment with only variables from the .env file or stdin",
    )
    parser.add_argument(
        "-i",
        "--ignore-environment",
        action="store_true",
        help="Start with an empty environment, ignoring any existing environment variables",
    )
    parser.add_argument(
        "-z",
        "--no-file",
        action="store_true",
        help="Do not load a .env file",
    )
    parser.add_argument(
        "-s",
        "--stdin",
        action="store_true",
        help="Read only environment variables from stdin and ignore the .env file",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command and arguments to execute",
    )
    return parser


def run(
    args: argparse.Namespace,
    command: List[str],
    environ: MutableMapping[str, str],
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[TextIO] = None,
    logger: Optional[Logger] = None,
) -> int:
    """Resolve the environment, then print it or run ``command`` with it.

    Returns:
        0 after printing, otherwise the command's exit code

    Raises:
        EnveError: On any invalid argument, source or command
    """
    logger = logger or get_logger()

    if args.output is not None and command:
        raise InvalidArgumentError("output format cannot be used when executing a command")
    output = validate_format(args.output) if args.output is not None else DEFAULT_OUTPUT

    config = ResolutionConfig.from_flags(
        file=args.file,
        stdin=args.stdin,
        no_file=args.no_file,
        overwrite=args.overwrite,
        new_environment=args.new_environment,
        ignore_environment=args.ignore_environment,
        chdir=args.chdir,
    )

    result = EnvLoader(config, stdin=stdin, environ=environ, logger=logger).load()
    environment = merge(
        result,
        environ,
        overwrite=config.overwrite,
        fresh_environment=config.fresh_environment,
        ignore_environment=config.ignore_environment,
        logger=logger,
    )

    if not command:
        rendered = render(environment, output)
        if rendered:
            print(rendered, file=stdout or sys.stdout)
        return 0

    return launch(
        command,
        environment,
        working_directory=config.working_directory,
        fresh_environment=config.isolated,
        environ=environ,
        logger=logger,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    command = list(args.command)
    if command and command[0] == "--":
        command = command[1:]

    logger = get_logger()
    try:
        return run(args, command, environ=os.environ, logger=logger)
    except EnveError as e:
        logger.debug("Invocation failed", code=e.code, details=e.details)
        print(f"error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
