"""Command-line interface: concatenate FILE(s) to standard output."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import BinaryIO, TextIO

import yaml

from .config import CatConfig, default_config, load_config, validate_config
from .errors import CatError, OutputClosedError, WriteFailureError
from .streamer import stream, stream_stdin

logger = logging.getLogger(__name__)

USAGE = """\
Usage: cat [FILE]...
Concatenate FILE(s) to standard output.

examples:
$ cat --help
$ cat ./cat.go
"""


class UsageError(Exception):
    """Raised by the parser instead of exiting the process."""


class CatArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports errors by raising and always shows the fixed banner."""

    def format_usage(self) -> str:
        return USAGE

    def format_help(self) -> str:
        return USAGE

    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> CatArgumentParser:
    """Build a fresh argument parser. Each call returns an independent instance."""
    parser = CatArgumentParser(
        prog="cat",
        description="Concatenate FILE(s) to standard output.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-h", "--help", action="store_true",
        help="Show the usage banner and exit",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to a YAML config file",
    )

    # Global logging verbosity flags
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", action="store_true",
        help="Enable debug logging output",
    )
    verbosity.add_argument(
        "--quiet", action="store_true",
        help="Suppress all log output except errors",
    )

    parser.add_argument(
        "files", metavar="FILE", nargs="*",
        help="Files to concatenate; standard input is read when none are given",
    )
    return parser


def _configure_logging(args: argparse.Namespace, log_stream: TextIO) -> None:
    # WARNING by default so log records never mix with the concatenated output
    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    else:
        log_level = logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
        stream=log_stream,
    )


def _load_settings(config_path: str | None) -> CatConfig:
    if config_path is None:
        return default_config()
    config = load_config(config_path)
    logger.debug("Config loaded from %s", config_path)
    return config


def concatenate(
    paths: list[str],
    stdin: BinaryIO,
    stdout: BinaryIO,
    buffer_size: int,
) -> list[CatError]:
    """Stream every path to ``stdout`` in order, or ``stdin`` if there are none.

    Failures do not stop processing; they are collected and returned in the
    order they occurred. The one exception is a closed output pipe: nothing
    more can be written, so the remaining paths are skipped.
    """
    errors: list[CatError] = []

    if not paths:
        try:
            stream_stdin(stdin, stdout, buffer_size)
        except OutputClosedError as e:
            logger.debug("Output closed while copying standard input")
            errors.append(e)
            return errors
        except CatError as e:
            errors.append(e)
    else:
        for path in paths:
            try:
                stream(path, stdout, buffer_size)
            except OutputClosedError as e:
                logger.debug("Output closed while streaming %s", path)
                errors.append(e)
                return errors
            except CatError as e:
                logger.debug("Failed to stream %s: %s", path, e)
                errors.append(e)

    try:
        stdout.flush()
    except BrokenPipeError as e:
        errors.append(OutputClosedError(str(e)))
    except OSError as e:
        errors.append(WriteFailureError(str(e)))

    return errors


def _discard_stdout(stdout: BinaryIO) -> None:
    """Point the process stdout at devnull so the exit-time flush cannot fail again."""
    if stdout is not getattr(sys.stdout, "buffer", None):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


def main(
    argv: list[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Main entry point for the CLI.

    Returns exit code: 0 on success, 2 on a usage error, 1 on a config
    problem, and the configured ``error_exit_status`` if any file failed.
    """
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer
    stderr = stderr if stderr is not None else sys.stderr

    parser = build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
    except UsageError as e:
        logger.debug("Usage error: %s", e)
        stderr.write(USAGE)
        return 2

    if args.help:
        stderr.write(USAGE)
        return 0

    _configure_logging(args, stderr)

    try:
        config = _load_settings(args.config)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 1
    except yaml.YAMLError as e:
        logger.error("Invalid config file %s: %s", args.config, e)
        return 1

    problems = validate_config(config)
    if problems:
        for problem in problems:
            logger.error("Config error: %s", problem)
        return 1

    try:
        errors = concatenate(args.files, stdin, stdout, config.buffer_size)
    except Exception as e:
        logger.error("%s", e)
        return 1

    # A closed output pipe ends the run quietly, like a reader killed by SIGPIPE
    if any(isinstance(err, OutputClosedError) for err in errors):
        _discard_stdout(stdout)
        errors = [err for err in errors if not isinstance(err, OutputClosedError)]

    # Deferred: every error line comes after all of the output
    for err in errors:
        stderr.write(f"{config.program_name}: {err}\n")
    stderr.flush()

    return config.error_exit_status if errors else 0


def entry() -> None:
    sys.exit(main())
