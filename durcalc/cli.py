"""Command-line front end: sum durations from arguments and standard input.

Examples:
    $ durcalc "3d 20h 10m 15s"
    92h 10m 15s

    $ durcalc "-1y 3h 40m"
    -8763h 40m 00s

    $ printf '24h\\n24m\\n' | durcalc 25m
    24h 24m 00s
    24h 49m 00s

    $ echo 1m | durcalc --compact --total-prefix total --stdin-sum-prefix today - 2m
    today 0h01m00s
    total -0h01m00s
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from durcalc.config import CliConfig, load_config
from durcalc.duration import ZERO, total
from durcalc.formatting import format_duration
from durcalc.parser import InvalidExpression, parse_duration

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DUPLICATE_FLAG = 1
EXIT_AMBIGUOUS_PREFIX = 2
EXIT_MISSING_TOTAL_PREFIX = 3
EXIT_MISSING_STDIN_PREFIX = 4
EXIT_INVALID_EXPRESSION = 5
EXIT_INVALID_CONFIG = 6

_COMPACT_FLAGS = ("-c", "--compact")
_TOTAL_PREFIX_FLAGS = ("-t", "--total-prefix")
_STDIN_PREFIX_FLAGS = ("-s", "--stdin-sum-prefix")
_VERBOSE_FLAGS = ("-v", "--verbose")
_HELP_FLAGS = ("-h", "--help")

USAGE = """\
Usage:

{prog} [Options] [Duration String]

where Options:
-c|--compact\tCompact output
-t|--total-prefix <prefix>\tPrefix the end sum with <prefix>
-s|--stdin-sum-prefix <prefix>\tPrefix the stdin sum with <prefix>
-v|--verbose\tLog parsing steps to stderr
-h|--help\tShow this message
"""


class UsageError(Exception):
    """Raised for malformed command lines; carries the process exit code."""

    def __init__(self, message: str, exit_code: int):
        self.exit_code: int = exit_code
        super().__init__(message)


@dataclass(slots=True)
class Options:
    compact: bool = False
    total_prefix: str = ""
    stdin_sum_prefix: str = ""
    verbose: bool = False
    show_help: bool = False
    durations: list[str] = field(default_factory=list)

    @property
    def expression(self) -> str:
        return " ".join(self.durations)


def _spaced(prefix: str) -> str:
    return f"{prefix} " if prefix else ""


def parse_arguments(argv: list[str], config: CliConfig | None = None) -> Options:
    """Scan arguments left to right into Options.

    Negative durations such as ``-1y`` look like flags, so this is a plain
    scan rather than an option parser: anything that is not a known flag or
    a prefix value is a duration argument.

    Raises:
        UsageError: On repeated flags, a flag-like prefix value, or a prefix
            flag without a value
    """
    config = config or CliConfig()
    options = Options(
        compact=config.compact,
        total_prefix=_spaced(config.total_prefix),
        stdin_sum_prefix=_spaced(config.stdin_sum_prefix),
    )
    seen: set[str] = set()
    total_prefix_open = False
    stdin_prefix_open = False

    for arg in argv:
        flag = None
        for group in (
            _COMPACT_FLAGS,
            _TOTAL_PREFIX_FLAGS,
            _STDIN_PREFIX_FLAGS,
            _VERBOSE_FLAGS,
            _HELP_FLAGS,
        ):
            if arg in group:
                flag = group[0]

        if flag is not None:
            if flag in seen:
                raise UsageError(f"{arg} provided more than once", EXIT_DUPLICATE_FLAG)
            seen.add(flag)
            if flag == "-c":
                options.compact = True
            elif flag == "-v":
                options.verbose = True
            elif flag == "-h":
                options.show_help = True
            elif flag == "-t":
                total_prefix_open = True
            else:
                stdin_prefix_open = True
            continue

        if (total_prefix_open or stdin_prefix_open) and arg.startswith("-"):
            raise UsageError(f"ambiguous prefix {arg}", EXIT_AMBIGUOUS_PREFIX)
        # Both prefixes may be open at once; the total prefix is filled first
        if total_prefix_open:
            options.total_prefix = _spaced(arg)
            total_prefix_open = False
            continue
        if stdin_prefix_open:
            options.stdin_sum_prefix = _spaced(arg)
            stdin_prefix_open = False
            continue

        options.durations.append(arg)

    if total_prefix_open:
        raise UsageError(
            "error parsing total summary prefix", EXIT_MISSING_TOTAL_PREFIX
        )
    if stdin_prefix_open:
        raise UsageError(
            "error parsing stdin_total summary prefix", EXIT_MISSING_STDIN_PREFIX
        )
    return options


def run(
    argv: list[str],
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    config: CliConfig | None = None,
    prog: str = "durcalc",
) -> int:
    """Execute the command line and return the process exit code."""
    try:
        options = parse_arguments(argv, config)
    except UsageError as e:
        print(e, file=stderr)
        print(file=stderr)
        print(USAGE.format(prog=prog), end="", file=stderr)
        return e.exit_code

    if options.show_help:
        print(USAGE.format(prog=prog), end="", file=stdout)
        return EXIT_OK

    level = logging.DEBUG if options.verbose else (config or CliConfig()).level
    logging.basicConfig(
        level=level, format="%(levelname)s:%(name)s:%(message)s", stream=stderr
    )

    result = ZERO
    printed = False

    try:
        # Standard input is only read when it is redirected
        if not stdin.isatty():
            result = total(parse_duration(line.rstrip("\r\n")) for line in stdin)
            rendered = format_duration(result, options.compact)
            print(f"{options.stdin_sum_prefix}{rendered}", file=stdout)
            printed = True

        from_args = parse_duration(options.expression)
    except InvalidExpression as e:
        print(e, file=stderr)
        return EXIT_INVALID_EXPRESSION

    # A zero argument sum is not repeated after a stdin subtotal
    if from_args or not printed:
        result = result + from_args
        LOGGER.debug("total %r", result)
        rendered = format_duration(result, options.compact)
        print(f"{options.total_prefix}{rendered}", file=stdout)
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    try:
        config = load_config()
    except ValueError as e:
        print(e, file=sys.stderr)
        sys.exit(EXIT_INVALID_CONFIG)
    sys.exit(run(argv, sys.stdin, sys.stdout, sys.stderr, config=config))


if __name__ == "__main__":
    main()
