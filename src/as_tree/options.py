"""Command-line option interpreter — pure, no I/O."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from as_tree import (
    EmptyArgumentError,
    ExtraArgumentError,
    HelpRequested,
    InvalidValueError,
    MissingValueError,
    NoArgumentsError,
    UnknownOptionError,
)

logger = logging.getLogger(__name__)

USAGE: Final[str] = """\
Print a list of paths as a tree of paths.

Usage:
  as-tree [options] [<filename>]

Arguments:
  <filename>        The file to read from. When omitted, reads from stdin.

Options:
  --color (always|auto|never)
                    Whether to colorize the output [default: auto]
  -h, --help        Print this help message

Example:
  find . -name '*.txt' | as-tree
"""

HELP_FLAGS: Final[frozenset[str]] = frozenset({"-h", "--help"})
COLOR_FLAG: Final[str] = "--color"


class ColorPolicy(enum.Enum):
    """Whether the renderer should colorize its output."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


def parse_color(value: str) -> ColorPolicy:
    """Parse a ``--color`` value.

    Matching is exact and case-sensitive.

    Args:
        value: Raw token following ``--color``.

    Returns:
        ColorPolicy: Matching policy.

    Raises:
        ValueError: If ``value`` is not ``always``, ``auto`` or ``never``.
    """
    if value == "always":
        return ColorPolicy.ALWAYS
    if value == "auto":
        return ColorPolicy.AUTO
    if value == "never":
        return ColorPolicy.NEVER
    raise ValueError(f"Unknown color policy '{value}'")


@dataclass(frozen=True, slots=True)
class Options:
    """Validated command-line configuration.

    Attributes:
        input_path: File to read paths from. ``None`` means stdin.
        color_policy: Requested colorization policy.
    """

    input_path: str | None = None
    color_policy: ColorPolicy = ColorPolicy.AUTO

    @property
    def reads_stdin(self) -> bool:
        return self.input_path is None


def parse_options(argv: Sequence[str]) -> Options:
    """Interpret a full argument list, program name included.

    Tokens are scanned once, left to right. ``--color`` consumes the token
    after it; everything else consumes one token. Errors are raised at
    the first offending token, so a ``--help`` after a bad token is never
    reached.

    Args:
        argv: Process arguments, ``argv[0]`` being the program name.

    Returns:
        Options: Parsed configuration.

    Raises:
        NoArgumentsError: If ``argv`` is empty.
        HelpRequested: On ``-h`` or ``--help``.
        UsageError: On any malformed argument (see subclasses).
    """
    if not argv:
        raise NoArgumentsError()

    input_path: str | None = None
    color_policy = ColorPolicy.AUTO

    tokens = iter(argv[1:])
    for arg in tokens:
        if not arg:
            raise EmptyArgumentError("Unrecognized argument:", arg)

        if arg in HELP_FLAGS:
            raise HelpRequested()

        if arg == COLOR_FLAG:
            value = next(tokens, None)
            if value is None:
                raise MissingValueError("Unrecognized option: --color", arg)
            try:
                color_policy = parse_color(value)
            except ValueError as exc:
                raise InvalidValueError("Unrecognized option: --color", value) from exc
            logger.debug("color policy set to %s", color_policy.value)
            continue

        if arg.startswith("-"):
            raise UnknownOptionError("Unrecognized option:", arg)

        if input_path is not None:
            raise ExtraArgumentError("Extra argument:", arg)

        input_path = arg

    options = Options(input_path=input_path, color_policy=color_policy)
    logger.debug("parsed options: %s", options)
    return options
