"""CLI entry point for as-tree — I/O boundary only."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence

from as_tree import HelpRequested, NoArgumentsError, UsageError
from as_tree.options import USAGE, Options, parse_options

logger = logging.getLogger(__name__)

Renderer = Callable[[Options], int]


def format_diagnostic(error: UsageError) -> str:
    """Render a usage error the way it is shown to the user.

    Args:
        error: Error raised by ``parse_options``.

    Returns:
        str: Message, quoted token, blank line, then the usage text.
    """
    return f"{error}\n\n{USAGE}"


def parse_options_or_exit(argv: Sequence[str] | None = None) -> Options:
    """Parse process arguments, exiting on help or on any error.

    Help goes to stdout with status 0. An empty argument list writes only
    the usage text to stdout with status 1. Every other error writes a
    diagnostic to stderr with status 1.

    Args:
        argv: Full argument list including program name. ``None`` uses
            ``sys.argv``.

    Returns:
        Options: Parsed configuration. Does not return on exit paths.
    """
    if argv is None:
        argv = sys.argv

    try:
        return parse_options(argv)
    except HelpRequested as exc:
        sys.stdout.write(USAGE)
        sys.exit(exc.exit_code)
    except NoArgumentsError as exc:
        sys.stdout.write(USAGE)
        sys.exit(exc.exit_code)
    except UsageError as exc:
        sys.stderr.write(format_diagnostic(exc))
        sys.exit(exc.exit_code)


def _default_renderer(options: Options) -> int:
    # Tree building and rendering live outside this package.
    logger.debug(
        "render: input=%s color=%s",
        "<stdin>" if options.reads_stdin else options.input_path,
        options.color_policy.value,
    )
    return 0


def main(argv: Sequence[str] | None = None, renderer: Renderer | None = None) -> int:
    """Run the CLI entry point with process arguments.

    Args:
        argv: Full argument list including program name. ``None`` uses
            ``sys.argv``.
        renderer: Callable that consumes the parsed options and returns the
            process exit status.

    Returns:
        int: Exit status from the renderer.
    """
    options = parse_options_or_exit(argv)
    return (renderer or _default_renderer)(options)
