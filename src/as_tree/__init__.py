"""as-tree — print a list of paths as a tree of paths."""

__version__ = "0.1.0"


class AsTreeExit(Exception):
    """Base for every condition that stops argument interpretation early.

    The interpreter itself never exits the process. ``as_tree.cli`` catches
    these, writes the matching output and exits with ``exit_code``.
    """

    exit_code = 1


class HelpRequested(AsTreeExit):
    """``-h`` or ``--help`` was given. Usage goes to stdout, exit 0."""

    exit_code = 0


class NoArgumentsError(AsTreeExit):
    """The argument list was empty, not even a program name.

    Usage goes to stdout (not stderr) and the process exits with 1.
    """


class UsageError(AsTreeExit):
    """User-facing argument error.

    Raised for malformed command lines. The message and the offending
    token are printed to stderr followed by the usage text, and the
    process exits with code 1.

    Attributes:
        message: Human-readable description, e.g. ``Extra argument:``.
        token: The argument the error is about.
    """

    def __init__(self, message: str, token: str) -> None:
        super().__init__(f"{message} '{token}'")
        self.message = message
        self.token = token


class MissingValueError(UsageError):
    """An option that takes a value was the last token."""


class InvalidValueError(UsageError):
    """An option value is not in the option's vocabulary."""


class UnknownOptionError(UsageError):
    """A token starts with ``-`` but matches no known option."""


class EmptyArgumentError(UsageError):
    """A zero-length argument was supplied."""


class ExtraArgumentError(UsageError):
    """A second positional argument was supplied."""
