"""Shared helpers: Rich output and subprocess execution."""

from dnhealth.utils.formatting import console, err_console, print_error, print_warning
from dnhealth.utils.shell import CommandResult, run_command

__all__ = [
    "CommandResult",
    "console",
    "err_console",
    "print_error",
    "print_warning",
    "run_command",
]
