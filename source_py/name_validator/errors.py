"""
Error taxonomy and exit code mapping for the name validator.
"""

from typing import Optional


class NameValidatorError(Exception):
    """Base error for deterministic CLI exit codes."""

    exit_code: int = 1


class UsageError(NameValidatorError):
    """Missing or invalid command-line arguments."""

    exit_code = 2


class ParseError(NameValidatorError):
    """The canonical-name document is not valid JSON or cannot be read."""


class FormatError(NameValidatorError):
    """The canonical-name document is valid JSON but has the wrong shape."""


class NoCandidatesError(NameValidatorError):
    """No canonical names are available to match against."""


class RenameError(NameValidatorError):
    """A single file could not be renamed."""

    def __init__(self, source: str, target: str, reason: Optional[str] = None):
        self.source = source
        self.target = target
        self.reason = reason
        message = f"{source} -> {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def exit_code_for_exception(exc: BaseException) -> int:
    """Resolve the process exit code for an exception."""
    if isinstance(exc, NameValidatorError):
        return exc.exit_code
    return 1
