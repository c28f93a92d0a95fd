"""Exceptions raised by the attribution engine.

Everything here propagates to the CLI, which turns it into a single
diagnostic. The one failure absorbed inside the core (a missing history entry
for an empty file) never raises at all.
"""

from __future__ import annotations


class GitFameError(Exception):
    """Base class for every error gitfame reports to the user."""


class ConfigError(GitFameError, ValueError):
    """An option or configuration value is invalid."""


class GitCommandError(GitFameError):
    """A git invocation failed, exited non-zero, or could not be started."""

    def __init__(self, args: list[str], message: str, returncode: int | None = None):
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = message
        command = "git " + " ".join(self.args_list)
        if returncode is None:
            super().__init__(f"`{command}` failed: {message}")
        else:
            super().__init__(f"`{command}` exited with status {returncode}: {message}")


class BlameParseError(GitFameError, ValueError):
    """Blame output did not have the expected header/metadata/content shape."""

    def __init__(self, file_path: str, line_number: int, reason: str):
        self.file_path = file_path
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{file_path}: malformed blame output at line {line_number}: {reason}")
