"""Process exit codes for the command-line tool."""

from __future__ import annotations

import enum


class ExitCode(enum.IntEnum):
    """Exit statuses a command can finish with."""

    OK = 0
    ERROR = 1
    USAGE = 2
    EMPTY = 3
    AUTH_REQUIRED = 4
    NOT_FOUND = 5
    PERMISSION_DENIED = 6
    RATE_LIMITED = 7
    RETRYABLE = 8
    CONFIG = 10
    CANCELLED = 130

    @classmethod
    def from_status(cls, code: int) -> ExitCode:
        """Map a numeric status to an exit code; unknown statuses become ``ERROR``."""
        try:
            return cls(code)
        except ValueError:
            return cls.ERROR