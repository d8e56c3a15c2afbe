"""Interactive confirmation before destructive actions."""

from __future__ import annotations

import sys


def confirm_destructive(message: str, force: bool = False, no_input: bool = False) -> bool:
    """Ask the user to confirm; ``force`` always agrees, ``no_input`` always declines."""
    if force:
        return True

    if no_input:
        print(
            "error: destructive operation requires confirmation "
            "(use --force in non-interactive mode)",
            file=sys.stderr,
        )
        return False

    print(f"{message} [y/N] ", end="", file=sys.stderr)
    try:
        sys.stderr.flush()
    except OSError:
        pass

    try:
        answer = sys.stdin.readline()
    except (OSError, ValueError):
        return False

    return answer.strip().lower() in ("y", "yes")