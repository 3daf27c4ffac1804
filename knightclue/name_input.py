"""Editing a player name one key press at a time."""

from __future__ import annotations

import string

MAX_NAME_LENGTH = 10
BACKSPACE = "\b"

_ALLOWED = frozenset(string.ascii_letters + string.digits)


def edit_name(name: str, key: str | None) -> str:
    """Apply one key press to a name and return the new name.

    Backspace removes the last character; an ASCII letter or digit is
    appended while the name is shorter than MAX_NAME_LENGTH; any other key,
    or no key at all, leaves the name unchanged.
    """
    if key == BACKSPACE:
        return name[:-1]
    if key is not None and len(name) < MAX_NAME_LENGTH and key in _ALLOWED:
        return name + key
    return name