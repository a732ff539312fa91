# core/labels.py
"""Flag token splitting and alias naming rules"""

from typing import NamedTuple, Optional

FLAG_MARKER = "-"


class FlagToken(NamedTuple):
    """A token recognised as a flag, split into label and inline value"""
    label: str
    value: Optional[str]


def count_dashes(token: str) -> int:
    """Length of the leading run of dash characters"""
    return len(token) - len(token.lstrip(FLAG_MARKER))


def split_flag(token: str) -> Optional[FlagToken]:
    """
    Split a command line token into a flag label and inline value.

    Only tokens starting with exactly one or two dashes are flags. The label
    runs up to the first '=' and the inline value is everything after it;
    an '=' with nothing after it carries no inline value.

    Returns:
        FlagToken, or None if the token is not a flag
    """
    dashes = count_dashes(token)
    if dashes not in (1, 2):
        return None

    label, _, value = token[dashes:].partition("=")
    return FlagToken(label=label, value=value or None)


def is_valid_alias(name: str) -> bool:
    """
    Check that a flag or subcommand name is valid.

    The name must begin with a letter; the remaining characters may be
    letters, digits, hyphens and underscores.
    """
    if not name or not name[0].isalpha():
        return False
    return all(c.isalnum() or c in "_-" for c in name[1:])
