# cli/registry.py
"""Subcommand registry of a Cli"""

from typing import Optional

from aliasargs.cli.subcommand import Subcommand
from aliasargs.errors import DuplicateAliasError, InvalidAliasNameError
from aliasargs.utils.logging_manager import get_logger

logger = get_logger(__name__)

HELP_COMMANDS = ("help", "-h", "--help")
VERSION_COMMANDS = ("version", "--version")
RESERVED_NAMES = ("help", "version")


class SubcommandRegistry:
    """Simple registry for subcommands, kept in registration order"""

    def __init__(self):
        self._subcommands: dict[str, Subcommand] = {}

    def register(self, subcommand: Subcommand) -> None:
        """
        Register a subcommand.

        Raises:
            InvalidAliasNameError: If the name is reserved for help or version
            DuplicateAliasError: If a subcommand with the name exists
        """
        if subcommand.name in RESERVED_NAMES:
            raise InvalidAliasNameError(subcommand.name, "the name is reserved")
        if subcommand.name in self._subcommands:
            raise DuplicateAliasError(subcommand.name)

        self._subcommands[subcommand.name] = subcommand
        logger.debug(f"Registered subcommand: {subcommand.name}")

    def get(self, name: str) -> Optional[Subcommand]:
        """Get subcommand by name"""
        return self._subcommands.get(name)

    def get_all(self) -> list[Subcommand]:
        """Get all registered subcommands"""
        return list(self._subcommands.values())

    def __contains__(self, name: str) -> bool:
        return name in self._subcommands

    def __len__(self) -> int:
        return len(self._subcommands)
