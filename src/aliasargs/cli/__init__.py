"""Subcommands and the application that dispatches to them"""

from aliasargs.cli.app import Cli
from aliasargs.cli.example import Example
from aliasargs.cli.registry import SubcommandRegistry
from aliasargs.cli.subcommand import Subcommand

__all__ = [
    'Cli',
    'Example',
    'Subcommand',
    'SubcommandRegistry'
]
