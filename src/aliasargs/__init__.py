"""Declarative command line arguments with typed, multi-alias flags"""

from aliasargs.cli import Cli, Example, Subcommand
from aliasargs.core import ArgumentSet, LabelRegistry, ValueType
from aliasargs.errors import (
    AliasArgsError,
    AliasError,
    DuplicateAliasError,
    InvalidAliasNameError,
    KeyNotFoundError,
    ParseError,
    TypeCoercionError,
    UnrecognizedLabelError,
)

__version__ = "0.1.0"

__all__ = [
    'Cli',
    'Example',
    'Subcommand',
    'ArgumentSet',
    'LabelRegistry',
    'ValueType',
    'AliasArgsError',
    'AliasError',
    'DuplicateAliasError',
    'InvalidAliasNameError',
    'KeyNotFoundError',
    'ParseError',
    'TypeCoercionError',
    'UnrecognizedLabelError'
]
