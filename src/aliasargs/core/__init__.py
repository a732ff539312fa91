"""Core argument registry and parser"""

from aliasargs.core.argument_set import ArgumentSet
from aliasargs.core.labels import FlagToken, is_valid_alias, split_flag
from aliasargs.core.registry import AliasGroup, LabelRegistry
from aliasargs.core.values import Value, ValueType

__all__ = [
    'ArgumentSet',
    'AliasGroup',
    'LabelRegistry',
    'FlagToken',
    'is_valid_alias',
    'split_flag',
    'Value',
    'ValueType'
]
