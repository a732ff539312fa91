# errors.py
"""Exceptions raised while registering, parsing and reading arguments"""

from typing import Optional


class AliasArgsError(Exception):
    """Base class for all aliasargs errors"""


class AliasError(AliasArgsError, ValueError):
    """An alias group could not be registered"""

    def __init__(self, alias: str, message: str):
        super().__init__(message)
        self.alias = alias


class DuplicateAliasError(AliasError):
    """Alias is already claimed by another group in the argument set"""

    def __init__(self, alias: str):
        super().__init__(alias, f"Alias '{alias}' is already in use")


class InvalidAliasNameError(AliasError):
    """
    Alias does not satisfy the naming rule: a letter followed by letters,
    digits, underscores or hyphens.
    """

    def __init__(self, alias: str, reason: Optional[str] = None):
        message = f"Alias '{alias}' is not valid"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(alias, message)


class ParseError(AliasArgsError):
    """A flag could not be bound while scanning the argument vector"""

    def __init__(self, label: str, message: str):
        super().__init__(message)
        self.label = label


class UnrecognizedLabelError(ParseError):
    """Label is not bound to any alias group"""

    def __init__(self, label: str):
        super().__init__(label, f"The label '{label}' is not a known argument")


class TypeCoercionError(ParseError, ValueError):
    """Value text does not parse as the type the label is bound to"""

    def __init__(self, label: str, value: str, type_name: str):
        super().__init__(
            label, f"Value '{value}' for '{label}' is not a valid {type_name}"
        )
        self.value = value
        self.type_name = type_name


class KeyNotFoundError(AliasArgsError, LookupError):
    """No value was set, by default or by parsing, for the requested alias"""

    def __init__(self, alias: str, type_name: str):
        super().__init__(f"No {type_name} value available for '{alias}'")
        self.alias = alias
        self.type_name = type_name
