# core/argument_set.py
"""Required arguments and defaulted parameters of one subcommand"""

from typing import Sequence

from aliasargs.core.labels import is_valid_alias
from aliasargs.core.registry import LabelRegistry
from aliasargs.core.values import Value, ValueType
from aliasargs.errors import DuplicateAliasError, InvalidAliasNameError, KeyNotFoundError
from aliasargs.utils.logging_manager import get_logger

logger = get_logger(__name__)


class ArgumentSet:
    """
    Pairs a registry of required arguments with a registry of parameters.

    Required arguments have no default, so reading one that was not given
    fails. Parameters are set to their default when registered. No alias
    may appear twice across the two registries.
    """

    def __init__(self):
        self.arguments = LabelRegistry()
        self.parameters = LabelRegistry()

    def check_aliases_allowed(self, aliases: Sequence[str]) -> None:
        """
        Check a set of aliases is valid and not already in use.

        Raises:
            InvalidAliasNameError: If an alias breaks the naming rule
            DuplicateAliasError: If an alias is used by either registry
        """
        if not aliases:
            raise InvalidAliasNameError("", "an argument needs at least one alias")

        for alias in aliases:
            if not is_valid_alias(alias):
                raise InvalidAliasNameError(alias)

        seen = set()
        for alias in aliases:
            if alias in seen or self.has_alias(alias):
                raise DuplicateAliasError(alias)
            seen.add(alias)

    def has_alias(self, alias: str) -> bool:
        return self.arguments.has_alias(alias) or self.parameters.has_alias(alias)

    def add_required(self, aliases: Sequence[str], doc: str, value_type: ValueType) -> None:
        """
        Add a required argument.

        Reading the argument fails unless it was given on the command line.
        Nothing is registered if an alias is invalid or already in use.
        """
        self.check_aliases_allowed(aliases)
        self.arguments.register(aliases, doc, value_type)

    def add_parameter_with_default(
        self, aliases: Sequence[str], doc: str, value_type: ValueType, default: Value
    ) -> None:
        """
        Add a parameter that holds a default until the command line sets it.

        Raises:
            InvalidAliasNameError: If an alias breaks the naming rule
            DuplicateAliasError: If an alias is already in use
            TypeError: If the default is not a value of value_type
        """
        self.check_aliases_allowed(aliases)
        if not value_type.accepts(default):
            raise TypeError(
                f"Default {default!r} for {list(aliases)} is not a {value_type.value}"
            )

        self.parameters.register(aliases, doc, value_type)
        self.parameters.set(aliases, value_type.normalise(default))
        logger.debug(f"Default for {list(aliases)}: {default!r}")

    def parse(self, tokens: Sequence[str], strict: bool = False) -> None:
        """Parse the flags into both registries"""
        self.arguments.parse(tokens, strict=strict)
        self.parameters.parse(tokens, strict=strict)

    def get(self, alias: str, value_type: ValueType) -> Value:
        """Look the alias up among required arguments, then parameters"""
        try:
            return self.arguments.get(alias, value_type)
        except KeyNotFoundError:
            return self.parameters.get(alias, value_type)

    def get_int(self, alias: str) -> int:
        return self.get(alias, ValueType.INT)

    def get_float(self, alias: str) -> float:
        return self.get(alias, ValueType.FLOAT)

    def get_str(self, alias: str) -> str:
        return self.get(alias, ValueType.STR)

    def get_bool(self, alias: str) -> bool:
        return self.get(alias, ValueType.BOOL)

    def argument_help(self) -> str:
        s = self.arguments.help_text()
        return f"ARGUMENTS\n{s}\n\n" if s else ""

    def option_help(self) -> str:
        s = self.parameters.help_text()
        return f"OPTIONS\n{s}\n\n" if s else ""

    def help_text(self) -> str:
        """Argument and option sections, leaving out empty ones"""
        return self.argument_help() + self.option_help()
