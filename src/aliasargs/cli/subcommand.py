# cli/subcommand.py
"""Subcommand: named argument set plus the function that handles it"""

from typing import Callable, Sequence

from aliasargs.cli.example import Example
from aliasargs.core.argument_set import ArgumentSet
from aliasargs.core.labels import is_valid_alias
from aliasargs.core.values import Value, ValueType
from aliasargs.errors import InvalidAliasNameError
from aliasargs.utils.logging_manager import get_logger

logger = get_logger(__name__)

Handler = Callable[["Subcommand"], None]


def _do_nothing(subcommand: "Subcommand") -> None:
    pass


class Subcommand:
    """
    A CLI subcommand.

    Every alias of an argument refers to the same value: with the aliases
    ["a", "apple"], get_int("a") equals get_int("apple") whichever one the
    user wrote on the command line.

    Example:
        add = Subcommand("add", "Add two numbers together.")
        add.add_required(["first", "f"], "first integer argument", ValueType.INT)
        add.add_parameter_with_default(["verbose", "v"], "explain", ValueType.BOOL, False)

        @add.handle
        def _(sub):
            print(sub.get_int("f"))
    """

    def __init__(self, name: str, documentation: str):
        """
        Args:
            name: Name the subcommand is invoked by; follows the alias naming rule
            documentation: One-line description for help output

        Raises:
            InvalidAliasNameError: If the name is not valid
        """
        if not is_valid_alias(name):
            raise InvalidAliasNameError(name, "subcommand names follow the alias naming rule")

        self.name = name
        self.documentation = documentation
        self.arguments = ArgumentSet()
        self.examples: list[Example] = []
        self._handler: Handler = _do_nothing

    # === Setup ===

    def add_required(self, aliases: Sequence[str], doc: str, value_type: ValueType) -> None:
        """Add an argument the handler cannot read unless the user sets it"""
        self.arguments.add_required(aliases, doc, value_type)

    def add_parameter_with_default(
        self, aliases: Sequence[str], doc: str, value_type: ValueType, default: Value
    ) -> None:
        """Add an optional parameter with a default value"""
        self.arguments.add_parameter_with_default(aliases, doc, value_type, default)

    def example(self, documentation: str, command: str, output: str = "") -> None:
        """Add an example of the subcommand in use"""
        self.examples.append(Example(documentation, command, output))

    def handle(self, func: Handler) -> Handler:
        """Set the function run for this subcommand; usable as a decorator"""
        self._handler = func
        return func

    # === Execution ===

    def parse(self, tokens: Sequence[str], strict: bool = False) -> None:
        """Parse the flags following the subcommand name"""
        self.arguments.parse(tokens, strict=strict)

    def run(self) -> None:
        logger.debug(f"Running subcommand '{self.name}'")
        self._handler(self)

    def get_int(self, alias: str) -> int:
        return self.arguments.get_int(alias)

    def get_float(self, alias: str) -> float:
        return self.arguments.get_float(alias)

    def get_str(self, alias: str) -> str:
        return self.arguments.get_str(alias)

    def get_bool(self, alias: str) -> bool:
        return self.arguments.get_bool(alias)

    # === Help ===

    def example_help(self) -> str:
        if not self.examples:
            return ""
        return "EXAMPLES\n" + "".join(ex.help_message() for ex in self.examples)

    def help_text(self) -> str:
        """Documentation, arguments, options and examples"""
        return f"{self.documentation}\n\n{self.arguments.help_text()}{self.example_help()}"

    def __repr__(self) -> str:
        return f"Subcommand(name={self.name!r})"
