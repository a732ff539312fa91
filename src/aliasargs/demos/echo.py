# demos/echo.py
"""Echo demo - a single subcommand printing a string"""

import sys
from typing import Optional, Sequence

from aliasargs.cli.app import Cli
from aliasargs.cli.subcommand import Subcommand
from aliasargs.core.values import ValueType
from aliasargs.errors import KeyNotFoundError


def echo_subcommand() -> Subcommand:
    """Get the subcommand that echoes a string"""
    sub = Subcommand("echo", "Echo a string.")
    sub.add_required(["s", "text"], "A string to echo", ValueType.STR)
    sub.example("Echo a string", "simpleecho echo -s=example_string", "example_string")
    sub.example("Echo a string", 'simpleecho echo --s "example string"', "example string")

    @sub.handle
    def echo(handler: Subcommand) -> None:
        try:
            print(handler.get_str("s"))
        except KeyNotFoundError:
            print("No string found!")

    return sub


def build_cli() -> Cli:
    cli = Cli("latest", "A simple echo command line tool.")
    cli.add_subcommand(echo_subcommand())
    return cli


def main(argv: Optional[Sequence[str]] = None) -> int:
    return build_cli().run(argv)


if __name__ == "__main__":
    sys.exit(main())
