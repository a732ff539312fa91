# cli/app.py
"""CLI application: routes the argument vector to a subcommand or help"""

import sys
from pathlib import Path
from typing import Optional, Sequence

from aliasargs.cli.registry import HELP_COMMANDS, VERSION_COMMANDS, SubcommandRegistry
from aliasargs.cli.subcommand import Subcommand
from aliasargs.config.loader import SettingsLoader
from aliasargs.errors import KeyNotFoundError, ParseError
from aliasargs.models.settings import CliSettings
from aliasargs.ui.help_printer import HelpPrinter
from aliasargs.utils.logging_manager import (
    LogLevel,
    get_logger,
    set_verbosity,
    setup_log_file,
)

logger = get_logger(__name__)


class Cli:
    """
    CLI application container that manages:
    - Subcommand registration
    - Help and version output
    - Dispatch of the argument vector to a subcommand
    """

    def __init__(
        self,
        version: str,
        documentation: str,
        strict: bool = False,
        verbosity: Optional[LogLevel] = None,
        log_file: Optional[Path] = None,
        help_printer: Optional[HelpPrinter] = None,
    ):
        """
        Initialise an application with no subcommands.

        Args:
            version: Version of the application, e.g. "2.1.3", "beta", "latest"
            documentation: Brief documentation of the application
            strict: Fail a subcommand when a flag value cannot be coerced
            verbosity: Console log verbosity, left unchanged if None
            log_file: Optional file receiving every log record
            help_printer: Printer for help output (defaults to stdout)
        """
        if verbosity is not None:
            set_verbosity(verbosity)
        if log_file is not None:
            setup_log_file(Path(log_file))

        self.version = version
        self.documentation = documentation
        self.strict = strict
        self.subcommands = SubcommandRegistry()
        self.help_printer = help_printer or HelpPrinter()

    @classmethod
    def from_settings(cls, settings: CliSettings, **kwargs) -> "Cli":
        """Create an application from validated settings"""
        return cls(
            version=settings.version,
            documentation=settings.documentation,
            strict=settings.strict,
            verbosity=settings.log_level,
            log_file=Path(settings.log_file) if settings.log_file else None,
            **kwargs,
        )

    @classmethod
    def from_yaml(cls, config_path: Path, **kwargs) -> "Cli":
        """
        Create an application from a YAML settings file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the settings are invalid
        """
        return cls.from_settings(SettingsLoader(config_path).load(), **kwargs)

    def add_subcommand(self, subcommand: Subcommand) -> Subcommand:
        """Add a subcommand to the application"""
        self.subcommands.register(subcommand)
        return subcommand

    def print_help(self, name: str = "") -> None:
        """
        Print a help message.

        If name matches a subcommand, the help for that subcommand is printed.
        Otherwise the help message for the application is printed.
        """
        subcommand = self.subcommands.get(name) if name else None
        if subcommand is not None:
            self.help_printer.print_subcommand_help(subcommand)
            return
        self.help_printer.print_cli_help(self.documentation, self.subcommands.get_all())

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """
        Either print help or run a subcommand.

        Args:
            argv: Full argument vector including the program name
                (defaults to sys.argv)

        Returns:
            Process exit code
        """
        argv = list(sys.argv if argv is None else argv)

        if len(argv) < 2:
            self.print_help()
            return 0

        command = argv[1]
        if command in HELP_COMMANDS:
            self.print_help(argv[2] if len(argv) > 2 else "")
            return 0
        if command in VERSION_COMMANDS:
            self.help_printer.print_version(self.version)
            return 0

        subcommand = self.subcommands.get(command)
        if subcommand is None:
            logger.error(f"Unknown subcommand '{command}'")
            self.print_help()
            return 1

        logger.info(f"Running '{command}' with {argv[2:]}")
        return self._execute(subcommand, argv[2:])

    def _execute(self, subcommand: Subcommand, tokens: list[str]) -> int:
        """Parse flags into the subcommand and run its handler"""
        try:
            subcommand.parse(tokens, strict=self.strict)
            subcommand.run()
            return 0

        except (KeyNotFoundError, ParseError) as e:
            logger.error(f"Invalid arguments for '{subcommand.name}': {e}")
            self.help_printer.print_subcommand_help(subcommand)
            return 1
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except Exception as e:
            logger.error(f"Subcommand '{subcommand.name}' failed: {e}")
            logger.debug("Traceback:", exc_info=True)
            return 1
