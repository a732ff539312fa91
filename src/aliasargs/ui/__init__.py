"""User interface components"""

from aliasargs.ui.help_printer import HelpPrinter

__all__ = [
    'HelpPrinter'
]
