# cli/example.py
"""Usage examples attached to a subcommand"""

from dataclasses import dataclass


@dataclass
class Example:
    """
    An example of a subcommand in use.
    Shown in the EXAMPLES section of the subcommand help.
    """
    documentation: str      # Context or explanation, e.g. "search recursively"
    command: str            # Command text, e.g. 'grep -r "hello world" .'
    output: str = ""        # Plausible output of the command

    def help_message(self) -> str:
        """Render the example as shell-prompt lines"""
        message = ""
        if self.documentation:
            message += f"$ # {self.documentation}\n"
        message += f"$ {self.command}\n"
        if self.output:
            message += f"{self.output}\n\n"
        return message
