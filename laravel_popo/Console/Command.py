from __future__ import annotations

from typing import Any, Dict, List, Optional
from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
import re
import sys

from laravel_popo.Log import logger


@dataclass
class InputDefinition:
    """Represents command input definition."""
    name: str
    description: str = ""
    default: Any = None
    required: bool = True
    is_array: bool = False


@dataclass
class OptionDefinition:
    """Represents command option definition."""
    name: str
    shortcut: Optional[str] = None
    description: str = ""
    default: Any = None
    is_array: bool = False
    mode: str = "optional"  # optional, required, none (boolean)


class CommandException(Exception):
    """Base exception for command errors."""

    def __init__(self, message: str, recovery_suggestions: Optional[List[str]] = None,
                 context_data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.recovery_suggestions = recovery_suggestions or []
        self.context_data = context_data or {}


class ValidationException(CommandException):
    """Exception for invalid command input."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class Command(ABC):
    """Laravel-style Artisan command base class."""

    # Command signature (to be overridden)
    signature: str = ""
    description: str = ""
    help: str = ""

    # Hidden from command lists
    hidden: bool = False

    def __init__(self) -> None:
        self.name: str = ""
        self.arguments: Dict[str, Any] = {}
        self.options: Dict[str, Any] = {}
        self.interactive: bool = True
        self._input_definitions: List[InputDefinition] = []
        self._option_definitions: List[OptionDefinition] = []
        self._exit_code: int = 0
        self._logger: logging.Logger = logging.getLogger(f"command.{self.__class__.__name__}")
        self._parse_signature()

    @abstractmethod
    async def handle(self) -> None:
        """Execute the command."""
        pass

    async def safe_execute(self) -> int:
        """Execute the command, turning failures into an exit code."""
        try:
            await self.handle()
            return self._exit_code
        except KeyboardInterrupt:
            self.comment("Command interrupted by user")
            return 130
        except CommandException as e:
            self.error(str(e))
            for suggestion in e.recovery_suggestions:
                self.comment(suggestion)
            logger().error(f"Command [{self.get_name()}] failed: {e}", e.context_data)
            return 1
        except Exception as e:
            self.error(f"{type(e).__name__}: {e}")
            logger().error(f"Command [{self.get_name()}] failed: {type(e).__name__}: {e}")
            self._logger.debug("Command failure", exc_info=True)
            return 1

    def _parse_signature(self) -> None:
        """Parse the command signature to extract arguments and options."""
        if not self.signature:
            return

        # Parse command name (first word)
        parts = self.signature.split()
        self.name = parts[0] if parts else ""

        # Find arguments/options in curly braces
        for match in re.findall(r'\{([^}]+)\}', self.signature):
            arg_def = match.strip()

            if arg_def.startswith('--'):
                self._parse_option_definition(arg_def[2:])
            else:
                self._parse_argument_definition(arg_def)

    def _parse_argument_definition(self, arg_def: str) -> None:
        # Parse description first so markers are read from the name only
        name = arg_def
        description = ""
        if ':' in arg_def:
            name, description = arg_def.split(':', 1)
            description = description.strip()
        name = name.strip()

        is_array = name.endswith('*')
        name = name.rstrip('*')
        is_optional = name.endswith('?')
        name = name.rstrip('?')

        default = None
        if '=' in name:
            name, default = name.split('=', 1)
            is_optional = True

        self._input_definitions.append(InputDefinition(
            name=name.strip(),
            description=description,
            default=default,
            required=not is_optional,
            is_array=is_array
        ))

    def _parse_option_definition(self, opt_def: str) -> None:
        description = ""
        if ':' in opt_def:
            opt_def, description = opt_def.split(':', 1)
            description = description.strip()
        opt_def = opt_def.strip()

        is_array = opt_def.endswith('=*')
        has_value = '=' in opt_def

        default = None
        if is_array:
            opt_def = opt_def[:-2]
        elif has_value:
            opt_def, default_text = opt_def.split('=', 1)
            default = default_text or None

        # Parse shortcut
        name = opt_def
        shortcut = None
        if '|' in opt_def:
            shortcut, name = opt_def.split('|', 1)

        mode = "none"
        if is_array or has_value:
            mode = "optional"

        self._option_definitions.append(OptionDefinition(
            name=name.strip(),
            shortcut=shortcut.strip() if shortcut else None,
            description=description,
            default=default if mode != "none" else False,
            is_array=is_array,
            mode=mode
        ))

    def argument(self, key: str, default: Any = None) -> Any:
        """Get an argument value."""
        value = self.arguments.get(key)
        return default if value is None else value

    def option(self, key: str, default: Any = None) -> Any:
        """Get an option value."""
        value = self.options.get(key)
        return default if value is None else value

    def confirm(self, question: str, default: bool = False) -> bool:
        """Ask a yes/no question, answering the default when not interactive."""
        if not self.interactive:
            return default

        default_text = "Y/n" if default else "y/N"
        response = input(f"{question} ({default_text}): ").strip().lower()

        if not response:
            return default

        return response in ['y', 'yes', 'true', '1']

    def info(self, message: str) -> None:
        """Display an info message."""
        print(f"ℹ️  {message}")

    def comment(self, message: str) -> None:
        """Display a comment message."""
        print(f"💬 {message}")

    def error(self, message: str) -> None:
        """Display an error message."""
        print(f"❌ {message}", file=sys.stderr)

    def warn(self, message: str) -> None:
        """Display a warning message."""
        print(f"⚠️  {message}")

    def success(self, message: str) -> None:
        """Display a success message."""
        print(f"✅ {message}")

    def line(self, message: str = "") -> None:
        """Display a line of text."""
        print(message)

    def new_line(self, count: int = 1) -> None:
        """Add new lines."""
        print("\n" * (count - 1))

    def get_name(self) -> str:
        return self.name or self.__class__.__name__

    def get_description(self) -> str:
        return self.description

    def is_hidden(self) -> bool:
        return self.hidden

    def raise_validation_error(self, message: str, field: Optional[str] = None, value: Any = None,
                               suggestions: Optional[List[str]] = None) -> None:
        """Raise a validation error with recovery suggestions."""
        raise ValidationException(
            message,
            field=field,
            value=value,
            recovery_suggestions=suggestions,
            context_data={'field': field, 'value': value}
        )
