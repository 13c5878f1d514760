from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, Union
import argparse
import sys

from .Command import Command


class Artisan:
    """Laravel-style Artisan command kernel."""

    def __init__(self) -> None:
        self.commands: Dict[str, Command] = {}

    def register(self, command: Union[Command, Type[Command]], name: Optional[str] = None) -> None:
        """Register a command."""
        if isinstance(command, type):
            command = command()

        command_name = name or command.get_name()
        self.commands[command_name] = command

    def get(self, name: str) -> Optional[Command]:
        """Get a command by name."""
        return self.commands.get(name)

    def has(self, name: str) -> bool:
        """Check if a command exists."""
        return name in self.commands

    def visible_commands(self) -> Dict[str, Command]:
        """Get all visible (non-hidden) commands."""
        return {name: cmd for name, cmd in self.commands.items()
                if not cmd.is_hidden()}

    async def call(self, command: str, arguments: Optional[Dict[str, Any]] = None,
                   interactive: bool = False) -> int:
        """Call a command programmatically, options are keyed with a leading '--'."""
        cmd = self.get(command)
        if not cmd:
            print(f"Command '{command}' not found.", file=sys.stderr)
            return 1

        args = arguments or {}
        cmd.arguments = {arg_def.name: arg_def.default for arg_def in cmd._input_definitions}
        cmd.options = {opt_def.name: opt_def.default for opt_def in cmd._option_definitions}
        cmd.arguments.update({k: v for k, v in args.items() if not k.startswith('--')})
        cmd.options.update({k[2:]: v for k, v in args.items() if k.startswith('--')})
        cmd.interactive = interactive

        return await cmd.safe_execute()

    async def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the Artisan console application."""
        argv = list(sys.argv[1:] if argv is None else argv)

        interactive = True
        for flag in ('-n', '--no-interaction'):
            while flag in argv:
                argv.remove(flag)
                interactive = False

        if not argv or argv[0] == 'list':
            self._list_commands()
            return 0

        command_name = argv[0]

        if command_name == 'help':
            if len(argv) < 2:
                self._list_commands()
                return 0
            return self._show_command_help(argv[1])

        command = self.get(command_name)
        if not command:
            print(f"Command '{command_name}' is not defined.", file=sys.stderr)
            return 1

        if '--help' in argv[1:] or '-h' in argv[1:]:
            return self._show_command_help(command_name)

        try:
            self._parse_input(command, argv[1:])
        except SystemExit as e:
            # argparse reports usage errors itself
            return int(e.code or 0)

        command.interactive = interactive
        return await command.safe_execute()

    def _parse_input(self, command: Command, args: List[str]) -> None:
        """Parse command arguments and options."""
        parser = argparse.ArgumentParser(
            prog=command.get_name(),
            description=command.get_description(),
            add_help=False
        )

        for arg_def in command._input_definitions:
            if arg_def.is_array:
                parser.add_argument(
                    arg_def.name,
                    nargs='*' if not arg_def.required else '+',
                    default=arg_def.default,
                    help=arg_def.description
                )
            else:
                parser.add_argument(
                    arg_def.name,
                    nargs='?' if not arg_def.required else None,
                    default=arg_def.default,
                    help=arg_def.description
                )

        for opt_def in command._option_definitions:
            option_args = [f"--{opt_def.name}"]
            if opt_def.shortcut:
                option_args.append(f"-{opt_def.shortcut}")

            if opt_def.mode == "none":
                parser.add_argument(*option_args, dest=opt_def.name, action='store_true',
                                    help=opt_def.description)
            elif opt_def.is_array:
                parser.add_argument(*option_args, dest=opt_def.name, action='append', default=[],
                                    help=opt_def.description)
            else:
                parser.add_argument(*option_args, dest=opt_def.name, default=opt_def.default,
                                    help=opt_def.description)

        parsed_args = parser.parse_args(args)

        command.arguments = {
            arg_def.name: getattr(parsed_args, arg_def.name, arg_def.default)
            for arg_def in command._input_definitions
        }
        command.options = {
            opt_def.name: getattr(parsed_args, opt_def.name, opt_def.default)
            for opt_def in command._option_definitions
        }

    def _list_commands(self) -> None:
        """List all available commands, grouped by namespace."""
        print("Laravel POPO Artisan Console\n")
        print("Usage:")
        print("  artisan <command> [options] [arguments]\n")
        print("Available commands:")

        grouped: Dict[str, List[tuple[str, Command]]] = {}
        for name, command in sorted(self.visible_commands().items()):
            namespace = name.split(':', 1)[0] if ':' in name else ''
            grouped.setdefault(namespace, []).append((name, command))

        for namespace, commands in sorted(grouped.items()):
            if namespace:
                print(f" {namespace}")
            for name, command in commands:
                print(f"  {name:<30} {command.get_description()}")

    def _show_command_help(self, command_name: str) -> int:
        """Show help for a specific command."""
        command = self.get(command_name)
        if not command:
            print(f"Command '{command_name}' is not defined.", file=sys.stderr)
            return 1

        print(f"Description:\n  {command.get_description()}\n")
        print(f"Usage:\n  {command.signature}\n")

        if command._input_definitions:
            print("Arguments:")
            for arg_def in command._input_definitions:
                required = " (required)" if arg_def.required else " (optional)"
                print(f"  {arg_def.name:<20} {arg_def.description}{required}")
            print()

        if command._option_definitions:
            print("Options:")
            for opt_def in command._option_definitions:
                option_name = f"--{opt_def.name}"
                if opt_def.shortcut:
                    option_name = f"-{opt_def.shortcut}, {option_name}"
                print(f"  {option_name:<20} {opt_def.description}")

        if command.help and command.help != command.description:
            print(f"\nHelp:\n  {command.help}")

        return 0
