from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from laravel_popo.Log import logger
from laravel_popo.Support.Str import Str
from ..Command import Command


class BaseMakeCommand(Command):
    """Base class for make:* commands generating Python modules from stubs."""

    # Override in subclasses
    stub_path: str = ""
    file_type: str = "file"

    async def create_file(self, name: str, content: str, file_path: Path,
                          force: bool = False) -> bool:
        """Standardized file creation with error handling."""
        try:
            if not self._is_valid_name(name):
                self.error(f"Invalid {self.file_type} name: {name}")
                self.comment("Names should use StudlyCase and contain only letters, numbers, and underscores.")
                return False

            if file_path.exists() and not force:
                if not self.confirm(f"{self.file_type} {name} already exists. Overwrite?"):
                    self.error(f"{self.file_type} {name} already exists.")
                    self.comment("Use --force to overwrite it.")
                    return False

            if not self._validate_syntax(content):
                self.error("Generated code contains syntax errors.")
                return False

            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content)

            self.success(f"{self.file_type} created: {file_path}")
            logger().info(f"{self.file_type} [{name}] created", {'path': str(file_path)})
            return True

        except PermissionError:
            self.error(f"Permission denied: Cannot create {file_path}")
            self.comment("Check directory permissions and try again.")
            return False
        except OSError as e:
            self.error(f"File system error: {e}")
            return False

    def _is_valid_name(self, name: str) -> bool:
        """Validate the name is a StudlyCase class name."""
        return Str.is_identifier(name) and name[0].isupper()

    def _validate_syntax(self, content: str) -> bool:
        """Basic syntax validation of generated Python code."""
        try:
            compile(content, '<generated>', 'exec')
            return True
        except SyntaxError as e:
            self.warn(f"Syntax error detected: {e}")
            return False

    def _format_class_name(self, name: str) -> str:
        """Format name to proper StudlyCase."""
        return Str.studly(name.strip())

    def _module_path(self, directory: str, module: str) -> str:
        """Get the dotted import path of a module generated into directory."""
        path = Path(directory)
        if path.is_absolute():
            root = Path.cwd().resolve()
            try:
                path = path.resolve().relative_to(root)
            except ValueError:
                self.raise_validation_error(
                    f"Directory {directory} must be inside the project directory {root}",
                    field='path',
                    value=directory,
                    suggestions=["Use a path relative to the project root, such as app/Popo."]
                )
        parts = [part for part in path.parts if part not in ('.', '')]
        return '.'.join([*parts, module])

    def _load_stub(self, stub_name: str) -> str:
        """Load content from stub file."""
        stub_file = Path(self.stub_path) / f"{stub_name}.stub"
        if not stub_file.exists():
            self.raise_validation_error(
                f"Stub [{stub_name}] not found in {self.stub_path}",
                field='stub',
                value=str(stub_file),
                suggestions=["Check the POPO_STUB_PATH environment variable."]
            )
        return stub_file.read_text()

    def _replace_placeholders(self, content: str, variables: Dict[str, Any]) -> str:
        """Replace placeholder variables in content."""
        for key, value in variables.items():
            placeholder = f"{{{{{key}}}}}"  # {{ and }} for literal braces
            content = content.replace(placeholder, str(value))

        return content

    def _show_next_steps(self, file_path: Path, additional_steps: Optional[List[str]] = None) -> None:
        """Show standardized next steps to user."""
        self.new_line()
        self.comment("Next steps:")
        self.line(f"1. Edit {file_path} to declare your fields")

        if additional_steps:
            for i, step in enumerate(additional_steps, 2):
                self.line(f"{i}. {step}")
