from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from laravel_popo.config import get_popo_config
from .BaseMakeCommand import BaseMakeCommand


class MakePopoCommand(BaseMakeCommand):
    """Generate a new POPO class, optionally with its factory."""

    signature = (
        "make:popo {name : The name of the POPO class} "
        "{--f|factory : Also create a factory for the POPO} "
        "{--force : Overwrite the POPO if it already exists}"
    )
    description = "Create a new POPO class"
    help = "Generate a Plain Old Python Object whose public fields are serialized when returned from a route"
    file_type = "POPO"

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        super().__init__()
        self.config = config if config is not None else get_popo_config()
        self.stub_path = self.config['stub_path']

    async def handle(self) -> None:
        """Execute the command."""
        raw_name = str(self.argument("name", ""))
        name = self._format_class_name(raw_name)
        force = bool(self.option("force", False))
        with_factory = bool(self.option("factory", False))

        if not self._is_valid_name(name):
            self.raise_validation_error(
                f"Invalid POPO name: {raw_name}",
                field='name',
                value=raw_name,
                suggestions=["Use a StudlyCase name such as UserProfile."]
            )

        popo_dir = self.config['path']
        factory_dir = self.config['factory_path']
        factory_name = f"{name}Factory"

        variables = {
            'class_name': name,
            'popo_module': self._module_path(popo_dir, name),
            'factory_name': factory_name,
            'factory_import': f"{self._module_path(factory_dir, factory_name)}.{factory_name}",
        }

        stub = self._load_stub('popo.factory' if with_factory else 'popo')
        factory_stub = self._load_stub('factory') if with_factory else None
        popo_path = Path(popo_dir) / f"{name}.py"
        previous = popo_path.read_text() if popo_path.exists() else None

        if not await self.create_file(name, self._replace_placeholders(stub, variables), popo_path, force):
            self._exit_code = 1
            return

        steps = []
        if factory_stub is not None:
            factory_path = Path(factory_dir) / f"{factory_name}.py"

            self.file_type = "Factory"
            created = await self.create_file(
                factory_name, self._replace_placeholders(factory_stub, variables), factory_path, force
            )
            self.file_type = "POPO"
            if not created:
                self._rollback(popo_path, previous)
                self._exit_code = 1
                return

            steps.append(f"Fill in {factory_name}.definition() in {factory_path}")

        steps.append(f"Return {name} instances from your routes")
        self._show_next_steps(popo_path, steps)

    def _rollback(self, popo_path: Path, previous: Optional[str]) -> None:
        """Restore the POPO file as it was before the command ran."""
        if previous is None:
            popo_path.unlink()
        else:
            popo_path.write_text(previous)
        self.comment(f"Rolled back {popo_path}")
