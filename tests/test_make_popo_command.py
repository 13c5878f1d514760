"""Tests for the make:popo Artisan command."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Dict, List

import pytest

from laravel_popo import PopoServiceProvider
from laravel_popo.Console import Artisan
from laravel_popo.Console.Commands import MakePopoCommand
from laravel_popo.Foundation import Application
from laravel_popo.config import get_popo_config


@pytest.fixture
def popo_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Dict[str, Any]:
    monkeypatch.chdir(tmp_path)
    return {**get_popo_config(), 'path': 'app/Popo', 'factory_path': 'tests/Factory'}


@pytest.fixture
def artisan(popo_config: Dict[str, Any]) -> Artisan:
    app = Application()
    app.instance('config.popo', popo_config)
    app.register(PopoServiceProvider)
    app.boot()
    return app.artisan


def run(artisan: Artisan, argv: List[str]) -> int:
    return asyncio.run(artisan.run(argv))


class TestMakePopoCommand:
    def test_creates_popo_from_stub(self, artisan: Artisan, tmp_path: Path) -> None:
        assert run(artisan, ['make:popo', 'UserProfile']) == 0

        popo_file = tmp_path / 'app' / 'Popo' / 'UserProfile.py'
        content = popo_file.read_text()
        assert 'class UserProfile(BasePopo):' in content
        assert '{{' not in content
        compile(content, str(popo_file), 'exec')

    def test_generated_popo_serializes(self, artisan: Artisan, tmp_path: Path) -> None:
        run(artisan, ['make:popo', 'UserProfile'])

        namespace: Dict[str, Any] = {}
        exec((tmp_path / 'app' / 'Popo' / 'UserProfile.py').read_text(), namespace)

        assert namespace['UserProfile']().to_array() == {}

    def test_name_is_normalized_to_studly_case(self, artisan: Artisan, tmp_path: Path) -> None:
        assert run(artisan, ['make:popo', 'order_line']) == 0

        assert (tmp_path / 'app' / 'Popo' / 'OrderLine.py').exists()

    def test_invalid_name_fails(self, artisan: Artisan, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(artisan, ['make:popo', '9Lives']) == 1

        assert not (tmp_path / 'app').exists()
        assert 'Invalid POPO name' in capsys.readouterr().err

    def test_factory_option_creates_factory(self, artisan: Artisan, tmp_path: Path) -> None:
        assert run(artisan, ['make:popo', 'Invoice', '--factory']) == 0

        popo_content = (tmp_path / 'app' / 'Popo' / 'Invoice.py').read_text()
        factory_content = (tmp_path / 'tests' / 'Factory' / 'InvoiceFactory.py').read_text()

        assert 'class Invoice(BasePopo, HasPopoFactory):' in popo_content
        assert "'tests.Factory.InvoiceFactory.InvoiceFactory'" in popo_content
        assert 'from app.Popo.Invoice import Invoice' in factory_content
        assert 'class InvoiceFactory(PopoFactory[Invoice]):' in factory_content
        compile(factory_content, 'InvoiceFactory.py', 'exec')

    def test_factory_shortcut(self, artisan: Artisan, tmp_path: Path) -> None:
        assert run(artisan, ['make:popo', 'Invoice', '-f']) == 0

        assert (tmp_path / 'tests' / 'Factory' / 'InvoiceFactory.py').exists()

    def test_existing_file_is_kept_without_force(self, artisan: Artisan, tmp_path: Path) -> None:
        popo_file = tmp_path / 'app' / 'Popo' / 'Invoice.py'
        popo_file.parent.mkdir(parents=True)
        popo_file.write_text('# keep me\n')

        assert run(artisan, ['make:popo', 'Invoice', '--no-interaction']) == 1
        assert popo_file.read_text() == '# keep me\n'

    def test_force_overwrites_existing_file(self, artisan: Artisan, tmp_path: Path) -> None:
        popo_file = tmp_path / 'app' / 'Popo' / 'Invoice.py'
        popo_file.parent.mkdir(parents=True)
        popo_file.write_text('# keep me\n')

        assert run(artisan, ['make:popo', 'Invoice', '--force']) == 0
        assert 'class Invoice(BasePopo):' in popo_file.read_text()

    def test_confirmation_allows_overwrite(self, artisan: Artisan, tmp_path: Path,
                                           monkeypatch: pytest.MonkeyPatch) -> None:
        popo_file = tmp_path / 'app' / 'Popo' / 'Invoice.py'
        popo_file.parent.mkdir(parents=True)
        popo_file.write_text('# keep me\n')
        monkeypatch.setattr('builtins.input', lambda prompt: 'yes')

        assert run(artisan, ['make:popo', 'Invoice']) == 0
        assert 'class Invoice(BasePopo):' in popo_file.read_text()

    def test_call_runs_command_programmatically(self, artisan: Artisan, tmp_path: Path) -> None:
        exit_code = asyncio.run(artisan.call('make:popo', {'name': 'Receipt', '--factory': True}))

        assert exit_code == 0
        assert (tmp_path / 'tests' / 'Factory' / 'ReceiptFactory.py').exists()

    def test_failed_factory_removes_new_popo(self, artisan: Artisan, tmp_path: Path) -> None:
        factory_file = tmp_path / 'tests' / 'Factory' / 'InvoiceFactory.py'
        factory_file.parent.mkdir(parents=True)
        factory_file.write_text('# existing factory\n')

        assert run(artisan, ['make:popo', 'Invoice', '--factory', '--no-interaction']) == 1

        assert not (tmp_path / 'app' / 'Popo' / 'Invoice.py').exists()
        assert factory_file.read_text() == '# existing factory\n'

    def test_failed_factory_restores_overwritten_popo(self, artisan: Artisan, tmp_path: Path,
                                                      monkeypatch: pytest.MonkeyPatch) -> None:
        popo_file = tmp_path / 'app' / 'Popo' / 'Invoice.py'
        popo_file.parent.mkdir(parents=True)
        popo_file.write_text('# keep me\n')
        factory_file = tmp_path / 'tests' / 'Factory' / 'InvoiceFactory.py'
        factory_file.parent.mkdir(parents=True)
        factory_file.write_text('# existing factory\n')
        answers = iter(['yes', 'no'])
        monkeypatch.setattr('builtins.input', lambda prompt: next(answers))

        assert run(artisan, ['make:popo', 'Invoice', '--factory']) == 1

        assert popo_file.read_text() == '# keep me\n'
        assert factory_file.read_text() == '# existing factory\n'

    def test_absolute_paths_resolve_to_project_modules(self, popo_config: Dict[str, Any], tmp_path: Path) -> None:
        kernel = Artisan()
        kernel.register(MakePopoCommand({
            **popo_config,
            'path': str(tmp_path / 'app' / 'Popo'),
            'factory_path': str(tmp_path / 'tests' / 'Factory'),
        }))

        assert run(kernel, ['make:popo', 'Invoice', '--factory']) == 0

        popo_content = (tmp_path / 'app' / 'Popo' / 'Invoice.py').read_text()
        factory_content = (tmp_path / 'tests' / 'Factory' / 'InvoiceFactory.py').read_text()
        assert "'tests.Factory.InvoiceFactory.InvoiceFactory'" in popo_content
        assert 'from app.Popo.Invoice import Invoice' in factory_content

    def test_absolute_path_outside_project_fails(self, popo_config: Dict[str, Any], tmp_path: Path,
                                                 monkeypatch: pytest.MonkeyPatch,
                                                 capsys: pytest.CaptureFixture[str]) -> None:
        project = tmp_path / 'project'
        project.mkdir()
        monkeypatch.chdir(project)
        kernel = Artisan()
        kernel.register(MakePopoCommand({**popo_config, 'path': str(tmp_path / 'elsewhere')}))

        assert run(kernel, ['make:popo', 'Invoice']) == 1

        assert not (tmp_path / 'elsewhere').exists()
        assert 'must be inside the project directory' in capsys.readouterr().err

    def test_missing_stub_fails(self, popo_config: Dict[str, Any], tmp_path: Path) -> None:
        kernel = Artisan()
        kernel.register(MakePopoCommand({**popo_config, 'stub_path': str(tmp_path / 'nowhere')}))

        assert run(kernel, ['make:popo', 'Invoice']) == 1
        assert not (tmp_path / 'app').exists()


class TestArtisanKernel:
    def test_list_shows_make_popo(self, artisan: Artisan, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(artisan, ['list']) == 0

        output = capsys.readouterr().out
        assert 'make:popo' in output
        assert 'Create a new POPO class' in output

    def test_help_describes_arguments_and_options(self, artisan: Artisan,
                                                  capsys: pytest.CaptureFixture[str]) -> None:
        assert run(artisan, ['help', 'make:popo']) == 0

        output = capsys.readouterr().out
        assert 'The name of the POPO class' in output
        assert '-f, --factory' in output
        assert '--force' in output

    def test_unknown_command_fails(self, artisan: Artisan) -> None:
        assert run(artisan, ['make:nothing']) == 1

    def test_missing_argument_fails(self, artisan: Artisan) -> None:
        assert run(artisan, ['make:popo']) == 2

    def test_signature_is_parsed(self) -> None:
        command = MakePopoCommand(get_popo_config())

        assert command.get_name() == 'make:popo'
        assert [arg.name for arg in command._input_definitions] == ['name']
        assert [(opt.name, opt.shortcut) for opt in command._option_definitions] == [
            ('factory', 'f'),
            ('force', None),
        ]
