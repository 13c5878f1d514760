from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict


def get_popo_config() -> Dict[str, Any]:
    """
    Laravel-style POPO package configuration.

    Every value can be overridden through the environment so the package
    can be configured without publishing this file.
    """

    return {
        # POPO Path
        # Directory that `make:popo` writes new POPO classes into, relative
        # to the directory the Artisan command is run from.
        'path': os.getenv('POPO_PATH', 'app/Popo'),

        # Factory Path
        # Directory that `make:popo --factory` writes POPO factories into.
        # Factories only serve test fixtures, so they live with the tests.
        'factory_path': os.getenv('POPO_FACTORY_PATH', 'tests/Factory'),

        # Stub Path
        # Directory holding the `.stub` templates used for code generation.
        'stub_path': os.getenv('POPO_STUB_PATH', str(Path(__file__).resolve().parent.parent / 'stubs')),

        # Logging
        'logging': {
            'default': os.getenv('POPO_LOG_CHANNEL', 'default'),
            'channels': {
                'default': {
                    'driver': 'stdout',
                    'level': os.getenv('LOG_LEVEL', 'info'),
                    'formatter': 'laravel',
                },
                'stderr': {
                    'driver': 'stderr',
                    'level': os.getenv('LOG_LEVEL', 'info'),
                    'formatter': 'laravel',
                },
                'json': {
                    'driver': 'stderr',
                    'level': os.getenv('LOG_LEVEL', 'info'),
                    'formatter': 'json',
                },
                'null': {
                    'driver': 'null',
                },
            },
        },
    }
