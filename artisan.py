#!/usr/bin/env python3
"""
Laravel-style Artisan Console Application

Entry point for the POPO package's Artisan console.

Usage:
    python artisan.py <command> [options] [arguments]
    python artisan.py list
    python artisan.py help <command>

Examples:
    python artisan.py make:popo UserProfile
    python artisan.py make:popo UserProfile --factory --force
"""

from __future__ import annotations

import asyncio
import sys
from typing import List, Optional

from laravel_popo import PopoServiceProvider, __version__
from laravel_popo.Foundation import Application


def create_application() -> Application:
    """Create and boot the console application."""
    app = Application()
    app.register(PopoServiceProvider)
    app.boot()
    return app


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the Artisan console."""
    args = sys.argv[1:] if argv is None else argv
    try:
        if args in (['--version'], ['-V']):
            print("Laravel POPO")
            print(f"Artisan Console Tool v{__version__}")
            return 0

        return asyncio.run(create_application().artisan.run(args))
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
