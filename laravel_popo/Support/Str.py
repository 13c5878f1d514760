from __future__ import annotations

import re
from typing import Dict


class Str:
    """Laravel-style string helper class."""

    # Cache for converted keys, POPO keys are converted once per name
    _snake_cache: Dict[str, str] = {}
    _studly_cache: Dict[str, str] = {}

    @staticmethod
    def camel(value: str) -> str:
        """Convert a value to camel case."""
        studly = Str.studly(value)
        return studly[:1].lower() + studly[1:]

    @staticmethod
    def is_identifier(value: str) -> bool:
        """Determine if a value is a valid, non-private Python identifier."""
        return value.isidentifier() and not value.startswith('_')

    @staticmethod
    def snake(value: str, delimiter: str = '_') -> str:
        """Convert a string to snake case."""
        key = f"{value}{delimiter}"
        cached = Str._snake_cache.get(key)
        if cached is not None:
            return cached

        converted = value
        # Insert delimiter before uppercase letters
        converted = re.sub(r'([a-z0-9])([A-Z])', rf'\1{delimiter}\2', converted)
        # Split acronyms from the following word (HTTPCode -> HTTP_Code)
        converted = re.sub(r'([A-Z]+)([A-Z][a-z])', rf'\1{delimiter}\2', converted)
        # Replace non-alphanumeric with delimiter
        converted = re.sub(r'[^a-zA-Z0-9]', delimiter, converted)
        # Convert to lowercase
        converted = converted.lower()
        # Replace multiple delimiters with single delimiter
        converted = re.sub(f'{re.escape(delimiter)}+', delimiter, converted)
        # Remove leading/trailing delimiters
        converted = converted.strip(delimiter)

        Str._snake_cache[key] = converted
        return converted

    @staticmethod
    def studly(value: str) -> str:
        """Convert a value to studly caps case."""
        cached = Str._studly_cache.get(value)
        if cached is not None:
            return cached

        # Split on separators, keep existing inner capitals (userProfile -> UserProfile)
        words = re.sub(r'[^a-zA-Z0-9]', ' ', value).split()
        converted = ''.join(Str.ucfirst(word) for word in words)

        Str._studly_cache[value] = converted
        return converted

    @staticmethod
    def ucfirst(string: str) -> str:
        """Make a string's first character uppercase."""
        if not string:
            return string
        return string[0].upper() + string[1:]

    @staticmethod
    def flush_cache() -> None:
        """Remove all cached conversions."""
        Str._snake_cache.clear()
        Str._studly_cache.clear()
