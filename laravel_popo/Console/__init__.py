from .Command import Command, CommandException, ValidationException
from .Kernel import Artisan

__all__ = ['Command', 'CommandException', 'ValidationException', 'Artisan']
