from .BaseMakeCommand import BaseMakeCommand
from .MakePopoCommand import MakePopoCommand

__all__ = ['BaseMakeCommand', 'MakePopoCommand']
