from .Application import Application
from .ServiceProvider import ServiceProvider

__all__ = ['Application', 'ServiceProvider']
