from .TestCase import TestCase, TestResponse

__all__ = ['TestCase', 'TestResponse']
