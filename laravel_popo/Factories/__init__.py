from .PopoFactory import PopoFactory, LazyAttribute, fake

__all__ = ["PopoFactory", "LazyAttribute", "fake"]
