"""SameAsKit internals: line diffing, unified-diff rendering and assertions."""

__version__ = "0.1.0"
