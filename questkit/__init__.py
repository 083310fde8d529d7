"""Text role-playing game building blocks: entities, game objects, containers, rectangle packing and text editing."""

__version__ = "0.1.0"