"""File listing, directory stepping, messages and key bindings for a simple image viewer."""

__version__ = "0.1.0"
__all__ = ["commands", "keyboard", "messages", "paths"]