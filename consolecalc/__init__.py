"""An interactive console with a simple arithmetic expression calculator."""

__version__ = "0.1.0"
__all__ = ["calculator", "shell"]