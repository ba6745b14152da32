"""Feed ranking engine for a creator platform."""

__version__ = "0.1.0"
