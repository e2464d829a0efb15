"""injectctl - ordered registration of entries in configuration lists."""

__version__ = "0.1.0"
