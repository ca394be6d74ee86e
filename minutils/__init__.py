"""Small, dependency-free versions of classic Unix text utilities."""

__version__ = "0.1.0"