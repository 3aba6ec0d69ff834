"""Ski school management: students, teachers, courses and their distribution."""

__version__ = "1.0.0"
__all__ = ["__version__"]