"""Core services of a CD ripper: service UUIDs, settings, charset conversion, coder registry, files and component services."""

__version__ = "0.1.0"