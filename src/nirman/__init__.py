"""nirman - scaffold a project from a plain-text structure template."""

__version__ = "1.0.3"
