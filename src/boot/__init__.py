"""create-boot - Scaffold a starter project from a template."""

__version__ = "0.1.0"
