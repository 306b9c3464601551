"""Hierarchical property trees, read from INI and INFO data and written as INI or XML."""

__version__ = "1.0.0"

__all__ = ["errors", "translator", "ptree", "ini", "xml_writer", "info", "settings"]