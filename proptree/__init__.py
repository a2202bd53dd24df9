"""Hierarchical property trees with path access, value translation, JSON output and INFO syntax checking."""

__version__ = "0.1.0"
__all__ = [
    "errors",
    "translator",
    "tree",
    "ptree",
    "json_encoding",
    "json_callbacks",
    "json_writer",
    "info_grammar",
]