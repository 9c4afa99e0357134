"""
SQL to Mermaid ERD Converter
"""

__version__ = "1.0.0"

from .src import convert, parse_sql, render_mermaid

__all__ = ["convert", "parse_sql", "render_mermaid"]
