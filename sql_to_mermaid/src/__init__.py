"""
SQL to Mermaid ERD Converter Package
"""
from .sql_parser import parse_sql, classify_line

from .er_model import Table, Field, Relation
from .mermaid import render_mermaid, MermaidERRenderer
from .converter import convert
from .examples import EXAMPLE_SQL

__all__ = [
    'parse_sql',
    'classify_line',
    'Table',
    'Field',
    'Relation',
    'render_mermaid',
    'MermaidERRenderer',
    'convert',
    'EXAMPLE_SQL'
]
