"""
SQL to Mermaid conversion
"""
from .mermaid import render_mermaid
from .sql_parser import parse_sql


def convert(sql: str) -> str:
    """Convert SQL CREATE TABLE statements to Mermaid erDiagram source.

    Never raises for any input string; unrecognized lines are dropped.
    """
    tables, _ = parse_sql(sql)
    return render_mermaid(tables)
