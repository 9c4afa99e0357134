"""
ER Diagram Mermaid Module - Writes schemas as Mermaid erDiagram source
"""
from typing import List

from .er_model import Field, Relation, Schema, Table

HEADER = "erDiagram"
INDENT = "  "
# many rows of the owning table per exactly one row of the target
MANY_TO_ONE = "}|--||"


class MermaidERRenderer:
    """Renders ER diagrams as Mermaid erDiagram text"""

    def __init__(self):
        self.lines: List[str] = [HEADER]

    @staticmethod
    def format_field(field: Field) -> str:
        pk_str = " PK" if field.is_pk else ""
        return f"{field.name} {field.data_type}{pk_str}"

    @staticmethod
    def format_relation(owner: Table, relation: Relation) -> str:
        return f'{owner.name} {MANY_TO_ONE} {relation.target_table} : "{relation.source_field}"'

    def render_entities(self, tables: Schema):
        """Render attribute blocks; tables without fields are skipped"""
        for table_name, table in tables.items():
            if not table.fields:
                continue
            self.lines.append(f"{INDENT}{table_name} {{")
            for field in table.fields:
                self.lines.append(f"{INDENT * 2}{self.format_field(field)}")
            self.lines.append(f"{INDENT}}}")

    def render_relationships(self, tables: Schema):
        """Render one relationship line per relation, targets unchecked"""
        for table in tables.values():
            for relation in table.relations:
                self.lines.append(f"{INDENT}{self.format_relation(table, relation)}")

    def source(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


def render_mermaid(tables: Schema) -> str:
    """
    Convenience function to render a schema as Mermaid source

    Args:
        tables: Ordered mapping of table name to Table

    Returns:
        Diagram text, every line newline-terminated
    """
    renderer = MermaidERRenderer()
    renderer.render_entities(tables)
    renderer.render_relationships(tables)
    return renderer.source()
