"""
ER Model Classes - Represent tables, fields, and relations
"""
from typing import Dict, List


class Field:
    """Represents a field (column) of a table."""
    def __init__(self, name: str, data_type: str, is_pk: bool = False):
        self.name = name
        self.data_type = data_type
        self.is_pk = is_pk

    def to_dict(self):
        """Converts the field to a dictionary."""
        return {
            "name": self.name,
            "type": self.data_type,
            "isPK": self.is_pk,
        }

    def __eq__(self, other):
        if not isinstance(other, Field):
            return NotImplemented
        return (self.name, self.data_type, self.is_pk) == (other.name, other.data_type, other.is_pk)

    def __repr__(self):
        pk_str = " [PK]" if self.is_pk else ""
        return f"Field(name={self.name}{pk_str}, type={self.data_type})"


class Relation:
    """Represents a many-to-one foreign key edge from the owning table"""

    def __init__(self, source_field: str, target_table: str):
        self.source_field = source_field
        self.target_table = target_table

    def to_dict(self):
        return {
            "sourceField": self.source_field,
            "targetTable": self.target_table,
        }

    def __eq__(self, other):
        if not isinstance(other, Relation):
            return NotImplemented
        return (self.source_field, self.target_table) == (other.source_field, other.target_table)

    def __repr__(self):
        return f"Relation({self.source_field} -> {self.target_table})"


class Table:
    """Represents a table (entity) in the ER diagram"""

    def __init__(self, name: str):
        self.name = name
        self.fields: List[Field] = []
        self.relations: List[Relation] = []

    def add_field(self, field: Field):
        """Add a field to this table"""
        self.fields.append(field)

    def add_relation(self, relation: Relation):
        """Add an outgoing relation to this table"""
        self.relations.append(relation)

    def to_dict(self):
        return {
            "name": self.name,
            "attributes": [field.to_dict() for field in self.fields],
            "relations": [relation.to_dict() for relation in self.relations],
        }

    def __repr__(self):
        return f"Table(name={self.name}, fields={len(self.fields)}, relations={len(self.relations)})"


# Ordered table name -> Table mapping; insertion order is emission order.
Schema = Dict[str, Table]
