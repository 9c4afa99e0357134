"""
Line-oriented SQL parser for CREATE TABLE statements

Each line is classified on its own by an ordered list of matchers (first
match wins) and the results are folded into a schema. Nothing here raises:
lines that match no rule are skipped.
"""
import logging
import re
from functools import reduce
from typing import Callable, List, NamedTuple, Optional, Tuple, Union

from .er_model import Field, Relation, Schema, Table

logger = logging.getLogger(__name__)

TABLE_PATTERN = re.compile(
    r'CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?[`"]?(\w+)[`"]?',
    re.IGNORECASE | re.ASCII
)
FOREIGN_KEY_PATTERN = re.compile(
    r'FOREIGN\s+KEY\s+\(([^)]+)\)\s+REFERENCES\s+(\w+)\s*\(([^)]+)\)',
    re.IGNORECASE | re.ASCII
)
# name, type token (word chars and parens), constraint text up to the first , or )
FIELD_PATTERN = re.compile(r'^\s*[`"]?(\w+)[`"]?\s+([\w()]+)([^,)]*)', re.IGNORECASE | re.ASCII)
QUOTE_CHARS = re.compile(r'[`"]')

NO_TABLES_MESSAGE = "No CREATE TABLE statements found in the SQL."


class TableDecl(NamedTuple):
    name: str


class ForeignKey(NamedTuple):
    source_field: str
    target_table: str


class FieldDef(NamedTuple):
    name: str
    data_type: str
    constraints: str

    @property
    def is_pk(self) -> bool:
        return 'primary key' in self.constraints.lower()


class Ignored(NamedTuple):
    pass


IGNORED = Ignored()

LineKind = Union[TableDecl, ForeignKey, FieldDef, Ignored]


def _match_table_decl(line: str) -> Optional[TableDecl]:
    match = TABLE_PATTERN.search(line)
    if match:
        return TableDecl(match.group(1))
    return None


def _match_foreign_key(line: str) -> Optional[ForeignKey]:
    match = FOREIGN_KEY_PATTERN.search(line)
    if match:
        source_field = QUOTE_CHARS.sub('', match.group(1)).strip()
        return ForeignKey(source_field, match.group(2))
    return None


def _match_field_def(line: str) -> Optional[FieldDef]:
    # a leading ) closes the table body
    if line.startswith(')'):
        return None
    match = FIELD_PATTERN.match(line)
    if match:
        return FieldDef(match.group(1), match.group(2), match.group(3))
    return None


LINE_MATCHERS: List[Callable[[str], Optional[LineKind]]] = [
    _match_table_decl,
    _match_foreign_key,
    _match_field_def,
]


def classify_line(line: str) -> LineKind:
    """
    Classify one line of SQL

    Args:
        line: A single line, already stripped of surrounding whitespace

    Returns:
        TableDecl, ForeignKey, FieldDef or IGNORED
    """
    for matcher in LINE_MATCHERS:
        kind = matcher(line)
        if kind is not None:
            return kind
    return IGNORED


class ScanState(NamedTuple):
    tables: Schema
    current_table: Optional[str] = None


def scan_line(state: ScanState, line: str) -> ScanState:
    """Apply one line to the scan state and return the next state"""
    kind = classify_line(line.strip())

    if isinstance(kind, TableDecl):
        if kind.name in state.tables:
            logger.debug("Table %s declared again, discarding its previous definition", kind.name)
        else:
            logger.debug("Table %s", kind.name)
        # re-declaring keeps the key's original position in the schema
        return ScanState({**state.tables, kind.name: Table(kind.name)}, kind.name)

    if state.current_table is None:
        return state

    table = state.tables[state.current_table]
    if isinstance(kind, ForeignKey):
        logger.debug("Relation %s.%s -> %s", table.name, kind.source_field, kind.target_table)
        table.add_relation(Relation(kind.source_field, kind.target_table))
    elif isinstance(kind, FieldDef):
        table.add_field(Field(kind.name, kind.data_type, kind.is_pk))
    return state


def parse_sql(sql: str) -> Tuple[Schema, str]:
    """
    Parse CREATE TABLE statements line by line

    Args:
        sql: SQL text, newline delimited

    Returns:
        Tuple of (schema, message). The message is empty unless no table
        was found; it is informational only.
    """
    state = reduce(scan_line, sql.split('\n'), ScanState({}))
    tables = state.tables

    if not tables:
        return tables, NO_TABLES_MESSAGE

    logger.info(
        "Parsed %d table(s), %d relation(s)",
        len(tables),
        sum(len(table.relations) for table in tables.values())
    )
    return tables, ""
