"""End-to-end tests for SQL to Mermaid conversion."""

import pytest

from sql_to_mermaid import convert
from sql_to_mermaid.src import EXAMPLE_SQL


USERS_SQL = """CREATE TABLE users (
  id INT PRIMARY KEY,
  name VARCHAR(255)
);
"""

USERS_DIAGRAM = """erDiagram
  users {
    id INT PK
    name VARCHAR(255)
  }
"""

EXAMPLE_DIAGRAM = """erDiagram
  users {
    id INT PK
    name VARCHAR(255)
    email VARCHAR(255)
  }
  posts {
    id INT PK
    title VARCHAR(255)
    user_id INT
  }
  posts }|--|| users : "user_id"
"""


def test_single_table():
    assert convert(USERS_SQL) == USERS_DIAGRAM


def test_two_tables_with_foreign_key():
    assert convert(EXAMPLE_SQL) == EXAMPLE_DIAGRAM


def test_empty_input():
    assert convert("") == "erDiagram\n"


def test_field_lines_match_input_order():
    columns = ["a INT", "b TEXT", "c DATE", "d BOOLEAN", "e BIGINT"]
    sql = "CREATE TABLE t (\n" + ",\n".join(columns) + "\n);"
    body = convert(sql).splitlines()[2:-1]
    assert [line.strip() for line in body] == columns


def test_pk_marker_only_where_declared():
    sql = "CREATE TABLE t (\n  id INT NOT NULL primary key,\n  code CHAR(3) UNIQUE,\n);"
    lines = convert(sql).splitlines()
    assert "    id INT PK" in lines
    assert "    code CHAR(3)" in lines


def test_fieldless_table_is_still_a_relationship_endpoint():
    sql = """
CREATE TABLE tags (
);
CREATE TABLE post_tags (
  post_id INT,
  tag_id INT,
  FOREIGN KEY (tag_id) REFERENCES tags(id)
);
"""
    output = convert(sql)
    assert "  tags {" not in output
    assert output.endswith('  post_tags }|--|| tags : "tag_id"\n')


def test_redeclaration_keeps_only_last_definition():
    sql = """
CREATE TABLE users (
  id INT PRIMARY KEY,
  FOREIGN KEY (org_id) REFERENCES orgs(id)
);
CREATE TABLE users (
  uuid TEXT PRIMARY KEY
);
"""
    assert convert(sql) == "erDiagram\n  users {\n    uuid TEXT PK\n  }\n"


def test_conversion_is_deterministic():
    assert convert(EXAMPLE_SQL) == convert(EXAMPLE_SQL)


@pytest.mark.parametrize(
    "sql",
    [
        "DROP TABLE users;",
        "ALTER TABLE posts ADD CONSTRAINT fk FOREIGN KEY (user_id) REFERENCES users(id);",
        "SELECT * FROM users;",
    ],
)
def test_statements_outside_create_table_produce_header_only(sql):
    assert convert(sql) == "erDiagram\n"


def test_identifiers_are_ascii_word_characters():
    sql = "CREATE TABLE café (\n  naïve INT PRIMARY KEY,\n  id INT\n);"
    assert convert(sql) == "erDiagram\n  caf {\n    id INT\n  }\n"
