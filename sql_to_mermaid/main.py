#!/usr/bin/env python3
"""
SQL to Mermaid ERD Converter - Main Program
Converts SQL CREATE TABLE statements to Mermaid Entity-Relationship diagrams
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from sql_to_mermaid.src import EXAMPLE_SQL, parse_sql, render_mermaid


def status(message: str):
    """Progress output goes to stderr so stdout stays pipeable"""
    print(message, file=sys.stderr)


def sql_to_mermaid(sql_content: str, output_path: Optional[str] = None) -> str:
    """
    Convert SQL to a Mermaid ER diagram

    Args:
        sql_content: SQL string containing CREATE TABLE statements
        output_path: File to write the diagram to; stdout when omitted

    Returns:
        The diagram source
    """
    status("🔍 Parsing SQL statements...")
    tables, message = parse_sql(sql_content)

    if message:
        status(f"⚠️  {message}")
    else:
        status(f"✅ Found {len(tables)} table(s):")
        for table_name, table in tables.items():
            status(f"   - {table_name} ({len(table.fields)} fields, {len(table.relations)} relations)")

    status("\n🎨 Writing Mermaid diagram...")
    diagram = render_mermaid(tables)

    if output_path:
        Path(output_path).write_text(diagram, encoding="utf-8")
        status(f"\n✅ Mermaid diagram saved to: {output_path}")
    else:
        sys.stdout.write(diagram)
    return diagram


def main(argv=None):
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Convert SQL CREATE TABLE statements to Mermaid ER diagrams"
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="SQL file path or '-' for stdin"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)"
    )
    parser.add_argument(
        "--example",
        action="store_true",
        help="Convert the built-in users/posts example schema"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log parser details"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Read SQL content
    if args.example:
        status("📝 Using the built-in example schema")
        sql_content = EXAMPLE_SQL
    elif args.input is None:
        parser.error("an input file (or '-') is required unless --example is given")
    elif args.input == "-":
        status("📝 Reading SQL from stdin (press Ctrl+D when done)...")
        sql_content = sys.stdin.read()
    else:
        input_path = Path(args.input)
        if not input_path.is_file():
            status(f"❌ Error: File not found: {args.input}")
            sys.exit(1)

        status(f"📝 Reading SQL from: {args.input}")
        try:
            sql_content = input_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            status(f"❌ Error: Could not read {args.input}: {e}")
            sys.exit(1)

    try:
        sql_to_mermaid(sql_content, args.output)
    except OSError as e:
        status(f"\n❌ Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
