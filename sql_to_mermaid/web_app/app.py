# -*- coding: utf-8 -*-
"""
SQL to Mermaid Web Application - Flask Backend
"""
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from sql_to_mermaid.src import EXAMPLE_SQL, convert, parse_sql, render_mermaid
from sql_to_mermaid.web_app.app_config import config

app = Flask(__name__)
app.config.update(config.get_flask_config())
app.logger.setLevel(getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
CORS(app, origins=config.CORS_ORIGINS)


class InvalidRequest(ValueError):
    """The request body is not a JSON object with a string 'sql' field"""


def get_sql_from_request() -> str:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest("Request body must be a JSON object")
    sql = data.get('sql', '')
    if not isinstance(sql, str):
        raise InvalidRequest("'sql' must be a string")
    return sql


@app.errorhandler(InvalidRequest)
def handle_invalid_request(e):
    return jsonify({'success': False, 'error': str(e)}), 400


@app.errorhandler(413)
def handle_too_large(e):
    max_length = app.config.get('MAX_CONTENT_LENGTH')
    return jsonify({
        'success': False,
        'error': f'SQL is too large, the limit is {max_length} bytes'
    }), 413


@app.route('/api/convert', methods=['POST'])
def api_convert():
    """Convert SQL to Mermaid erDiagram source"""
    sql = get_sql_from_request()
    try:
        tables, message = parse_sql(sql)
        mermaid_code = render_mermaid(tables)

        app.logger.info(f"Converted SQL: {len(tables)} tables, {len(sql)} chars")
        return jsonify({
            'success': True,
            'mermaid': mermaid_code,
            'message': message,
            'tables': len(tables),
            'relationships': sum(len(table.relations) for table in tables.values())
        })

    except HTTPException:
        raise
    except Exception as e:
        app.logger.error(f"An unexpected error occurred in api_convert: {e}")
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/parse_sql', methods=['POST'])
def api_parse_sql():
    """Parse SQL and return the table and relation data"""
    sql = get_sql_from_request()
    try:
        tables, message = parse_sql(sql)

        result = {
            'entities': [],
            'relationships': [],
            'message': message
        }

        for table_name, table in tables.items():
            result['entities'].append(table.to_dict())

            for relation in table.relations:
                result['relationships'].append({
                    'from': table_name,
                    'to': relation.target_table,
                    'fromAttr': relation.source_field,
                    'type': 'N:1'
                })

        return jsonify(result)

    except HTTPException:
        raise
    except Exception as e:
        app.logger.error(f"An unexpected error occurred in api_parse_sql: {e}")
        return jsonify({'error': str(e)}), 500


@app.route('/api/example')
def api_example():
    """Example schema and its diagram"""
    return jsonify({
        'sql': EXAMPLE_SQL,
        'mermaid': convert(EXAMPLE_SQL)
    })


if __name__ == '__main__':
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT, use_reloader=False)
