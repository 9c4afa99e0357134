"""
WSGI entry point
Used by gunicorn: gunicorn -c gunicorn_config.py wsgi:application
"""
import os

os.environ.setdefault('FLASK_ENV', 'production')

from sql_to_mermaid.web_app.app import app
from sql_to_mermaid.web_app.app_config import config

if hasattr(config, 'validate'):
    config.validate()

if __name__ == "__main__":
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
else:
    # WSGI server entry
    application = app
