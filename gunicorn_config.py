"""
Gunicorn configuration
"""
import multiprocessing
import os

bind = os.getenv("GUNICORN_BIND", "0.0.0.0:5001")
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() + 1))
worker_class = "sync"
timeout = 30

# "-" logs to stdout/stderr
accesslog = os.getenv("GUNICORN_ACCESS_LOG", "-")
errorlog = os.getenv("GUNICORN_ERROR_LOG", "-")
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")

proc_name = "sql_to_mermaid_app"
