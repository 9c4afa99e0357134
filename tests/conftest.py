"""Shared fixtures."""

import os

os.environ["FLASK_ENV"] = "testing"

import pytest

from sql_to_mermaid.web_app.app import app as flask_app


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()
