"""Shared fixtures: Flask test client and a live threaded server."""

import threading

import pytest
from werkzeug.serving import make_server

from devops_demo_app import app as flask_app


@pytest.fixture
def client():
    flask_app.config['TESTING'] = True
    with flask_app.test_client() as client:
        yield client


@pytest.fixture(scope='session')
def live_server():
    """Threaded Werkzeug server on an ephemeral port; yields its base URL."""
    server = make_server('127.0.0.1', 0, flask_app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f'http://127.0.0.1:{server.server_port}'
    finally:
        server.shutdown()
        thread.join(timeout=5)
