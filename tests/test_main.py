"""
Server entry point: shutdown flush and port configuration.

Run with: python -m pytest tests/test_main.py -v
"""

import importlib
import json
import os
import signal
from types import SimpleNamespace

import main


class FakeServer:
    """Stands in for WSGIServer; delivers SIGTERM while serving"""

    instances = []

    def __init__(self, listener, application, handlers):
        self.listener = listener
        self.application = application
        self.handlers = handlers
        self.stopped = False
        FakeServer.instances.append(self)

    def serve_forever(self):
        self.handlers[signal.SIGTERM]()

    def stop(self):
        self.stopped = True


def test_shutdown_flushes_users_file(app, config_class, monkeypatch):
    handlers = {}
    FakeServer.instances = []
    monkeypatch.setattr(main, 'gevent', SimpleNamespace(
        signal_handler=lambda signum, handler: handlers.__setitem__(signum, handler)))
    monkeypatch.setattr(main, 'WSGIServer',
                        lambda listener, application: FakeServer(listener, application, handlers))

    store = app.extensions['record_store']
    store.create('Alice')
    store.record_result('Alice', 'snake', 'win')
    os.remove(config_class.USERS_FILE)

    main.serve(app)

    assert set(handlers) == {signal.SIGINT, signal.SIGTERM}
    server = FakeServer.instances[0]
    assert server.stopped
    assert server.listener == (app.config['HOST'], app.config['PORT'])
    with open(config_class.USERS_FILE, encoding='utf-8') as f:
        assert json.load(f) == {'users': store.get_all()}


def test_port_defaults_to_3000(monkeypatch):
    import config

    monkeypatch.delenv('PORT', raising=False)
    try:
        assert importlib.reload(config).Config.PORT == 3000
        monkeypatch.setenv('PORT', '8080')
        assert importlib.reload(config).Config.PORT == 8080
    finally:
        monkeypatch.undo()
        importlib.reload(config)
