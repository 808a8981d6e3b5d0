from impossible_games import create_app
from gevent.pywsgi import WSGIServer
import gevent
import logging
import signal

logger = logging.getLogger(__name__)


def serve(app):
    """Serve until SIGINT/SIGTERM, then write the users file one last time"""
    store = app.extensions['record_store']
    http_server = WSGIServer((app.config['HOST'], app.config['PORT']), app)

    def shutdown():
        logger.info("Shutting down Impossible Games server...")
        http_server.stop()

    gevent.signal_handler(signal.SIGINT, shutdown)
    gevent.signal_handler(signal.SIGTERM, shutdown)

    logger.info(f"Impossible Games server running on http://localhost:{app.config['PORT']}")
    http_server.serve_forever()
    store.flush()


if __name__ == '__main__':
    serve(create_app())
