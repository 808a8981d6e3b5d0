from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import InternalServerError, MethodNotAllowed, NotFound
from config import Config
from impossible_games.models import GAME_IDS, GAME_TITLES
from impossible_games.services.record_store import RecordStore
import logging


def configure_logging(app):
    handlers = [logging.StreamHandler()]
    if app.config.get('LOG_FILE'):
        handlers.append(logging.FileHandler(app.config['LOG_FILE'], mode='a'))

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers
    )
    logging.getLogger('impossible_games').setLevel(app.config['LOG_LEVEL'])
    logging.getLogger('werkzeug').setLevel(logging.INFO)


def log_startup_banner(app, store):
    logger = logging.getLogger(__name__)
    port = app.config['PORT']
    logger.info(f"Impossible Games server configured for http://localhost:{port}")
    logger.info(f"Total registered users: {len(store)}")
    logger.info("Available games: " +
                ", ".join(GAME_TITLES[game_id] for game_id in GAME_IDS))
    names = store.names()
    if names:
        logger.info(f"Try: http://localhost:{port}/?user={names[0]}")
    else:
        logger.info(f"Visit: http://localhost:{port} to start playing!")


def create_app(config_class=Config):
    app = Flask(__name__,
                static_folder=config_class.PUBLIC_DIR,
                static_url_path='')
    app.config.from_object(config_class)

    configure_logging(app)
    logger = logging.getLogger(__name__)
    logger.info("Starting application initialization")

    # Game pages may be hosted elsewhere and still post results
    if app.config.get('CORS_ORIGINS'):
        CORS(app,
             resources={
                 r"/api/*": {
                     "origins": app.config['CORS_ORIGINS'],
                     "methods": ["GET", "POST", "OPTIONS"],
                     "allow_headers": ["Content-Type", "Accept"]
                 }
             })

    try:
        store = RecordStore.from_file(app.config['USERS_FILE'],
                                      app.config['RESULTS_DIR'])
        app.extensions['record_store'] = store

        from impossible_games.routes import main, users
        from impossible_games.routes.commands import register_commands
        app.register_blueprint(main.bp)
        app.register_blueprint(users.bp, url_prefix='/api')
        register_commands(app)
        logger.info("Successfully registered all blueprints")
    except Exception as e:
        logger.error(f"Error during application initialization: {str(e)}")
        raise

    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def page_not_found(error):
        return 'Page not found', 404

    @app.errorhandler(InternalServerError)
    def internal_error(error):
        original = getattr(error, 'original_exception', None) or error
        logger.error(f"Unhandled error: {str(original)}", exc_info=original)
        return 'Something broke!', 500

    log_startup_banner(app, store)
    logger.info("Application initialization completed successfully")
    return app
