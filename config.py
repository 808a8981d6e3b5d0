import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    FLASK_ENV = os.environ.get('FLASK_ENV', 'development')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT') or 3000)

    DATA_DIR = os.environ.get('DATA_DIR', BASE_DIR)
    USERS_FILE = os.path.join(DATA_DIR, 'names.json')
    RESULTS_DIR = os.path.join(DATA_DIR, 'results')

    PUBLIC_DIR = os.environ.get('PUBLIC_DIR', os.path.join(BASE_DIR, 'public'))
    GAMES_DIR = os.path.join(PUBLIC_DIR, 'games')

    LOG_FILE = os.environ.get('LOG_FILE', 'app.log') or None
    if FLASK_ENV == 'development':
        LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')
        CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    else:
        LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
        CORS_ORIGINS = os.environ.get('CORS_ORIGINS')


class TestConfig(Config):
    TESTING = True
    LOG_FILE = None
    LOG_LEVEL = 'DEBUG'
