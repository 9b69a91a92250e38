import os

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'compat', 'data')


def _is_production() -> bool:
    env = os.getenv('APP_ENV') or os.getenv('FLASK_ENV') or ''
    return env.lower() == 'production'


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev_secret_key')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI', 'sqlite:///printers.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SESSION_COOKIE_SECURE = _is_production()
    PERMANENT_SESSION_LIFETIME = 24 * 60 * 60

    # static compatibility tables
    MODEL_ALIASES_PATH = os.getenv('MODEL_ALIASES_PATH', os.path.join(DATA_DIR, 'model_aliases.json'))
    MANUAL_PARTS_MAP_PATH = os.getenv('MANUAL_PARTS_MAP_PATH', os.path.join(DATA_DIR, 'manual_parts_map.json'))
    MODEL_NAME_PATTERNS_PATH = os.getenv(
        'MODEL_NAME_PATTERNS_PATH', os.path.join(DATA_DIR, 'model_name_patterns.json')
    )

    DEFAULT_SITE = os.getenv('DEFAULT_SITE', 'USA/TX/Houston/91-51')
    LOW_STOCK_THRESHOLD = int(os.getenv('LOW_STOCK_THRESHOLD', '5'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
