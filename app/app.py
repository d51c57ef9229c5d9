"""
Corecord - Experience record & competency analysis backend
Application factory and initialization
"""
import warnings
import os
import sys
import logging

# Suppress Flask-Limiter in-memory storage warnings
warnings.filterwarnings("ignore", category=UserWarning, module="flask_limiter")

import flask.cli
flask.cli.show_server_banner = lambda *args: None

from flask import Flask
import structlog

# Local imports
from constants import BUILD_VERSION, MIGRATIONS_DIR
from settings import load_settings, verify_settings
from db import db, migrate, init_db
from auth import login_manager, limiter
from ai_client import init_ai_client
from redis_client import init_redis
from exceptions import register_exception_handlers
from utils import ColoredFormatter, FilterRemoveDateFromWerkzeugLogs, get_or_create_secret_key, sanitize_sensitive_data

# Routes
from routes.ability import ability_bp
from routes.analysis import analysis_bp
from routes.chat import chat_bp
from routes.folder import folder_bp
from routes.record import record_bp
from routes.system import system_bp
from routes.token import token_bp
from routes.user import user_bp

# Logging configuration
formatter = ColoredFormatter(
    '[%(asctime)s.%(msecs)03d] %(levelname)s (%(module)s) %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(formatter)

logging.basicConfig(
    level=logging.INFO,
    handlers=[handler]
)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if os.environ.get('LOG_FORMAT') == 'json' else structlog.dev.ConsoleRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger('main')

# Apply filter to hide date from http access logs
logging.getLogger('werkzeug').addFilter(FilterRemoveDateFromWerkzeugLogs())
logging.getLogger('alembic.runtime.migration').setLevel(logging.WARNING)


def _config_from_settings(settings):
    """Flatten the YAML settings into Flask config keys"""
    jwt_settings = settings["jwt"]
    cookie_settings = settings["cookie"]
    ai_settings = settings["ai"]
    return {
        "SQLALCHEMY_DATABASE_URI": settings["database"]["url"],
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "REDIS_URL": settings["redis"]["url"],
        "JWT_SECRET": jwt_settings.get("secret") or get_or_create_secret_key(),
        "JWT_ALGORITHM": jwt_settings["algorithm"],
        "ACCESS_TOKEN_EXPIRATION": jwt_settings["access_token_expiration"],
        "REFRESH_TOKEN_EXPIRATION": jwt_settings["refresh_token_expiration"],
        "REGISTER_TOKEN_EXPIRATION": jwt_settings["register_token_expiration"],
        "TMP_TOKEN_EXPIRATION": jwt_settings["tmp_token_expiration"],
        "TMP_TOKEN_ENABLED": jwt_settings.get("tmp_token_enabled", False),
        "COOKIE_SECURE": cookie_settings["secure"],
        "COOKIE_SAMESITE": cookie_settings["same_site"],
        "COOKIE_DOMAIN": cookie_settings.get("domain"),
        "AI_BASE_URL": ai_settings["base_url"],
        "AI_API_KEY": ai_settings.get("api_key", ""),
        "AI_TIMEOUT": ai_settings.get("timeout", 30),
    }


def create_app(config=None):
    """
    Application factory

    Args:
        config: Flask config overrides applied over the YAML settings.
            Tests pass REDIS_CLIENT / AI_CLIENT here to inject doubles.
    """
    app = Flask(__name__)

    settings = load_settings()
    success, errors = verify_settings(settings)
    if not success:
        for error in errors:
            logger.warning(f"Invalid setting {error['path']}: {error['error']}")
    logger.debug(f"Loaded settings: {sanitize_sensitive_data(settings)}")

    app.config.update(_config_from_settings(settings))
    app.config['SECRET_KEY'] = app.config["JWT_SECRET"]
    if config:
        app.config.update(config)

    # Initialize components
    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR)

    # Initialize login manager
    login_manager.init_app(app)

    limiter.init_app(app)

    init_redis(app)
    init_ai_client(app)

    # Register exception handlers
    register_exception_handlers(app)

    # Register blueprints
    app.register_blueprint(user_bp)
    app.register_blueprint(token_bp)
    app.register_blueprint(folder_bp)
    app.register_blueprint(record_bp)
    app.register_blueprint(analysis_bp)
    app.register_blueprint(ability_bp)
    app.register_blueprint(chat_bp)
    app.register_blueprint(system_bp)

    # Initialize database
    init_db(app)

    return app


if __name__ == '__main__':
    app = create_app()
    logger.info(f'Build Version: {BUILD_VERSION}')
    logger.info('Starting server on port 8080...')
    app.run(debug=False, use_reloader=False, host="0.0.0.0", port=8080)
