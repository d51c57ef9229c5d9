from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from sqlalchemy import event
from functools import wraps
import logging
from utils import now_utc

# Retrieve main logger
logger = logging.getLogger("main")

db = SQLAlchemy()
migrate = Migrate()

_TX_DEPTH_KEY = "transaction_depth"


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=now_utc, nullable=False)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc, nullable=False)


def transactional(f):
    """
    Run a service operation as one unit of work.

    The outermost call commits on success and rolls back on any exception.
    Nested calls join the transaction of their caller.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        session = db.session
        depth = session.info.get(_TX_DEPTH_KEY, 0)
        session.info[_TX_DEPTH_KEY] = depth + 1
        try:
            result = f(*args, **kwargs)
            if depth == 0:
                session.commit()
            return result
        except Exception:
            if depth == 0:
                session.rollback()
            raise
        finally:
            session.info[_TX_DEPTH_KEY] = depth

    return wrapper


def init_db(app):
    with app.app_context():
        # Foreign keys are off by default in SQLite; cascades depend on them
        @event.listens_for(db.engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            import sqlite3
            if not isinstance(dbapi_connection, sqlite3.Connection):
                return

            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON;")
            cursor.close()

        # Import models so they are registered on the metadata
        import models  # noqa: F401

        logger.info("Initializing database tables...")
        db.create_all()
