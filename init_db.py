"""
Initialize database tables.
Run this on first deploy instead of flask db upgrade.

Set RESET_DB=1 environment variable to drop and recreate all tables.
"""
import os

from fee_chat import create_app, db


def init_db(env=None):
    """Create all database tables."""
    app = create_app(env or os.getenv('FLASK_ENV', 'production'))

    with app.app_context():
        # create_app already created missing tables; this reports what exists
        from sqlalchemy import inspect
        tables = sorted(inspect(db.engine).get_table_names())
        app.logger.info("Database tables present: %s", ", ".join(tables))
        return tables


if __name__ == '__main__':
    init_db()
