import logging

from flask import Flask
from config import Config
from entry_store import EntryStore, StorageError
from extensions import db, migrate, csrf
from utils.filters import register_filters
from utils.helpers import error_response

logger = logging.getLogger(__name__)


def create_app(config_class=Config, entry_store=None):
    # Create and configure the app
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)  # Initialize Flask-Migrate
    csrf.init_app(app)

    # Register custom template filters
    register_filters(app)

    # Tests may pass their own store
    app.extensions['entry_store'] = entry_store or EntryStore(db.session)

    # Register blueprints
    from routes.journal import journal_bp

    app.register_blueprint(journal_bp, url_prefix='/')

    @app.errorhandler(400)
    def bad_request(error):
        return error_response(400, 'Bad request')

    @app.errorhandler(StorageError)
    def storage_error(error):
        logger.error(f"Storage failure: {error}")
        return error_response(500, 'Storage unavailable')

    @app.errorhandler(500)
    def server_error(error):
        return error_response(500, 'Internal server error')

    # Create database tables
    with app.app_context():
        db.create_all()

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True)
