import logging

import psycopg
from flask import Flask, jsonify

from clientele.config import config
from clientele.customer import CustomerService
from clientele.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(customer_service: CustomerService = None) -> Flask:
    """Application factory."""
    setup_logging(config.log_level)

    app = Flask(__name__)

    # Routes reach the service through current_app
    app.customer_service = customer_service if customer_service is not None else CustomerService()

    # Register blueprints
    from clientele.routes.customers import bp as customers_bp

    app.register_blueprint(customers_bp, url_prefix="/customers")

    @app.errorhandler(psycopg.Error)
    def handle_database_error(error):
        logger.exception("Database error: %s", error)
        return jsonify({"error": "Database error"}), 500

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    return app


# For flask run command
app = create_app()
