from flask import Flask
from werkzeug.exceptions import HTTPException
from pcos_tracker.extensions import cors
from pcos_tracker.routes import register_routes
from pcos_tracker.services.seed_service import seed_demo_users
from pcos_tracker.store import init_store
from pcos_tracker.utils.errors import ServiceError
from pcos_tracker.utils.http import error, service_error

def create_app(config_object="config.Config", store=None):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", []),
                  allow_headers=["Content-Type"],
                  methods=["GET", "POST", "PUT", "OPTIONS"])

    # Record store (memory by default, injectable for tests)
    store = init_store(app, store)
    if app.config.get("SEED_DEMO_DATA"):
        with app.app_context():
            seed_demo_users(store)

    register_routes(app)
    register_error_handlers(app)

    return app

def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(e):
        return service_error(e)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return error(e.name.upper().replace(" ", "_"), e.description, e.code)
