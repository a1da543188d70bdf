from flask import Flask
from werkzeug.exceptions import HTTPException
from flask_jwt_extended import JWTManager
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import os

load_dotenv()

jwt = JWTManager()


def create_app(config: Optional[Dict[str, Any]] = None):
    app = Flask(__name__)

    app.config['JWT_SECRET_KEY'] = os.getenv('JWT_SECRET_KEY', 'dev-secret')
    app.config['JWT_ROLES_CLAIM'] = os.getenv('JWT_ROLES_CLAIM', 'roles')
    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', 'INFO')

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    app.logger.setLevel(str(app.config['LOG_LEVEL']).upper())

    # Static tables are checked once; a broken table must stop startup
    from .utils.validation import validate_configuration
    validate_configuration()

    jwt.init_app(app)

    from .routes.navigation import nav_bp
    app.register_blueprint(nav_bp, url_prefix='/nav')

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    @jwt.unauthorized_loader
    def missing_token(reason):
        return {'error': {'status': 401, 'title': 'Unauthorized', 'detail': reason}}, 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return {'error': {'status': 422, 'title': 'Unprocessable Entity', 'detail': reason}}, 422

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            payload = {
                'error': {
                    'status': e.code,
                    'title': e.name,
                    'detail': e.description,
                }
            }
            return payload, e.code
        app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    return app
