import os
from flask import Flask, jsonify
from hospital.extensions import db, bcrypt, migrate, jwt, limiter, cors
from hospital.services.credential_service import load_identity
from hospital.utils.error_handlers import register_error_handlers, register_jwt_handlers
from hospital.commands import register_commands
from config import config


def create_app(config_name=None):
    app = Flask(__name__)
    config_name = config_name or os.environ.get('FLASK_CONFIG', 'default')
    config_class = config[config_name]
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    bcrypt.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    limiter.init_app(app)
    cors.init_app(
        app,
        origins=app.config['ALLOWED_ORIGINS'],
        allow_headers=['Content-Type', 'Authorization'],
        methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
    )

    # Logging setup for the selected environment
    config_class.init_app(app)

    # Make sure every model is registered on the metadata
    from hospital import models  # noqa: F401

    # Register blueprints
    from hospital.api import api_bp
    app.register_blueprint(api_bp, url_prefix='/api')

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({'status': 'OK', 'message': 'Hospital API is running'}), 200

    register_error_handlers(app)
    register_jwt_handlers(jwt)
    register_commands(app)

    # Resolves current_user for every verified token
    @jwt.user_lookup_loader
    def user_lookup(jwt_header, jwt_payload):
        return load_identity(jwt_payload)

    return app
