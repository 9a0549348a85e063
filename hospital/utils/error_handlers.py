# /hospital/utils/error_handlers.py
from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from hospital.extensions import db
from hospital.utils.errors import ApiError

def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def api_error(error):
        db.session.rollback()
        if error.status_code >= 500:
            current_app.logger.error(f"{type(error).__name__}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Resource not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(SQLAlchemyError)
    def database_error(error):
        db.session.rollback()
        current_app.logger.exception(f"Database error: {error}")
        return jsonify({'error': 'Database error'}), 500

    @app.errorhandler(Exception)
    def internal_error(error):
        db.session.rollback()
        current_app.logger.exception(f"Internal server error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

def register_jwt_handlers(jwt):
    """Answers token failures raised by verify_jwt_in_request() in the API's error format."""
    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({'error': 'Not authorized to access this route'}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        current_app.logger.debug(f"Rejected token: {reason}")
        return jsonify({'error': 'Not authorized'}), 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({'error': 'Not authorized'}), 401

    @jwt.user_lookup_error_loader
    def unknown_user(jwt_header, jwt_payload):
        return jsonify({'error': 'User not found'}), 401
