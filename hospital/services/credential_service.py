# /hospital/services/credential_service.py
"""Password verification and stateless session tokens."""
from flask import current_app
from flask_jwt_extended import create_access_token

from hospital.extensions import db
from hospital.models.user_models import MIN_PASSWORD_LENGTH, User
from hospital.utils.lookups import find_by_ref
from hospital.utils.errors import ConflictError, UnauthorizedError, ValidationError
from hospital.utils.validators import is_blank, validate_registration

INVALID_CREDENTIALS = 'Invalid credentials'


def find_by_email(email):
    return User.query.filter_by(email=User.normalize_email(email)).first()


def issue_token(user):
    """Signs a token carrying the user id; expiry comes from JWT_ACCESS_TOKEN_EXPIRES."""
    return create_access_token(identity=str(user.id), additional_claims={'role': user.role})


def register_identity(data):
    """Creates a staff account and returns it with a fresh session token."""
    cleaned = validate_registration(data)

    if find_by_email(cleaned['email']):
        raise ConflictError('User already exists')

    user = User(name=cleaned['name'], email=cleaned['email'], role=cleaned['role'])
    user.set_password(cleaned['password'])
    db.session.add(user)
    db.session.commit()

    current_app.logger.info(f"Registered user id={user.id} role={user.role}")
    return user, issue_token(user)


def authenticate(email, password):
    """
    Checks an email/password pair.

    Unknown email, wrong password and deactivated account all fail with the
    same message so callers cannot tell which accounts exist.
    """
    if is_blank(email) or is_blank(password):
        raise ValidationError('Please provide email and password')

    user = find_by_email(email) if isinstance(email, str) else None
    if not user or not isinstance(password, str) or not user.check_password(password) or not user.is_active:
        current_app.logger.info("Failed login attempt")
        raise UnauthorizedError(INVALID_CREDENTIALS)

    return user, issue_token(user)


def load_identity(jwt_payload):
    """Resolves a decoded token's subject to its User, or None if it no longer exists."""
    return find_by_ref(User, jwt_payload.get('sub'))


def ensure_active(user):
    if not user.is_active:
        raise UnauthorizedError('Account deactivated')
    return user


def change_password(user, current_password, new_password):
    if is_blank(current_password) or is_blank(new_password):
        raise ValidationError('Current and new passwords required')
    if not isinstance(current_password, str) or not user.check_password(current_password):
        raise UnauthorizedError('Invalid current password')
    if not isinstance(new_password, str) or len(new_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            fields={'newPassword': f'newPassword must be at least {MIN_PASSWORD_LENGTH} characters'}
        )

    user.set_password(new_password)
    db.session.commit()
    current_app.logger.info(f"Password changed for user id={user.id}")
    return user
