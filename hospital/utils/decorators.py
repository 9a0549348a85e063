from functools import wraps
from flask import request, current_app, g, make_response
from flask_jwt_extended import get_current_user, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from sqlalchemy.exc import SQLAlchemyError
from hospital.extensions import db
from hospital.models.system_models import AuditLog
from hospital.services import credential_service
from hospital.utils.access_control import allowed_roles, requires_authentication, check_role

def get_current_identity():
    return g.get('current_identity')

def require_access(operation):
    """Guards a route with the operation's entry in the access policy."""
    # Unknown operations fail when the route module is imported
    allowed_roles(operation)

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            g.current_identity = None
            if requires_authentication(operation):
                # Missing, invalid or expired tokens and unknown users are answered by the JWT callbacks
                verify_jwt_in_request()
                user = credential_service.ensure_active(get_current_user())
                g.current_identity = user
                try:
                    check_role(operation, user)
                except Exception:
                    current_app.logger.warning(
                        f"Denied {operation} for user id={user.id} role={user.role}"
                    )
                    raise
            return f(*args, **kwargs)
        return decorated_function
    return decorator

def _failure_status(error):
    if isinstance(error, (JWTExtendedException, PyJWTError)):
        return 401
    return getattr(error, 'status_code', 500)

def _write_audit_entry(action, resource, success, details):
    user = get_current_identity()
    user_id = user.id if user is not None else None

    log_entry = AuditLog(
        user_id=user_id,
        action=action,
        resource=resource,
        ip_address=request.remote_addr,
        user_agent=(request.headers.get('User-Agent') or '')[:255],
        success=success,
        details=details
    )
    try:
        db.session.add(log_entry)
        db.session.commit()
    except SQLAlchemyError as db_error:
        current_app.audit_logger.error(f"Failed to log audit entry due to DB error: {db_error}")
        db.session.rollback()

    log = current_app.audit_logger.info if success else current_app.audit_logger.warning
    log(f"Action='{action}', Resource='{resource}', UserID='{user_id}', Success='{success}', Details='{details}'")

def audit_log(action, resource):
    """Records every call to the wrapped route, successful or not."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                response = make_response(f(*args, **kwargs))
            except Exception as e:
                # Discard whatever the failed operation left in the session
                db.session.rollback()
                status = _failure_status(e)
                _write_audit_entry(action, resource, False, f"Request failed. Status: {status}. {e}")
                raise

            success = response.status_code < 400
            _write_audit_entry(action, resource, success, f"Request completed. Status: {response.status_code}")
            return response
        return decorated_function
    return decorator
