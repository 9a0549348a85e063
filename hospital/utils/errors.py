"""Error kinds raised by the services and mapped to HTTP responses."""


class ApiError(Exception):
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.message}


class ValidationError(ApiError):
    """Malformed, missing or out-of-range input. Carries every violated field."""
    status_code = 400
    default_message = 'Validation failed'

    def __init__(self, message=None, fields=None):
        self.fields = dict(fields or {})
        if message is None and self.fields:
            message = 'Validation failed: ' + '; '.join(self.fields.values())
        super().__init__(message)

    def to_dict(self):
        payload = super().to_dict()
        if self.fields:
            payload['fields'] = self.fields
        return payload


class ConflictError(ApiError):
    status_code = 400
    default_message = 'Resource already exists'


class UnauthorizedError(ApiError):
    status_code = 401
    default_message = 'Not authorized to access this route'


class ForbiddenError(ApiError):
    status_code = 403
    default_message = 'Permission denied'


class NotFoundError(ApiError):
    status_code = 404
    default_message = 'Resource not found'


class InternalError(ApiError):
    status_code = 500
