from flask import request
from hospital.utils.errors import ValidationError

def get_json_body():
    """The request's JSON object, or an empty dict when no body was sent."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data

def list_response(items):
    return {'success': True, 'count': len(items), 'data': [item.to_dict() for item in items]}
