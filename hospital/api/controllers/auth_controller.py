from flask import jsonify
from hospital.services import credential_service
from hospital.utils.decorators import get_current_identity
from hospital.utils.request_utils import get_json_body

def register_user():
    """Registers a staff account and signs it in."""
    user, token = credential_service.register_identity(get_json_body())
    return jsonify({'success': True, 'token': token, 'user': user.to_dict()}), 201

def login_user():
    data = get_json_body()
    user, token = credential_service.authenticate(data.get('email'), data.get('password'))
    return jsonify({'success': True, 'token': token, 'user': user.to_dict()}), 200

def get_current_user():
    return jsonify({'success': True, 'user': get_current_identity().to_dict()}), 200

def change_user_password():
    data = get_json_body()
    credential_service.change_password(
        get_current_identity(), data.get('currentPassword'), data.get('newPassword')
    )
    return jsonify({'success': True, 'message': 'Password changed successfully'}), 200
