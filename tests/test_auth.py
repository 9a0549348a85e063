from datetime import timedelta

from flask_jwt_extended import create_access_token, create_refresh_token

from conftest import PASSWORD, auth_header, register
from hospital.extensions import db
from hospital.models import User
from hospital.services import credential_service


def test_register_returns_token_and_user(client):
    r = client.post('/api/auth/register', json={
        'name': 'Test Doctor',
        'email': 'testdoc@hospital.com',
        'password': PASSWORD,
        'role': 'doctor',
    })
    assert r.status_code == 201
    body = r.get_json()
    assert body['success'] is True
    assert body['token']
    assert body['user']['email'] == 'testdoc@hospital.com'
    assert body['user']['role'] == 'doctor'
    assert 'password' not in body['user']
    assert 'password_hash' not in body['user']


def test_password_is_stored_hashed(app, client):
    user, _ = register(client, 'nurse')
    stored = db.session.get(User, user['id'])
    assert stored.password_hash != PASSWORD
    assert stored.check_password(PASSWORD)


def test_register_missing_fields(client):
    r = client.post('/api/auth/register', json={'email': 'incomplete@hospital.com'})
    assert r.status_code == 400
    assert r.get_json()['error'] == 'Please provide all required fields: name, email, password, role'


def test_register_reports_every_invalid_field(client):
    r = client.post('/api/auth/register', json={
        'name': 'Bad', 'email': 'not-an-email', 'password': '123', 'role': 'janitor',
    })
    assert r.status_code == 400
    fields = r.get_json()['fields']
    assert set(fields) == {'email', 'password', 'role'}


def test_duplicate_email_is_rejected_case_insensitively(client):
    register(client, 'nurse', email='duplicate@hospital.com')
    r = client.post('/api/auth/register', json={
        'name': 'Second User',
        'email': '  Duplicate@Hospital.COM ',
        'password': 'password456',
        'role': 'doctor',
    })
    assert r.status_code == 400
    assert 'exists' in r.get_json()['error']
    assert User.query.count() == 1


def test_login_success(client):
    register(client, 'doctor', email='logintest@hospital.com')
    r = client.post('/api/auth/login', json={'email': 'LOGINTEST@hospital.com', 'password': PASSWORD})
    assert r.status_code == 200
    body = r.get_json()
    assert body['success'] is True
    assert body['token']
    assert body['user']['email'] == 'logintest@hospital.com'


def test_login_failures_share_one_message(client):
    register(client, 'doctor', email='logintest@hospital.com')
    wrong_password = client.post('/api/auth/login', json={'email': 'logintest@hospital.com', 'password': 'nope-nope'})
    unknown_email = client.post('/api/auth/login', json={'email': 'ghost@hospital.com', 'password': PASSWORD})
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.get_json() == unknown_email.get_json() == {'error': 'Invalid credentials'}


def test_login_missing_fields(client):
    r = client.post('/api/auth/login', json={'email': 'someone@hospital.com'})
    assert r.status_code == 400


def test_deactivated_account_cannot_login_or_use_token(app, client):
    user, token = register(client, 'nurse')
    db.session.get(User, user['id']).is_active = False
    db.session.commit()

    r = client.post('/api/auth/login', json={'email': 'nurse@hospital.com', 'password': PASSWORD})
    assert r.status_code == 401
    assert r.get_json()['error'] == 'Invalid credentials'
    assert client.get('/api/auth/me', headers=auth_header(token)).status_code == 401


def test_me_returns_current_user(client):
    user, token = register(client, 'registration_clerk')
    r = client.get('/api/auth/me', headers=auth_header(token))
    assert r.status_code == 200
    assert r.get_json()['user']['id'] == user['id']


def test_me_requires_token(client):
    r = client.get('/api/auth/me')
    assert r.status_code == 401
    assert 'error' in r.get_json()


def test_malformed_and_foreign_tokens_are_rejected(client):
    assert client.get('/api/auth/me', headers=auth_header('not.a.jwt')).status_code == 401
    assert client.get('/api/auth/me', headers={'Authorization': 'Token abc'}).status_code == 401


def test_expired_token_is_rejected(app, client):
    user, _ = register(client, 'doctor')
    expired = create_access_token(identity=str(user['id']), expires_delta=timedelta(seconds=-10))
    r = client.get('/api/auth/me', headers=auth_header(expired))
    assert r.status_code == 401


def test_refresh_token_is_not_a_session_token(app, client):
    user, _ = register(client, 'doctor')
    refresh = create_refresh_token(identity=str(user['id']))
    assert client.get('/api/auth/me', headers=auth_header(refresh)).status_code == 401


def test_token_for_removed_user_is_rejected(app, client):
    user, token = register(client, 'doctor')
    db.session.delete(db.session.get(User, user['id']))
    db.session.commit()
    r = client.get('/api/auth/me', headers=auth_header(token))
    assert r.status_code == 401


def test_token_subject_resolves_identity(app, client):
    user, _ = register(client, 'admin')
    resolved = credential_service.load_identity({'sub': str(user['id'])})
    assert resolved.id == user['id']
    assert resolved.role == 'admin'
    assert credential_service.load_identity({'sub': '999'}) is None
    assert credential_service.load_identity({'sub': str(10 ** 30)}) is None


def test_token_failures_use_api_error_format(app, client):
    user, token = register(client, 'doctor')
    expired = create_access_token(identity=str(user['id']), expires_delta=timedelta(seconds=-10))

    assert client.get('/api/auth/me').get_json() == {'error': 'Not authorized to access this route'}
    assert client.get('/api/auth/me', headers=auth_header('garbage')).get_json() == {'error': 'Not authorized'}
    assert client.get('/api/auth/me', headers=auth_header(expired)).get_json() == {'error': 'Not authorized'}

    db.session.delete(db.session.get(User, user['id']))
    db.session.commit()
    assert client.get('/api/auth/me', headers=auth_header(token)).get_json() == {'error': 'User not found'}


def test_deactivated_token_message(app, client):
    user, token = register(client, 'nurse')
    db.session.get(User, user['id']).is_active = False
    db.session.commit()
    r = client.get('/api/auth/me', headers=auth_header(token))
    assert r.status_code == 401
    assert r.get_json() == {'error': 'Account deactivated'}


def test_change_password(client):
    _, token = register(client, 'nurse')
    r = client.post('/api/auth/change-password', headers=auth_header(token), json={
        'currentPassword': PASSWORD, 'newPassword': 'brand-new-secret',
    })
    assert r.status_code == 200

    old = client.post('/api/auth/login', json={'email': 'nurse@hospital.com', 'password': PASSWORD})
    new = client.post('/api/auth/login', json={'email': 'nurse@hospital.com', 'password': 'brand-new-secret'})
    assert old.status_code == 401
    assert new.status_code == 200


def test_change_password_requires_current_password(client):
    _, token = register(client, 'nurse')
    r = client.post('/api/auth/change-password', headers=auth_header(token), json={
        'currentPassword': 'wrong-one', 'newPassword': 'brand-new-secret',
    })
    assert r.status_code == 401
