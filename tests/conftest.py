import pytest

from hospital import create_app
from hospital.extensions import db as _db

PASSWORD = 'password123'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def auth_header(token):
    return {'Authorization': f'Bearer {token}'}


def register(client, role, email=None, name=None, password=PASSWORD):
    email = email or f'{role}@hospital.com'
    r = client.post('/api/auth/register', json={
        'name': name or f'Test {role}',
        'email': email,
        'password': password,
        'role': role,
    })
    assert r.status_code == 201, r.get_json()
    body = r.get_json()
    return body['user'], body['token']


@pytest.fixture
def tokens(client):
    """One registered identity per role, keyed by role name."""
    users = {}
    for role in ('admin', 'doctor', 'nurse', 'registration_clerk'):
        users[role] = register(client, role)
    return {role: token for role, (_, token) in users.items()}


@pytest.fixture
def users(client, tokens):
    return {
        role: client.get('/api/auth/me', headers=auth_header(token)).get_json()['user']
        for role, token in tokens.items()
    }


def make_patient(client, token, **overrides):
    payload = {
        'name': 'Jane Doe',
        'age': 30,
        'gender': 'female',
        'contactNumber': '0501234567',
    }
    payload.update(overrides)
    r = client.post('/api/patients', json=payload, headers=auth_header(token))
    assert r.status_code == 201, r.get_json()
    return r.get_json()['data']


def make_admission(client, token, patient_id, **overrides):
    payload = {
        'patient': patient_id,
        'department': 'Medicine',
        'ward': 'A-101',
        'bedNumber': 'B-12',
        'reasonForAdmission': 'High fever',
    }
    payload.update(overrides)
    r = client.post('/api/admissions', json=payload, headers=auth_header(token))
    assert r.status_code == 201, r.get_json()
    return r.get_json()['data']


def make_doctor(client, admin_token, user_id, **overrides):
    payload = {
        'user': user_id,
        'specialization': 'General Medicine',
        'department': 'Medicine',
        'qualification': 'MBBS',
        'experience': 5,
        'contactNumber': '0507778899',
        'consultationFee': 150,
        'availability': {'days': ['Monday', 'Tuesday'], 'startTime': '09:00', 'endTime': '17:00'},
    }
    payload.update(overrides)
    r = client.post('/api/doctors', json=payload, headers=auth_header(admin_token))
    assert r.status_code == 201, r.get_json()
    return r.get_json()['data']


def make_appointment(client, token, patient_id, doctor_id, **overrides):
    payload = {
        'patient': patient_id,
        'doctor': doctor_id,
        'appointmentDate': '2026-02-25',
        'appointmentTime': '10:00',
        'reason': 'Routine checkup',
        'type': 'consultation',
    }
    payload.update(overrides)
    r = client.post('/api/appointments', json=payload, headers=auth_header(token))
    assert r.status_code == 201, r.get_json()
    return r.get_json()['data']
