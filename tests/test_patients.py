from conftest import auth_header, make_admission, make_appointment, make_doctor, make_patient
from hospital.extensions import db
from hospital.models import Admission, Appointment, Patient


def test_register_patient(client, tokens, users):
    r = client.post('/api/patients', headers=auth_header(tokens['registration_clerk']), json={
        'name': 'Jane Doe',
        'age': 30,
        'gender': 'female',
        'contactNumber': '0501234567',
        'address': {'street': '1 Main St', 'city': 'Dubai'},
        'bloodGroup': 'O+',
        'knownDiseases': ['Asthma', 'Asthma', 'Diabetes'],
        'allergies': ['Penicillin'],
        'currentComplaints': 'Cough',
    })
    assert r.status_code == 201
    data = r.get_json()['data']
    assert data['patientId'] == 'PAT000001'
    assert data['status'] == 'active'
    assert data['knownDiseases'] == ['Asthma', 'Diabetes']
    assert data['address'] == {'street': '1 Main St', 'city': 'Dubai'}
    assert data['registeredBy']['id'] == users['registration_clerk']['id']
    assert data['registrationDate']


def test_validation_lists_every_offending_field(client, tokens):
    r = client.post('/api/patients', headers=auth_header(tokens['nurse']), json={
        'name': '',
        'age': -1,
        'gender': 'unknown',
        'bloodGroup': 'Z+',
    })
    assert r.status_code == 400
    fields = r.get_json()['fields']
    assert set(fields) == {'name', 'age', 'gender', 'contactNumber', 'bloodGroup'}
    assert Patient.query.count() == 0


def test_age_must_be_whole_number(client, tokens):
    r = client.post('/api/patients', headers=auth_header(tokens['nurse']), json={
        'name': 'Jane Doe', 'age': 'thirty', 'gender': 'female', 'contactNumber': '0501234567',
    })
    assert r.status_code == 400
    assert 'age' in r.get_json()['fields']


def test_non_object_body_is_rejected(client, tokens):
    r = client.post('/api/patients', headers=auth_header(tokens['nurse']), json=['Jane Doe'])
    assert r.status_code == 400


def test_unauthenticated_registration_creates_nothing(client):
    r = client.post('/api/patients', json={
        'name': 'Jane Doe', 'age': 30, 'gender': 'female', 'contactNumber': '0501234567',
    })
    assert r.status_code == 401
    assert Patient.query.count() == 0


def test_get_patient_by_id_and_code(client, tokens):
    patient = make_patient(client, tokens['nurse'])
    headers = auth_header(tokens['admin'])

    by_id = client.get(f"/api/patients/{patient['id']}", headers=headers)
    by_code = client.get(f"/api/patients/{patient['patientId'].lower()}", headers=headers)
    assert by_id.status_code == by_code.status_code == 200
    assert by_id.get_json()['data']['patientId'] == by_code.get_json()['data']['patientId']


def test_get_unknown_patient(client, tokens):
    r = client.get('/api/patients/PAT424242', headers=auth_header(tokens['nurse']))
    assert r.status_code == 404
    assert r.get_json()['error'] == 'Patient not found'


def test_list_patients_newest_first_with_status_filter(client, tokens):
    first = make_patient(client, tokens['nurse'])
    second = make_patient(client, tokens['nurse'], name='John Roe')
    client.put(f"/api/patients/{first['id']}", headers=auth_header(tokens['doctor']), json={'status': 'referred'})
    headers = auth_header(tokens['registration_clerk'])

    body = client.get('/api/patients', headers=headers).get_json()
    assert body['count'] == 2
    assert [p['id'] for p in body['data']] == [second['id'], first['id']]

    active = client.get('/api/patients?status=active', headers=headers).get_json()
    assert [p['id'] for p in active['data']] == [second['id']]

    assert client.get('/api/patients?status=asleep', headers=headers).status_code == 400


def test_update_patient(client, tokens):
    patient = make_patient(client, tokens['nurse'])
    r = client.put(f"/api/patients/{patient['patientId']}", headers=auth_header(tokens['doctor']), json={
        'age': 31,
        'allergies': ['Latex'],
        'currentComplaints': '',
    })
    assert r.status_code == 200
    data = r.get_json()['data']
    assert data['age'] == 31
    assert data['allergies'] == ['Latex']
    assert data['name'] == 'Jane Doe'


def test_update_cannot_blank_required_fields(client, tokens):
    patient = make_patient(client, tokens['nurse'])
    r = client.put(f"/api/patients/{patient['id']}", headers=auth_header(tokens['nurse']), json={
        'name': '  ', 'gender': 'robot',
    })
    assert r.status_code == 400
    assert set(r.get_json()['fields']) == {'name', 'gender'}
    assert db.session.get(Patient, patient['id']).name == 'Jane Doe'


def test_update_unknown_patient(client, tokens):
    r = client.put('/api/patients/999', headers=auth_header(tokens['nurse']), json={'age': 40})
    assert r.status_code == 404


def test_delete_patient_removes_dependent_records(client, tokens, users):
    patient = make_patient(client, tokens['nurse'])
    make_admission(client, tokens['nurse'], patient['id'])
    doctor = make_doctor(client, tokens['admin'], users['doctor']['id'])
    make_appointment(client, tokens['nurse'], patient['id'], doctor['id'])

    r = client.delete(f"/api/patients/{patient['id']}", headers=auth_header(tokens['admin']))
    assert r.status_code == 200
    assert r.get_json() == {'success': True, 'data': {}}
    assert Patient.query.count() == 0
    assert Admission.query.count() == 0
    assert Appointment.query.count() == 0

    again = client.delete(f"/api/patients/{patient['id']}", headers=auth_header(tokens['admin']))
    assert again.status_code == 404


def test_non_ascii_digit_reference_is_not_found(client, tokens):
    r = client.get('/api/patients/²', headers=auth_header(tokens['nurse']))
    assert r.status_code == 404
    assert r.get_json()['error'] == 'Patient not found'


def test_out_of_range_ids_are_not_found(client, tokens):
    headers = auth_header(tokens['nurse'])
    assert client.get(f'/api/patients/{10 ** 30}', headers=headers).status_code == 404
    assert client.get('/api/patients/0', headers=headers).status_code == 404
