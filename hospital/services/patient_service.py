from flask import current_app
from hospital.extensions import db
from hospital.models.patient_models import Patient, PATIENT_STATUSES
from hospital.services.identifier_service import next_identifier
from hospital.utils.lookups import find_by_ref
from hospital.utils.errors import NotFoundError, ValidationError
from hospital.utils.validators import validate_patient


def find_patient(ref):
    """Looks a patient up by native id or by its PAT identifier."""
    return find_by_ref(Patient, ref, Patient.patient_code)


def get_patient(ref):
    patient = find_patient(ref)
    if not patient:
        raise NotFoundError('Patient not found')
    return patient


def list_patients(status=None):
    query = Patient.query
    if status:
        if status not in PATIENT_STATUSES:
            raise ValidationError(fields={'status': f"status must be one of: {', '.join(PATIENT_STATUSES)}"})
        query = query.filter_by(status=status)
    return query.order_by(Patient.registration_date.desc(), Patient.id.desc()).all()


def register_patient(data, actor):
    cleaned = validate_patient(data)

    patient = Patient(patient_code=next_identifier('patient'), **cleaned)
    patient.registered_by = actor

    db.session.add(patient)
    db.session.commit()
    current_app.logger.info(f"Patient {patient.patient_code} registered by user id={actor.id}")
    return patient


def update_patient(ref, data):
    patient = get_patient(ref)
    cleaned = validate_patient(data, partial=True)

    for attribute, value in cleaned.items():
        setattr(patient, attribute, value)

    db.session.commit()
    current_app.logger.info(f"Patient {patient.patient_code} updated: {', '.join(sorted(cleaned)) or 'no changes'}")
    return patient


def delete_patient(ref):
    patient = get_patient(ref)
    code = patient.patient_code

    db.session.delete(patient)
    db.session.commit()
    current_app.logger.info(f"Patient {code} deleted")
