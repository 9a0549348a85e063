from flask import current_app
from hospital.extensions import db
from hospital.models.doctor_models import Doctor, DOCTOR_STATUSES, SPECIALIZATIONS
from hospital.models.user_models import User
from hospital.services.identifier_service import next_identifier
from hospital.utils.lookups import find_by_ref
from hospital.utils.errors import ConflictError, NotFoundError, ValidationError
from hospital.utils.validators import validate_doctor


def find_doctor(ref):
    """Looks a doctor profile up by native id or by its DOC identifier."""
    return find_by_ref(Doctor, ref, Doctor.doctor_code)


def get_doctor(ref):
    doctor = find_doctor(ref)
    if not doctor:
        raise NotFoundError('Doctor not found')
    return doctor


def list_doctors(specialization=None, department=None, status=None):
    query = Doctor.query
    if specialization:
        query = query.filter_by(specialization=specialization)
    if department:
        query = query.filter_by(department=department)
    if status:
        if status not in DOCTOR_STATUSES:
            raise ValidationError(fields={'status': f"status must be one of: {', '.join(DOCTOR_STATUSES)}"})
        query = query.filter_by(status=status)
    return query.order_by(Doctor.id).all()


def list_by_specialization(specialization):
    if specialization not in SPECIALIZATIONS:
        return []
    return Doctor.query.filter_by(specialization=specialization, status='active').order_by(Doctor.id).all()


def register_doctor(data):
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')

    user = find_by_ref(User, data.get('user'))
    if not user or user.role != 'doctor':
        raise ValidationError('User must exist and have doctor role')
    if user.doctor_profile is not None:
        raise ConflictError('Doctor profile already exists for this user')

    cleaned = validate_doctor(data)

    doctor = Doctor(doctor_code=next_identifier('doctor'), **cleaned)
    doctor.user = user

    db.session.add(doctor)
    db.session.commit()
    current_app.logger.info(f"Doctor profile {doctor.doctor_code} created for user id={user.id}")
    return doctor


def update_doctor(ref, data):
    doctor = get_doctor(ref)
    cleaned = validate_doctor(data, partial=True)

    for attribute, value in cleaned.items():
        setattr(doctor, attribute, value)

    db.session.commit()
    current_app.logger.info(f"Doctor profile {doctor.doctor_code} updated")
    return doctor
