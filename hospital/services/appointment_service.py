"""
Scheduled visits between a patient and a doctor.

Booking checks that both parties exist but performs no
overlap or availability checks. Cancellation is one-way.
"""
from flask import current_app
from hospital.extensions import db
from hospital.models.appointment_models import Appointment, APPOINTMENT_STATUSES
from hospital.services.doctor_service import find_doctor
from hospital.services.identifier_service import next_identifier
from hospital.services.patient_service import get_patient, find_patient
from hospital.utils.lookups import find_by_ref
from hospital.utils.errors import NotFoundError, ValidationError
from hospital.utils.validators import FieldError, iso_date, validate_appointment


def find_appointment(ref):
    return find_by_ref(Appointment, ref, Appointment.appointment_code)


def get_appointment(ref):
    appointment = find_appointment(ref)
    if not appointment:
        raise NotFoundError('Appointment not found')
    return appointment


def list_appointments(status=None, date=None):
    """All appointments, earliest first; ``date`` selects one calendar day."""
    query = Appointment.query
    if status:
        if status not in APPOINTMENT_STATUSES:
            raise ValidationError(fields={'status': f"status must be one of: {', '.join(APPOINTMENT_STATUSES)}"})
        query = query.filter_by(status=status)
    if date:
        try:
            day = iso_date(date)
        except FieldError as e:
            raise ValidationError(fields={'date': f'date {e}'})
        query = query.filter(Appointment.appointment_date == day)
    return query.order_by(
        Appointment.appointment_date.asc(),
        Appointment.appointment_time.asc(),
        Appointment.id.asc()
    ).all()


def list_for_patient(patient_ref):
    """A patient's appointments, most recent first."""
    patient = get_patient(patient_ref)
    return Appointment.query.filter_by(patient_id=patient.id).order_by(
        Appointment.appointment_date.desc(),
        Appointment.appointment_time.desc(),
        Appointment.id.desc()
    ).all()


def book_appointment(data, actor):
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')

    patient = find_patient(data.get('patient'))
    if not patient:
        raise NotFoundError('Patient not found')
    doctor = find_doctor(data.get('doctor'))
    if not doctor:
        raise NotFoundError('Doctor not found')

    cleaned = validate_appointment(data)
    cleaned.setdefault('status', 'scheduled')
    cleaned.setdefault('type', 'consultation')

    appointment = Appointment(appointment_code=next_identifier('appointment'), **cleaned)
    appointment.patient = patient
    appointment.doctor = doctor
    appointment.booked_by = actor

    db.session.add(appointment)
    db.session.commit()
    current_app.logger.info(
        f"Appointment {appointment.appointment_code} booked for {patient.patient_code} "
        f"with {doctor.doctor_code} by user id={actor.id}"
    )
    return appointment


def update_appointment(ref, data):
    appointment = get_appointment(ref)
    cleaned = validate_appointment(data, partial=True)

    new_status = cleaned.get('status')
    if appointment.status == 'cancelled' and new_status and new_status != 'cancelled':
        raise ValidationError(fields={'status': 'Cancelled appointments cannot be reopened'})

    for attribute, value in cleaned.items():
        setattr(appointment, attribute, value)

    db.session.commit()
    current_app.logger.info(f"Appointment {appointment.appointment_code} updated")
    return appointment


def cancel_appointment(ref):
    """Sets status to cancelled. Cancelling twice is a no-op."""
    appointment = get_appointment(ref)
    appointment.status = 'cancelled'

    db.session.commit()
    current_app.logger.info(f"Appointment {appointment.appointment_code} cancelled")
    return appointment
