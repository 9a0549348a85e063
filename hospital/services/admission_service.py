"""
Inpatient stays.

An admission starts ``active`` and can only move to ``discharged``. Vital
signs are appended as new rows and never edited.
"""
from flask import current_app
from hospital.extensions import db
from hospital.models.admission_models import Admission, VitalSign, ADMISSION_STATUSES
from hospital.services.identifier_service import next_identifier
from hospital.services.patient_service import find_patient
from hospital.utils.lookups import find_by_ref
from hospital.utils.errors import NotFoundError, ValidationError
from hospital.utils.time_utils import utcnow
from hospital.utils.validators import is_blank, validate_admission, validate_vital_signs


def find_admission(ref):
    return find_by_ref(Admission, ref, Admission.admission_code)


def get_admission(ref):
    admission = find_admission(ref)
    if not admission:
        raise NotFoundError('Admission not found')
    return admission


def list_admissions(status=None):
    query = Admission.query
    if status:
        if status not in ADMISSION_STATUSES:
            raise ValidationError(fields={'status': f"status must be one of: {', '.join(ADMISSION_STATUSES)}"})
        query = query.filter_by(status=status)
    return query.order_by(Admission.admission_date.desc(), Admission.id.desc()).all()


def admit_patient(data, actor):
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')

    patient = find_patient(data.get('patient'))
    if not patient:
        raise NotFoundError('Patient not found')

    cleaned = validate_admission(data)

    admission = Admission(admission_code=next_identifier('admission'), status='active', **cleaned)
    admission.patient = patient
    admission.admitted_by = actor

    db.session.add(admission)
    db.session.commit()
    current_app.logger.info(
        f"Patient {patient.patient_code} admitted as {admission.admission_code} by user id={actor.id}"
    )
    return admission


def record_vital_signs(ref, data, actor):
    admission = get_admission(ref)
    reading = validate_vital_signs(data)

    vital_sign = VitalSign(recorded_at=utcnow(), recorded_by=actor, **reading)
    admission.vital_signs.append(vital_sign)

    db.session.commit()
    current_app.logger.info(f"Vital signs recorded on {admission.admission_code} by user id={actor.id}")
    return admission


def discharge_patient(ref, summary):
    """
    Marks an admission discharged with its discharge date and, when given,
    its summary.

    Discharging an already discharged admission is accepted and overwrites
    the date and summary; the status never returns to active.
    """
    admission = get_admission(ref)
    if not is_blank(summary) and not isinstance(summary, str):
        raise ValidationError(fields={'dischargeSummary': 'dischargeSummary must be a string'})

    if admission.status == 'discharged':
        current_app.logger.warning(f"Admission {admission.admission_code} discharged again")

    admission.status = 'discharged'
    admission.discharge_date = utcnow()
    admission.discharge_summary = None if is_blank(summary) else summary.strip()

    db.session.commit()
    current_app.logger.info(f"Admission {admission.admission_code} discharged")
    return admission
