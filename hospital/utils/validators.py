"""
Per-entity validation of incoming JSON payloads.

Each ``validate_*`` function takes the raw request body, checks every field it
knows about and returns a dict of model attribute names to cleaned values.
All violations are collected before raising, so a single ValidationError
lists every offending field. With ``partial=True`` only the supplied fields
are checked (used by update operations), but required fields still cannot be
blanked.
"""
import math
import re
from datetime import date, datetime, timezone

from hospital.models.admission_models import DEPARTMENTS
from hospital.models.appointment_models import APPOINTMENT_STATUSES, APPOINTMENT_TYPES
from hospital.models.doctor_models import DOCTOR_STATUSES, SPECIALIZATIONS, WEEKDAYS
from hospital.models.patient_models import BLOOD_GROUPS, GENDERS, PATIENT_STATUSES
from hospital.models.user_models import MIN_PASSWORD_LENGTH, ROLES
from hospital.utils.errors import ValidationError

EMAIL_PATTERN = re.compile(r'^[\w.+-]+@[\w-]+(\.[\w-]+)*\.[A-Za-z]{2,}$')
TIME_PATTERN = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')
MAX_EXPERIENCE_YEARS = 80


class FieldError(Exception):
    pass


def is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


# --- Field checks ---

def text(max_length=None):
    def check(value):
        if not isinstance(value, str):
            raise FieldError('must be a string')
        value = value.strip()
        if max_length and len(value) > max_length:
            raise FieldError(f'must be at most {max_length} characters')
        return value
    return check


def choice(options):
    def check(value):
        if value not in options:
            raise FieldError(f"must be one of: {', '.join(options)}")
        return value
    return check


def number(minimum=None, maximum=None, integer=False):
    def check(value):
        # bool is a subclass of int but never a meaningful measurement
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FieldError('must be a number')
        if not math.isfinite(value):
            raise FieldError('must be a finite number')
        if integer:
            if isinstance(value, float) and not value.is_integer():
                raise FieldError('must be a whole number')
            value = int(value)
        if minimum is not None and value < minimum:
            raise FieldError(f'must be at least {minimum}')
        if maximum is not None and value > maximum:
            raise FieldError(f'must be at most {maximum}')
        return value
    return check


def string_set(value):
    """A list of distinct non-empty strings, first occurrence order kept."""
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise FieldError('must be a list of strings')
    cleaned = []
    for item in value:
        item = item.strip()
        if item and item not in cleaned:
            cleaned.append(item)
    return cleaned


def email(value):
    if not isinstance(value, str) or not EMAIL_PATTERN.match(value.strip()):
        raise FieldError('must be a valid email')
    return value.strip().lower()


def iso_date(value):
    """A calendar date, given as YYYY-MM-DD or as a full ISO 8601 date-time."""
    if not isinstance(value, str):
        raise FieldError('must be a date in YYYY-MM-DD format')
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
    except ValueError:
        raise FieldError('must be a date in YYYY-MM-DD format')


def iso_datetime(value):
    if not isinstance(value, str):
        raise FieldError('must be an ISO 8601 date-time')
    try:
        parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    except ValueError:
        raise FieldError('must be an ISO 8601 date-time')
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def clock_time(value):
    if not isinstance(value, str) or not TIME_PATTERN.match(value.strip()):
        raise FieldError('must be a time in HH:MM format')
    return value.strip()


def address(value):
    if not isinstance(value, dict):
        raise FieldError('must be an object with street, city, state, zipCode')
    cleaned = {}
    for key in ('street', 'city', 'state', 'zipCode'):
        part = value.get(key)
        if part is None:
            continue
        if not isinstance(part, str):
            raise FieldError(f'{key} must be a string')
        cleaned[key] = part.strip()
    return cleaned


# --- Driver ---

def _clean(data, rules, required=(), partial=False):
    """Apply ``rules`` ({json key: (attribute, check)}) to ``data``."""
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')

    errors, cleaned = {}, {}
    if not partial:
        for key in required:
            if is_blank(data.get(key)):
                errors[key] = f'{key} is required'

    for key, (attribute, check) in rules.items():
        if key not in data or key in errors:
            continue
        value = data[key]
        if is_blank(value):
            # blank optional values count as not supplied
            if key in required:
                errors[key] = f'{key} is required'
            continue
        try:
            cleaned[attribute] = check(value)
        except FieldError as e:
            errors[key] = f'{key} {e}'

    if errors:
        raise ValidationError(fields=errors)
    return cleaned


# --- Entities ---

REGISTRATION_FIELDS = ('name', 'email', 'password', 'role')

def validate_registration(data):
    if not isinstance(data, dict) or any(is_blank(data.get(f)) for f in REGISTRATION_FIELDS):
        raise ValidationError('Please provide all required fields: name, email, password, role')

    def password(value):
        if not isinstance(value, str) or len(value) < MIN_PASSWORD_LENGTH:
            raise FieldError(f'must be at least {MIN_PASSWORD_LENGTH} characters')
        return value

    return _clean(data, {
        'name': ('name', text(max_length=50)),
        'email': ('email', email),
        'password': ('password', password),
        'role': ('role', choice(ROLES)),
    }, required=REGISTRATION_FIELDS)


PATIENT_RULES = {
    'name': ('name', text(max_length=255)),
    'age': ('age', number(minimum=0, maximum=150, integer=True)),
    'gender': ('gender', choice(GENDERS)),
    'contactNumber': ('contact_number', text(max_length=50)),
    'address': ('address', address),
    'bloodGroup': ('blood_group', choice(BLOOD_GROUPS)),
    'knownDiseases': ('known_diseases', string_set),
    'allergies': ('allergies', string_set),
    'currentComplaints': ('current_complaints', text()),
    'status': ('status', choice(PATIENT_STATUSES)),
}

def validate_patient(data, partial=False):
    return _clean(data, PATIENT_RULES, required=('name', 'age', 'gender', 'contactNumber'), partial=partial)


ADMISSION_RULES = {
    'department': ('department', choice(DEPARTMENTS)),
    'ward': ('ward', text(max_length=100)),
    'bedNumber': ('bed_number', text(max_length=50)),
    'reasonForAdmission': ('reason_for_admission', text()),
    'admissionDate': ('admission_date', iso_datetime),
}

def validate_admission(data):
    return _clean(data, ADMISSION_RULES, required=('department', 'ward', 'bedNumber', 'reasonForAdmission'))


def validate_vital_signs(data):
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    pressure = data.get('bloodPressure')
    if pressure is not None and not isinstance(pressure, dict):
        raise ValidationError(fields={'bloodPressure': 'bloodPressure must be an object with systolic and diastolic'})

    flattened = {key: data[key] for key in ('temperature', 'pulseRate') if key in data}
    for key in ('systolic', 'diastolic'):
        if pressure and key in pressure:
            flattened[key] = pressure[key]

    reading = _clean(flattened, {
        'temperature': ('temperature', number(minimum=25, maximum=45)),
        'systolic': ('systolic', number(minimum=0, maximum=300, integer=True)),
        'diastolic': ('diastolic', number(minimum=0, maximum=200, integer=True)),
        'pulseRate': ('pulse_rate', number(minimum=0, maximum=300, integer=True)),
    })
    if not reading:
        raise ValidationError('At least one vital sign measurement is required')
    return reading


APPOINTMENT_RULES = {
    'appointmentDate': ('appointment_date', iso_date),
    'appointmentTime': ('appointment_time', clock_time),
    'reason': ('reason', text()),
    'type': ('type', choice(APPOINTMENT_TYPES)),
    'status': ('status', choice(APPOINTMENT_STATUSES)),
}

def validate_appointment(data, partial=False):
    return _clean(data, APPOINTMENT_RULES, required=('appointmentDate', 'appointmentTime'), partial=partial)


def availability(value):
    if not isinstance(value, dict):
        raise FieldError('must be an object with days, startTime, endTime')
    cleaned = {}
    days = value.get('days')
    if days is not None:
        if not isinstance(days, list) or any(day not in WEEKDAYS for day in days):
            raise FieldError(f"days must be a list of: {', '.join(WEEKDAYS)}")
        cleaned['available_days'] = [day for day in WEEKDAYS if day in days]
    for key, attribute in (('startTime', 'available_from'), ('endTime', 'available_until')):
        if value.get(key) is not None:
            try:
                cleaned[attribute] = clock_time(value[key])
            except FieldError as e:
                raise FieldError(f'{key} {e}')
    start, end = cleaned.get('available_from'), cleaned.get('available_until')
    if start and end and start >= end:
        raise FieldError('startTime must be before endTime')
    return cleaned


DOCTOR_RULES = {
    'specialization': ('specialization', choice(SPECIALIZATIONS)),
    'department': ('department', text(max_length=100)),
    'qualification': ('qualification', text(max_length=255)),
    'experience': ('experience', number(minimum=0, maximum=MAX_EXPERIENCE_YEARS, integer=True)),
    'contactNumber': ('contact_number', text(max_length=50)),
    'availability': ('availability', availability),
    'consultationFee': ('consultation_fee', number(minimum=0)),
    'status': ('status', choice(DOCTOR_STATUSES)),
}

DOCTOR_REQUIRED = ('specialization', 'department', 'qualification', 'experience', 'contactNumber', 'consultationFee')

def validate_doctor(data, partial=False):
    cleaned = _clean(data, DOCTOR_RULES, required=DOCTOR_REQUIRED, partial=partial)
    # availability expands into its own columns
    schedule = cleaned.pop('availability', None)
    if schedule:
        cleaned.update(schedule)
    return cleaned
