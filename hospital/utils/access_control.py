"""
Central authorization table.

Every protected route names one operation from ``ACCESS_POLICY``; the
``require_access`` decorator is the only place the table is enforced.
"""
from hospital.utils.errors import ForbiddenError

PUBLIC = 'public'
AUTHENTICATED = 'authenticated'

ADMIN = 'admin'
DOCTOR = 'doctor'
NURSE = 'nurse'
CLERK = 'registration_clerk'

ACCESS_POLICY = {
    # Identity
    'auth.register': PUBLIC,
    'auth.login': PUBLIC,
    'auth.me': AUTHENTICATED,
    'auth.change_password': AUTHENTICATED,

    # Patients
    'patients.register': frozenset({CLERK, DOCTOR, NURSE}),
    'patients.read': AUTHENTICATED,
    'patients.update': frozenset({DOCTOR, NURSE}),
    'patients.delete': frozenset({ADMIN}),

    # Admissions
    'admissions.admit': frozenset({DOCTOR, NURSE}),
    'admissions.read': AUTHENTICATED,
    'admissions.record_vitals': frozenset({DOCTOR, NURSE}),
    'admissions.discharge': frozenset({DOCTOR}),

    # Appointments
    'appointments.book': frozenset({CLERK, DOCTOR, NURSE}),
    'appointments.read': AUTHENTICATED,
    'appointments.update': frozenset({DOCTOR, NURSE, CLERK}),
    'appointments.cancel': AUTHENTICATED,

    # Doctors
    'doctors.register': frozenset({ADMIN}),
    'doctors.read': PUBLIC,
    'doctors.update': frozenset({ADMIN, DOCTOR}),
}


def allowed_roles(operation):
    """Look up an operation, failing loudly for names missing from the table."""
    try:
        return ACCESS_POLICY[operation]
    except KeyError:
        raise LookupError(f"No access policy declared for operation '{operation}'")


def requires_authentication(operation):
    return allowed_roles(operation) != PUBLIC


def check_role(operation, user):
    """Raise ForbiddenError unless ``user`` may perform ``operation``."""
    allowed = allowed_roles(operation)
    if allowed in (PUBLIC, AUTHENTICATED):
        return
    if user.role not in allowed:
        raise ForbiddenError(f"User role {user.role} is not authorized to access this route")
