# /hospital/api/routes.py

from . import api_bp
from hospital.extensions import limiter
from hospital.utils.decorators import audit_log, require_access
from .controllers import (
    auth_controller, patient_controller, admission_controller,
    appointment_controller, doctor_controller
)


# --- Authentication Endpoints ---
@api_bp.route('/auth/register', methods=['POST'])
@limiter.limit("20 per hour")
@audit_log("USER_REGISTRATION", "users")
@require_access('auth.register')
def register():
    return auth_controller.register_user()

@api_bp.route('/auth/login', methods=['POST'])
@limiter.limit("10 per minute")
@audit_log("USER_LOGIN", "authentication")
@require_access('auth.login')
def login():
    return auth_controller.login_user()

@api_bp.route('/auth/me', methods=['GET'])
@require_access('auth.me')
def me():
    return auth_controller.get_current_user()

@api_bp.route('/auth/change-password', methods=['POST'])
@audit_log("PASSWORD_CHANGE", "authentication")
@require_access('auth.change_password')
def change_password():
    return auth_controller.change_user_password()


# --- Patient Endpoints ---
@api_bp.route('/patients', methods=['POST'])
@audit_log("PATIENT_REGISTRATION", "patients")
@require_access('patients.register')
def register_patient_route():
    return patient_controller.register_patient()

@api_bp.route('/patients', methods=['GET'])
@audit_log("VIEW_ALL_PATIENTS", "patients")
@require_access('patients.read')
def get_patients_route():
    return patient_controller.get_patients()

@api_bp.route('/patients/<patient_ref>', methods=['GET'])
@audit_log("VIEW_PATIENT_DETAIL", "patients")
@require_access('patients.read')
def get_patient_route(patient_ref):
    return patient_controller.get_patient(patient_ref)

@api_bp.route('/patients/<patient_ref>', methods=['PUT'])
@audit_log("UPDATE_PATIENT", "patients")
@require_access('patients.update')
def update_patient_route(patient_ref):
    return patient_controller.update_patient(patient_ref)

@api_bp.route('/patients/<patient_ref>', methods=['DELETE'])
@audit_log("DELETE_PATIENT", "patients")
@require_access('patients.delete')
def delete_patient_route(patient_ref):
    return patient_controller.delete_patient(patient_ref)


# --- Admission Endpoints ---
@api_bp.route('/admissions', methods=['POST'])
@audit_log("ADMIT_PATIENT", "admissions")
@require_access('admissions.admit')
def admit_patient_route():
    return admission_controller.admit_patient()

@api_bp.route('/admissions', methods=['GET'])
@audit_log("VIEW_ALL_ADMISSIONS", "admissions")
@require_access('admissions.read')
def get_admissions_route():
    return admission_controller.get_admissions()

@api_bp.route('/admissions/<admission_ref>', methods=['GET'])
@audit_log("VIEW_ADMISSION_DETAIL", "admissions")
@require_access('admissions.read')
def get_admission_route(admission_ref):
    return admission_controller.get_admission(admission_ref)

@api_bp.route('/admissions/<admission_ref>/vitals', methods=['PUT'])
@audit_log("RECORD_VITAL_SIGNS", "admissions")
@require_access('admissions.record_vitals')
def add_vital_signs_route(admission_ref):
    return admission_controller.add_vital_signs(admission_ref)

@api_bp.route('/admissions/<admission_ref>/discharge', methods=['PUT'])
@audit_log("DISCHARGE_PATIENT", "admissions")
@require_access('admissions.discharge')
def discharge_patient_route(admission_ref):
    return admission_controller.discharge_patient(admission_ref)


# --- Appointment Endpoints ---
@api_bp.route('/appointments', methods=['POST'])
@audit_log("BOOK_APPOINTMENT", "appointments")
@require_access('appointments.book')
def book_appointment_route():
    return appointment_controller.book_appointment()

@api_bp.route('/appointments', methods=['GET'])
@audit_log("VIEW_ALL_APPOINTMENTS", "appointments")
@require_access('appointments.read')
def get_appointments_route():
    return appointment_controller.get_appointments()

@api_bp.route('/appointments/patient/<patient_ref>', methods=['GET'])
@audit_log("VIEW_PATIENT_APPOINTMENTS", "appointments")
@require_access('appointments.read')
def get_patient_appointments_route(patient_ref):
    return appointment_controller.get_patient_appointments(patient_ref)

@api_bp.route('/appointments/<appointment_ref>', methods=['GET'])
@audit_log("VIEW_APPOINTMENT_DETAIL", "appointments")
@require_access('appointments.read')
def get_appointment_route(appointment_ref):
    return appointment_controller.get_appointment(appointment_ref)

@api_bp.route('/appointments/<appointment_ref>', methods=['PUT'])
@audit_log("UPDATE_APPOINTMENT", "appointments")
@require_access('appointments.update')
def update_appointment_route(appointment_ref):
    return appointment_controller.update_appointment(appointment_ref)

@api_bp.route('/appointments/<appointment_ref>/cancel', methods=['PUT'])
@audit_log("CANCEL_APPOINTMENT", "appointments")
@require_access('appointments.cancel')
def cancel_appointment_route(appointment_ref):
    return appointment_controller.cancel_appointment(appointment_ref)


# --- Doctor Endpoints ---
@api_bp.route('/doctors', methods=['POST'])
@audit_log("DOCTOR_REGISTRATION", "doctors")
@require_access('doctors.register')
def register_doctor_route():
    return doctor_controller.register_doctor()

@api_bp.route('/doctors', methods=['GET'])
@require_access('doctors.read')
def get_doctors_route():
    return doctor_controller.get_doctors()

@api_bp.route('/doctors/specialization/<specialization>', methods=['GET'])
@require_access('doctors.read')
def get_doctors_by_specialization_route(specialization):
    return doctor_controller.get_doctors_by_specialization(specialization)

@api_bp.route('/doctors/<doctor_ref>', methods=['GET'])
@require_access('doctors.read')
def get_doctor_route(doctor_ref):
    return doctor_controller.get_doctor(doctor_ref)

@api_bp.route('/doctors/<doctor_ref>', methods=['PUT'])
@audit_log("UPDATE_DOCTOR", "doctors")
@require_access('doctors.update')
def update_doctor_route(doctor_ref):
    return doctor_controller.update_doctor(doctor_ref)
