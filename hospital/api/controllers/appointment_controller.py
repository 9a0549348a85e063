from flask import request, jsonify
from hospital.services import appointment_service
from hospital.utils.decorators import get_current_identity
from hospital.utils.request_utils import get_json_body, list_response

def book_appointment():
    appointment = appointment_service.book_appointment(get_json_body(), get_current_identity())
    return jsonify({'success': True, 'data': appointment.to_dict()}), 201

def get_appointments():
    """Lists appointments, optionally filtered by ?status= and ?date=YYYY-MM-DD."""
    appointments = appointment_service.list_appointments(
        status=request.args.get('status'),
        date=request.args.get('date')
    )
    return jsonify(list_response(appointments)), 200

def get_appointment(appointment_ref):
    appointment = appointment_service.get_appointment(appointment_ref)
    return jsonify({'success': True, 'data': appointment.to_dict()}), 200

def update_appointment(appointment_ref):
    appointment = appointment_service.update_appointment(appointment_ref, get_json_body())
    return jsonify({'success': True, 'data': appointment.to_dict()}), 200

def cancel_appointment(appointment_ref):
    appointment = appointment_service.cancel_appointment(appointment_ref)
    return jsonify({'success': True, 'data': appointment.to_dict()}), 200

def get_patient_appointments(patient_ref):
    appointments = appointment_service.list_for_patient(patient_ref)
    return jsonify(list_response(appointments)), 200
