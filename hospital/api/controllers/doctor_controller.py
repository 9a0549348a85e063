from flask import request, jsonify
from hospital.services import doctor_service
from hospital.utils.request_utils import get_json_body, list_response

def register_doctor():
    doctor = doctor_service.register_doctor(get_json_body())
    return jsonify({'success': True, 'data': doctor.to_dict()}), 201

def get_doctors():
    doctors = doctor_service.list_doctors(
        specialization=request.args.get('specialization'),
        department=request.args.get('department'),
        status=request.args.get('status')
    )
    return jsonify(list_response(doctors)), 200

def get_doctor(doctor_ref):
    doctor = doctor_service.get_doctor(doctor_ref)
    return jsonify({'success': True, 'data': doctor.to_dict()}), 200

def update_doctor(doctor_ref):
    doctor = doctor_service.update_doctor(doctor_ref, get_json_body())
    return jsonify({'success': True, 'data': doctor.to_dict()}), 200

def get_doctors_by_specialization(specialization):
    doctors = doctor_service.list_by_specialization(specialization)
    return jsonify(list_response(doctors)), 200
